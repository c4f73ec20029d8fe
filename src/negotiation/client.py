"""HTTP client for the negotiation backend statistics endpoint"""
from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from config import get_logger
from src.core import InvalidInputError, StatisticsFetchError

logger = get_logger("negotiation.client")


class StatisticsApiClient:
    """
    Thin wrapper over the backend REST API

    Only the analytics endpoint is consumed here:
    GET {base_url}/statistics/compile/{vendor_id}

    Attributes:
        base_url: API root, without trailing slash
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._token = token
        self._session = session or requests.Session()

    def set_token(self, token: Optional[str]) -> None:
        """Replace the bearer token (e.g. after the identity provider refreshes it)"""
        self._token = token

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _get(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self._session.get(url, headers=self._headers(), timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            raise self._http_error(e) from e
        except requests.RequestException as e:
            raise StatisticsFetchError(message=f"Request to {url} failed: {e}", status=0) from e

        try:
            return response.json()
        except ValueError as e:
            raise StatisticsFetchError(
                message=f"Backend returned a non-JSON body for {url}",
                status=response.status_code,
            ) from e

    @staticmethod
    def _http_error(error: requests.HTTPError) -> StatisticsFetchError:
        """
        Map an HTTP error to StatisticsFetchError

        A structured backend body {"message": ..., "code": ...} takes
        precedence over the generic requests message
        """
        response = error.response
        status = response.status_code if response is not None else None
        message = str(error)
        backend_code = None

        if response is not None:
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and body.get("message"):
                message = str(body["message"])
                backend_code = body.get("code")

        return StatisticsFetchError(message=message, status=status, backend_code=backend_code)

    def get_statistics(self, vendor_id: str) -> Any:
        """
        Fetch the raw analytics document of a vendor

        Args:
            vendor_id: Backend vendor identifier

        Returns:
            Decoded JSON body, unvalidated

        Raises:
            InvalidInputError: If vendor_id is empty
            StatisticsFetchError: On transport errors, HTTP errors or non-JSON bodies
        """
        if not isinstance(vendor_id, str) or not vendor_id.strip():
            raise InvalidInputError(message="Vendor id is required and must be non-empty")

        logger.info(f"Fetching statistics for vendor {vendor_id}")
        return self._get(f"/statistics/compile/{quote(vendor_id.strip(), safe='')}")
