"""Vendor statistics service: fetch, normalize and cache negotiation analytics"""
from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Dict, Iterable, Optional

from config import get_logger
from src.core import AppError, InvalidInputError, NegotiationMetadata
from src.core.ports.statistics import IStatisticsSource
from src.negotiation.cache import StatisticsCache
from src.normalization import normalize

logger = get_logger("negotiation.service")


class VendorStatisticsService:
    """
    Loads negotiation statistics per vendor and keeps them for reuse across views

    Orchestrates:
    1. Fetch the raw analytics document from the statistics source
    2. Normalize it into NegotiationMetadata
    3. Store it in the cache keyed by vendor id

    Concurrent requests for the same vendor share a single fetch.

    Attributes:
        source: Provider of raw analytics documents
        cache: StatisticsCache holding normalized records
        max_workers: Upper bound on parallel fetches in get_statistics_for_multiple
    """

    def __init__(
        self,
        source: IStatisticsSource,
        cache: Optional[StatisticsCache] = None,
        max_workers: int = 4,
    ) -> None:
        self.source = source
        self.cache = cache if cache is not None else StatisticsCache()
        self.max_workers = max(1, max_workers)
        self._in_flight: Dict[str, Future] = {}
        self._lock = threading.Lock()

    def _fetch_and_store(self, vendor_id: str) -> NegotiationMetadata:
        raw = self.source.get_statistics(vendor_id)
        metadata = normalize(raw)
        self.cache.put(vendor_id, metadata)
        logger.info(f"Statistics loaded and cached for vendor {vendor_id}")
        return metadata

    def get_statistics(self, vendor_id: str) -> NegotiationMetadata:
        """
        Fetch, normalize and cache the statistics of one vendor

        Always goes to the source, even when the vendor is cached. A call
        made while another fetch for the same vendor is running waits for
        that fetch and returns its result.

        Args:
            vendor_id: Backend vendor identifier

        Returns:
            Freshly normalized NegotiationMetadata

        Raises:
            InvalidInputError: If vendor_id is empty
            StatisticsFetchError: If the source fails
        """
        if not isinstance(vendor_id, str) or not vendor_id.strip():
            raise InvalidInputError(message="Vendor id is required and must be non-empty")
        vendor_id = vendor_id.strip()

        with self._lock:
            future = self._in_flight.get(vendor_id)
            owner = future is None
            if owner:
                future = Future()
                self._in_flight[vendor_id] = future

        if not owner:
            logger.debug(f"Joining in-flight statistics fetch for vendor {vendor_id}")
            return future.result()

        try:
            metadata = self._fetch_and_store(vendor_id)
        except BaseException as e:
            future.set_exception(e)
            raise
        else:
            future.set_result(metadata)
            return metadata
        finally:
            with self._lock:
                self._in_flight.pop(vendor_id, None)

    def get_cached_statistics(self, vendor_id: str) -> Optional[NegotiationMetadata]:
        """Return cached statistics without fetching"""
        return self.cache.get(vendor_id)

    def get_all_cached_statistics(self) -> Dict[str, NegotiationMetadata]:
        return self.cache.get_all()

    def has_statistics(self, vendor_id: str) -> bool:
        return self.cache.has(vendor_id)

    def _cached_or_fetch(self, vendor_id: str) -> NegotiationMetadata:
        cached = self.cache.get(vendor_id)
        if cached is not None:
            return cached
        return self.get_statistics(vendor_id)

    def get_statistics_for_multiple(self, vendor_ids: Iterable[str]) -> Dict[str, NegotiationMetadata]:
        """
        Load statistics for several vendors, e.g. for a comparison view

        Cached vendors are served from the cache, the rest are fetched in
        parallel. Vendors that fail to load are logged and left out.

        Args:
            vendor_ids: Vendor identifiers; duplicates and blanks are ignored

        Returns:
            Dict vendor_id -> NegotiationMetadata, in input order
        """
        ids = list(dict.fromkeys(
            v.strip() for v in vendor_ids if isinstance(v, str) and v.strip()
        ))
        if not ids:
            return {}

        results: Dict[str, NegotiationMetadata] = {}
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(ids))) as pool:
            futures = {vendor_id: pool.submit(self._cached_or_fetch, vendor_id) for vendor_id in ids}
            for vendor_id, future in futures.items():
                try:
                    results[vendor_id] = future.result()
                except AppError as e:
                    logger.error(f"Failed to load statistics for vendor {vendor_id}: {e}")

        return results
