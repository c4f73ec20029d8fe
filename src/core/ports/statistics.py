"""Ports (interface) for the statistics source"""
from typing import Any, Protocol

class IStatisticsSource(Protocol):
    """Interface for anything that returns raw analytics JSON for a vendor"""

    def get_statistics(self, vendor_id: str) -> Any:
        """
        Fetch the raw, weakly-typed analytics document for a vendor

        Args:
            vendor_id (str): Backend vendor identifier

        Returns:
            Any: Decoded JSON document (phase-keyed or flat-labeled shape)

        Raises:
            AppError: When the document cannot be obtained
        """
        ...
