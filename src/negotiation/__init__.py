"""
Negotiation statistics module
"""

from .client import StatisticsApiClient
from .cache import StatisticsCache
from .service import VendorStatisticsService
from .comparison import (
    COMPARISON_COLUMNS,
    build_comparison_table,
    format_currency,
    health_band,
    rank_vendors,
    risk_band,
)
from .container import (
    get_statistics_client,
    get_statistics_cache,
    get_statistics_service,
)

__all__ = [
    "StatisticsApiClient",
    "StatisticsCache",
    "VendorStatisticsService",
    "COMPARISON_COLUMNS",
    "build_comparison_table",
    "format_currency",
    "health_band",
    "rank_vendors",
    "risk_band",
    "get_statistics_client",
    "get_statistics_cache",
    "get_statistics_service",
]
