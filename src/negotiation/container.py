"""Container for the statistics service with dependency injection"""
from functools import lru_cache
from pathlib import Path

from config import settings
from src.negotiation import (
    StatisticsApiClient,
    StatisticsCache,
    VendorStatisticsService,
)

@lru_cache(maxsize=1)
def get_statistics_client() -> StatisticsApiClient:
    """
    Get singleton StatisticsApiClient instance

    Returns:
        StatisticsApiClient configured with settings.api_base_url, api_token
        and request_timeout_seconds
        Subsequent calls return the same cached instance
    """
    return StatisticsApiClient(
        base_url=settings.api_base_url,
        token=settings.api_token,
        timeout=settings.request_timeout_seconds,
    )

@lru_cache(maxsize=1)
def get_statistics_cache() -> StatisticsCache:
    """
    Get singleton StatisticsCache instance, preloaded from durable storage

    Returns:
        StatisticsCache persisting to settings.statistics_cache_dir when
        settings.persist_statistics is enabled, memory-only otherwise
    """
    storage_dir = None
    if settings.persist_statistics and settings.statistics_cache_dir:
        storage_dir = Path(settings.statistics_cache_dir)

    cache = StatisticsCache(storage_dir=storage_dir)
    cache.load_from_storage()
    return cache

@lru_cache(maxsize=1)
def get_statistics_service() -> VendorStatisticsService:
    """
    Get singleton VendorStatisticsService instance with all dependencies wired

    Returns:
        VendorStatisticsService with the API client and cache injected
        Subsequent calls return the same cached instance
    """
    return VendorStatisticsService(
        source=get_statistics_client(),
        cache=get_statistics_cache(),
        max_workers=settings.max_parallel_fetches,
    )
