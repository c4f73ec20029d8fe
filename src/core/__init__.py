"""
Core domain layer
"""
from .models import NegotiationMetadata, NegotiationStrategy, ComparisonRow
from .exceptions import AppError, InvalidInputError, StatisticsFetchError, StatisticsCacheError

__all__ = [
    "NegotiationMetadata",
    "NegotiationStrategy",
    "ComparisonRow",
    "AppError",
    "InvalidInputError",
    "StatisticsFetchError",
    "StatisticsCacheError",
]
