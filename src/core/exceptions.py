"""Custom exceptions for the vendor negotiation statistics application"""

from typing import Any, Dict, Optional


class AppError(Exception):
    """
    Base exception for all application errors

    Attributes:
        message: Human-readable error message
        code: Short error code for identification
    """

    code: str = "GENERAL_ERROR"
    message: str = "An application error occurred"

    def __init__(
        self,
        code: Optional[str] = None,
        message: Optional[str] = None,
        **kwargs: Any
    ):
        self.code = code or self.code
        self.message = message or self.message
        self.extra = kwargs
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for response"""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                **self.extra,
            }
        }

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

class InvalidInputError(AppError):
    """Raised when caller input is invalid (empty vendor id, unparsable JSON text, etc.)"""
    code = "INVALID_INPUT"
    message = "The provided input is invalid or malformed"

class StatisticsFetchError(AppError):
    """
    Raised when the backend statistics endpoint cannot be reached or answers with an error

    Extra attributes (status, backend_code) are included in to_dict()
    """
    code = "STATISTICS_FETCH_FAILED"
    message = "Failed to load negotiation statistics from the backend"

    @property
    def status(self) -> Optional[int]:
        return self.extra.get("status")

class StatisticsCacheError(AppError):
    """Raised when the statistics cache directory is unusable"""
    code = "STATISTICS_CACHE_ERROR"
    message = "The statistics cache storage is not available"
