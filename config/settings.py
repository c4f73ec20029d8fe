"""Application settings loaded from .env file"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional, Literal

LOG_LEVEL = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables (.env)
    """
    # Logging configuration
    log_level: LOG_LEVEL = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)"
    )
    log_format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(module)s:%(funcName)s:%(lineno)d - %(message)s",
        description="Default log format (can be customized if needed)"
    )
    log_date_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Date/time format for logs"
    )
    log_to_file: bool = Field(
        default=False,
        description="If true, enable logging to a file"
    )
    log_file_path: str = Field(
        default="logs/app.log",
        description="Path to log file"
    )
    log_file_rotation: str = Field(
        default="midnight",
        description="Log file rotation interval"
    )
    log_file_retention: int = Field(
        default=7,
        ge=1,
        description="Number of days to retain log files"
    )

    # Negotiation backend
    api_base_url: str = Field(
        default="http://localhost:8000/api",
        description="Base URL of the negotiation backend REST API"
    )
    api_token: Optional[str] = Field(
        default=None,
        description="Bearer token sent with every backend request (identity provider ID token)"
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for a single backend request"
    )

    # Statistics cache
    statistics_cache_dir: Optional[str] = Field(
        default="data/statistics",
        description="Directory for persisted vendor statistics; None disables durable storage"
    )
    persist_statistics: bool = Field(
        default=True,
        description="If true, normalized statistics are written to statistics_cache_dir"
    )
    max_parallel_fetches: int = Field(
        default=4,
        ge=1,
        description="Maximum number of vendors fetched concurrently when comparing"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
