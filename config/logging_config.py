"""
Logging configuration helpers and shared logger instance
"""

import logging
import logging.handlers
import sys
from pathlib import Path

from config.settings import settings

ROOT_LOGGER_NAME = "vendor-negotiation"

def _build_formatter() -> logging.Formatter:
    default_format = "%(asctime)s | %(levelname)-8s | %(module)s:%(funcName)s:%(lineno)d - %(message)s"
    return logging.Formatter(
        fmt=settings.log_format or default_format,
        datefmt=settings.log_date_format
    )

def _build_file_handler(formatter: logging.Formatter) -> logging.Handler:
    """
    Create a rotating file handler from LOG_FILE_* settings

    The parent directory of LOG_FILE_PATH is created if missing
    """
    log_path = Path(settings.log_file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.TimedRotatingFileHandler(
        filename=log_path,
        when=settings.log_file_rotation,
        interval=1,
        backupCount=settings.log_file_retention,
        encoding="utf-8"
    )
    handler.setFormatter(formatter)
    return handler

def setup_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Configure and return a named logger with console and optional file output

    Configuration is loaded from settings (LOG_LEVEL, LOG_TO_FILE, LOG_FILE_*)

    Args:
        name: Logger name (default 'vendor-negotiation')

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        level = getattr(logging, settings.log_level.upper(), logging.INFO)
        logger.setLevel(level)

        formatter = _build_formatter()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if settings.log_to_file:
            logger.addHandler(_build_file_handler(formatter))

    logger.propagate = False
    return logger

def get_logger(component: str) -> logging.Logger:
    """
    Return a child of the shared application logger

    Child loggers inherit the handlers configured by setup_logger, so
    records keep a single output format while naming their component

    Args:
        component: Dotted component name, e.g. 'negotiation.cache'
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}")

logger = setup_logger()
