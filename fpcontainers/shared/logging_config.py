"""Logging configuration.

The library only logs through ``logging.getLogger(__name__)`` and never
touches the root logger. Applications that want to see the package's
messages call ``configure_logging`` once at startup.

Usage:
    from fpcontainers.shared.logging_config import configure_logging, get_logger

    configure_logging()
    logger = get_logger(__name__)
"""

import logging
import sys

from fpcontainers.shared.config import Settings

PACKAGE_LOGGER = "fpcontainers"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        settings: Settings to read the level and formats from (defaults to
            a fresh ``Settings()`` loaded from the environment)

    Returns:
        The configured ``fpcontainers`` logger
    """
    if settings is None:
        settings = Settings()

    logger = logging.getLogger(PACKAGE_LOGGER)
    numeric_level = getattr(logging, settings.log_level, logging.WARNING)
    logger.setLevel(numeric_level)

    # Add console handler if no handlers exist
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=settings.log_format, datefmt=settings.log_date_format)
        )
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module (usually ``__name__``)."""
    return logging.getLogger(name)
