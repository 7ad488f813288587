"""
Shared utilities module.

This module contains common utilities used by both containers, including
default-value resolution, settings and logging configuration.
"""

from fpcontainers.shared.config import Settings
from fpcontainers.shared.logging_config import configure_logging, get_logger
from fpcontainers.shared.utils import is_function, resolve_default

__all__ = ["Settings", "configure_logging", "get_logger", "is_function", "resolve_default"]
