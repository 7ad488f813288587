"""
fpcontainers: Maybe and Result containers with functional combinators.

Replace ``None`` checks with ``Maybe`` and exception-driven error handling
with ``Result``, then compose with ``map``, ``flat_map``, ``fold`` and friends.
"""

from fpcontainers.domain import (
    ABSENT,
    Absent,
    ContainerError,
    Failure,
    Maybe,
    Present,
    Result,
    Success,
    WrongVariantError,
    absent,
    cond,
    failure,
    find,
    maybe,
    present,
    success,
)
from fpcontainers.shared import (
    Settings,
    configure_logging,
    get_logger,
    is_function,
    resolve_default,
)

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "Absent",
    "ContainerError",
    "Failure",
    "Maybe",
    "Present",
    "Result",
    "Settings",
    "Success",
    "WrongVariantError",
    "absent",
    "configure_logging",
    "cond",
    "failure",
    "find",
    "get_logger",
    "is_function",
    "maybe",
    "present",
    "resolve_default",
    "success",
    "__version__",
]
