"""
Domain module.

Contains the two container types and the exceptions they raise on misuse.
"""

from fpcontainers.domain.exceptions import ContainerError, WrongVariantError
from fpcontainers.domain.maybe import ABSENT, Absent, Maybe, Present, absent, find, maybe, present
from fpcontainers.domain.result import Failure, Result, Success, cond, failure, success

__all__ = [
    "ABSENT",
    "Absent",
    "ContainerError",
    "Failure",
    "Maybe",
    "Present",
    "Result",
    "Success",
    "WrongVariantError",
    "absent",
    "cond",
    "failure",
    "find",
    "maybe",
    "present",
    "success",
]
