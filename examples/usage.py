"""Worked examples for Maybe and Result.

Each function shows a common way of replacing ``None`` checks or
try/except blocks with the containers.
"""

from collections.abc import Callable
from typing import Any

from fpcontainers import Result, cond, failure, find, success

COUNTRIES = [
    {"name": "United States", "code": 1},
    {"name": "United Kingdom", "code": 44},
]

AGE_MIN = 14
AGE_MAX = 30


def find_country_name(code: int) -> str:
    """Look up a country name by dialing code, falling back to "Not found"."""
    return (
        find(COUNTRIES, lambda country: country["code"] == code)
        .map(lambda country: country["name"])
        .get_or_else("Not found")
    )


def try_parse_int(text: str) -> Result[str, int]:
    """Parse a base-10 integer, failing with "not a number"."""
    try:
        number: int | None = int(text, 10)
    except ValueError:
        number = None
    return cond(number is not None, number, "not a number")


def validate_age(text: str) -> Result[str, int]:
    """Parse an age and check it lies within the accepted range."""
    return (
        try_parse_int(text)
        .map_left(lambda _: "Invalid input, the age should be a number.")
        .filter_or_else(
            lambda age: AGE_MIN <= age <= AGE_MAX,
            f"The age should be in range between {AGE_MIN} and {AGE_MAX}.",
        )
    )


def report(
    number_or_error: Result[Exception, int],
    print_number: Callable[[int], Any],
    print_error: Callable[[str], Any],
) -> None:
    """Send a number to ``print_number`` or an error message to ``print_error``."""
    (
        number_or_error.map(lambda number: number)
        .foreach(print_number)
        .map_left(lambda error: str(error))
        .foreach_left(print_error)
    )


def safe_divide(a: float, b: float) -> Result[str, float]:
    """Divide without raising on a zero divisor."""
    if b == 0:
        return failure("division by zero")
    return success(a / b)
