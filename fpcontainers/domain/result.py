"""Result type for functional error handling.

This module implements an Either-style Result type that makes error handling
explicit in type signatures without relying on exceptions for control flow.
A ``Failure`` (Left) carries an error or alternative value, a ``Success``
(Right) carries the computed value. Combinators act on ``Success`` and let
``Failure`` pass through unchanged, unless their name ends in ``_left``.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union, final

from fpcontainers.domain.exceptions import WrongVariantError
from fpcontainers.domain.maybe import ABSENT, Maybe, maybe
from fpcontainers.shared.utils import DefaultOrProducer, resolve_default

logger = logging.getLogger(__name__)

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Failure type
U = TypeVar("U")  # Map target type
C = TypeVar("C")  # Fold result type


@final
@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful result containing a value."""

    value: T

    def _get_left(self) -> Any:
        logger.debug("Failure accessor invoked on Success")
        raise WrongVariantError("Success", "_get_left")

    def _get_right(self) -> T:
        return self.value

    def is_success(self) -> bool:
        """Check if this is a success result."""
        return True

    def is_failure(self) -> bool:
        """Check if this is a failure result."""
        return False

    def fold(self, on_failure: Callable[[Any], C], on_success: Callable[[T], C]) -> C:
        """Apply ``on_success`` to the value."""
        return on_success(self.value)

    def swap(self) -> "Failure[T]":
        """Move the value to the failure side."""
        return Failure(self.value)

    def map(self, func: Callable[[T], U]) -> "Result[Any, U]":
        """Transform the success value."""
        return Success(func(self.value))

    def map_left(self, func: Callable[[Any], U]) -> "Result[U, T]":
        """Transform the failure value (does nothing for Success)."""
        return self

    def flat_map(self, func: Callable[[T], "Result[E, U]"]) -> "Result[E, U]":
        """Chain a computation that itself returns a Result."""
        return func(self.value)

    def foreach(self, func: Callable[[T], Any]) -> "Success[T]":
        """Call ``func`` with the value; returns self for chaining."""
        func(self.value)
        return self

    def foreach_left(self, func: Callable[[Any], Any]) -> "Success[T]":
        """Do nothing (no failure value); returns self for chaining."""
        return self

    def get_or_else(self, default: DefaultOrProducer[U]) -> T:
        """Get the value (the default is never resolved because this is Success)."""
        return self.value

    def contains(self, elem: Any) -> bool:
        """Check whether the success value equals ``elem``."""
        return self.value == elem

    def contains_left(self, elem: Any) -> bool:
        return False

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        """Apply ``predicate`` to the success value."""
        return predicate(self.value)

    def exists_left(self, predicate: Callable[[Any], bool]) -> bool:
        return False

    def filter_or_else(
        self, predicate: Callable[[T], bool], zero: DefaultOrProducer[E]
    ) -> "Result[E, T]":
        """Keep this result if ``predicate`` holds, otherwise fail with the resolved ``zero``."""
        if predicate(self.value):
            return self
        return Failure(resolve_default(zero))

    def to_maybe(self) -> Maybe[T]:
        """Wrap the value in a Maybe (through the smart constructor)."""
        return maybe(self.value)

    def equals(self, other: "Result[Any, Any]") -> bool:
        """Structural equality: both successes with equal values."""
        return isinstance(other, Success) and self.value == other._get_right()

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@final
@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failure result containing an error or alternative value."""

    error: E

    def _get_left(self) -> E:
        return self.error

    def _get_right(self) -> Any:
        logger.debug("Success accessor invoked on Failure")
        raise WrongVariantError("Failure", "_get_right")

    def is_success(self) -> bool:
        """Check if this is a success result."""
        return False

    def is_failure(self) -> bool:
        """Check if this is a failure result."""
        return True

    def fold(self, on_failure: Callable[[E], C], on_success: Callable[[Any], C]) -> C:
        """Apply ``on_failure`` to the error."""
        return on_failure(self.error)

    def swap(self) -> "Success[E]":
        """Move the error to the success side."""
        return Success(self.error)

    def map(self, func: Callable[[Any], U]) -> "Result[E, U]":
        """Transform the success value (does nothing for Failure)."""
        return self

    def map_left(self, func: Callable[[E], U]) -> "Result[U, Any]":
        """Transform the failure value."""
        return Failure(func(self.error))

    def flat_map(self, func: Callable[[Any], "Result[E, U]"]) -> "Result[E, U]":
        """Chain a computation (does nothing for Failure)."""
        return self

    def foreach(self, func: Callable[[Any], Any]) -> "Failure[E]":
        """Do nothing (no success value); returns self for chaining."""
        return self

    def foreach_left(self, func: Callable[[E], Any]) -> "Failure[E]":
        """Call ``func`` with the error; returns self for chaining."""
        func(self.error)
        return self

    def get_or_else(self, default: DefaultOrProducer[U]) -> U:
        """Resolve and return the default."""
        return resolve_default(default)

    def contains(self, elem: Any) -> bool:
        return False

    def contains_left(self, elem: Any) -> bool:
        """Check whether the failure value equals ``elem``."""
        return self.error == elem

    def exists(self, predicate: Callable[[Any], bool]) -> bool:
        return False

    def exists_left(self, predicate: Callable[[E], bool]) -> bool:
        """Apply ``predicate`` to the failure value."""
        return predicate(self.error)

    def filter_or_else(
        self, predicate: Callable[[Any], bool], zero: DefaultOrProducer[E]
    ) -> "Result[E, Any]":
        """Pass through unchanged; neither ``predicate`` nor ``zero`` is evaluated."""
        return self

    def to_maybe(self) -> Maybe[Any]:
        return ABSENT

    def equals(self, other: "Result[Any, Any]") -> bool:
        """Structural equality: both failures with equal errors."""
        return isinstance(other, Failure) and self.error == other._get_left()

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


# Type alias for clearer function signatures
Result = Union[Failure[E], Success[T]]


def success(value: T) -> Result[Any, T]:
    """Build a Success holding ``value``."""
    return Success(value)


def failure(error: E) -> Result[E, Any]:
    """Build a Failure holding ``error``."""
    return Failure(error)


def cond(test: bool, on_success: T, on_failure: E) -> Result[E, T]:
    """
    Build a Result from a condition.

    Args:
        test: Condition deciding the variant
        on_success: Value wrapped in Success when ``test`` is true
        on_failure: Value wrapped in Failure when ``test`` is false

    Returns:
        ``Success(on_success)`` if ``test`` else ``Failure(on_failure)``

    Example:
        >>> cond(age >= 18, age, "too young")
    """
    if test:
        return Success(on_success)
    return Failure(on_failure)
