"""Maybe type for values that may be absent.

This module implements an Option-style container so that a missing value is
part of the type instead of a ``None`` check scattered through the code.
``Maybe`` is a closed union of exactly two variants: ``Present`` and ``Absent``.

Usage:
    from fpcontainers.domain.maybe import maybe

    name = maybe(lookup(code)).map(lambda c: c.name).get_or_else("Not found")
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union, final

from fpcontainers.domain.exceptions import WrongVariantError
from fpcontainers.shared.utils import DefaultOrProducer, resolve_default

logger = logging.getLogger(__name__)

T = TypeVar("T")  # Payload type
U = TypeVar("U")  # Map target type
B = TypeVar("B")  # Default / fold result type


@final
@dataclass(frozen=True)
class Present(Generic[T]):
    """Maybe variant holding exactly one value."""

    value: T

    def _get(self) -> T:
        return self.value

    def is_empty(self) -> bool:
        """Check if this is the empty variant."""
        return False

    def is_defined(self) -> bool:
        """Check if a value is held."""
        return True

    def non_empty(self) -> bool:
        """Alias of is_defined."""
        return True

    def get_or_else(self, default: DefaultOrProducer[B]) -> T:
        """Get the value (the default is never resolved because this is Present)."""
        return self.value

    def or_none(self) -> T:
        """Get the value; ``None`` is only returned by Absent."""
        return self.value

    def map(self, func: Callable[[T], U]) -> "Maybe[U]":
        """Transform the value."""
        return Present(func(self.value))

    def flat_map(self, func: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        """Transform the value with a function that itself returns a Maybe."""
        return func(self.value)

    def fold(self, if_empty: Callable[[], B], func: Callable[[T], B]) -> B:
        """Apply ``func`` to the value."""
        return func(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> "Maybe[T]":
        """Keep this value only if ``predicate`` holds for it."""
        return self if predicate(self.value) else ABSENT

    def filter_equals(self, elem: Any) -> "Maybe[T]":
        """Keep this value only if it equals ``elem``."""
        return self.filter(lambda value: value == elem)

    def filter_not(self, predicate: Callable[[T], bool]) -> "Maybe[T]":
        """Keep this value only if ``predicate`` does not hold for it."""
        return ABSENT if predicate(self.value) else self

    def filter_not_equals(self, elem: Any) -> "Maybe[T]":
        """Keep this value only if it differs from ``elem``."""
        return self.filter_not(lambda value: value == elem)

    def contains(self, elem: Any) -> bool:
        """Check whether the value equals ``elem``."""
        return self.value == elem

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        """Check whether ``predicate`` holds for the value."""
        return predicate(self.value)

    def forall(self, predicate: Callable[[T], bool]) -> bool:
        """Check whether ``predicate`` holds for the value."""
        return predicate(self.value)

    def foreach(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` with the value."""
        func(self.value)

    def on_present(self, func: Callable[[T], Any]) -> "Maybe[T]":
        """Call ``func`` with the value and return self for chaining."""
        func(self.value)
        return self

    def on_absent(self, func: Callable[[], Any]) -> "Maybe[T]":
        """Do nothing (a value is present) and return self for chaining."""
        return self

    def or_else(self, alternative: "Maybe[T]") -> "Maybe[T]":
        """Return self, ignoring the alternative."""
        return self

    def equals(self, other: "Maybe[Any]") -> bool:
        """Structural equality: both present with equal values."""
        return isinstance(other, Present) and self.value == other._get()

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __repr__(self) -> str:
        return f"Present({self.value!r})"


@final
@dataclass(frozen=True)
class Absent(Generic[T]):
    """Maybe variant holding no value."""

    def _get(self) -> T:
        logger.debug("Payload accessor invoked on Absent")
        raise WrongVariantError("Absent", "_get")

    def is_empty(self) -> bool:
        """Check if this is the empty variant."""
        return True

    def is_defined(self) -> bool:
        """Check if a value is held."""
        return False

    def non_empty(self) -> bool:
        """Alias of is_defined."""
        return False

    def get_or_else(self, default: DefaultOrProducer[B]) -> B:
        """Resolve and return the default."""
        return resolve_default(default)

    def or_none(self) -> None:
        """Return ``None`` for interop with APIs built around nulls."""
        return None

    def map(self, func: Callable[[T], U]) -> "Maybe[U]":
        """Transform the value (does nothing for Absent)."""
        return self  # type: ignore

    def flat_map(self, func: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        """Transform the value (does nothing for Absent)."""
        return self  # type: ignore

    def fold(self, if_empty: Callable[[], B], func: Callable[[T], B]) -> B:
        """Evaluate ``if_empty``."""
        return if_empty()

    def filter(self, predicate: Callable[[T], bool]) -> "Maybe[T]":
        return self

    def filter_equals(self, elem: Any) -> "Maybe[T]":
        return self

    def filter_not(self, predicate: Callable[[T], bool]) -> "Maybe[T]":
        return self

    def filter_not_equals(self, elem: Any) -> "Maybe[T]":
        return self

    def contains(self, elem: Any) -> bool:
        return False

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        return False

    def forall(self, predicate: Callable[[T], bool]) -> bool:
        """Vacuously true: there is no value to falsify ``predicate``."""
        return True

    def foreach(self, func: Callable[[T], Any]) -> None:
        """Do nothing (no value to pass)."""
        return None

    def on_present(self, func: Callable[[T], Any]) -> "Maybe[T]":
        """Do nothing (no value) and return self for chaining."""
        return self

    def on_absent(self, func: Callable[[], Any]) -> "Maybe[T]":
        """Call ``func`` and return self for chaining."""
        func()
        return self

    def or_else(self, alternative: "Maybe[T]") -> "Maybe[T]":
        """Return the alternative."""
        return alternative

    def equals(self, other: "Maybe[Any]") -> bool:
        """Structural equality: every Absent equals every other Absent."""
        return isinstance(other, Absent)

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __repr__(self) -> str:
        return "Absent"


# Type alias for clearer function signatures
Maybe = Union[Present[T], Absent[T]]

# Shared empty instance
ABSENT: Absent[Any] = Absent()


def maybe(value: T | None) -> Maybe[T]:
    """
    Wrap a nullable value.

    This is the only place where ``None`` collapses to ``Absent``. Falsy
    values such as ``False``, ``0`` or ``""`` are still present.

    Args:
        value: Any value, possibly ``None``

    Returns:
        ``ABSENT`` if ``value`` is ``None``, otherwise ``Present(value)``
    """
    if value is None:
        return ABSENT
    return Present(value)


present = maybe


def absent() -> Maybe[Any]:
    """Return the shared empty instance."""
    return ABSENT


def find(items: Iterable[T], predicate: Callable[[T], bool]) -> Maybe[T]:
    """Return the first element of ``items`` satisfying ``predicate``, if any."""
    for item in items:
        if predicate(item):
            return maybe(item)
    return ABSENT
