"""Default-value resolution shared by both containers.

``get_or_else``-style operations accept either a plain value or a
zero-argument producer. The producer is only called on the branch that
actually needs the default.
"""

from collections.abc import Callable
from typing import Any, TypeVar, Union

A = TypeVar("A")

DefaultOrProducer = Union[A, Callable[[], A]]


def is_function(obj: Any) -> bool:
    """Check whether ``obj`` should be treated as a producer."""
    return callable(obj)


def resolve_default(default: DefaultOrProducer[A]) -> A:
    """
    Return the concrete default value.

    Args:
        default: A value, or a zero-argument callable producing the value

    Returns:
        ``default()`` if ``default`` is callable, otherwise ``default`` itself

    Example:
        >>> resolve_default(42)
        42
        >>> resolve_default(lambda: 6 * 7)
        42
    """
    if is_function(default):
        return default()  # type: ignore[operator]
    return default  # type: ignore[return-value]
