"""Helpers shared by the outcome and presence types."""

from collections.abc import Callable
from typing import Any, TypeVar, Union

T = TypeVar("T")

# A plain value or a zero-argument producer of one
ValueOrFn = Union[T, Callable[[], T]]


def is_absent(value: Any) -> bool:
    """Check whether ``value`` is the absence sentinel (``None``)."""
    return value is None


def resolve_default(default: "ValueOrFn[T]") -> T:
    """Resolve a lazy default.

    Callables are invoked with no arguments; anything else is returned as-is.
    Only call this on the fallback path so producers stay lazy.

    Args:
        default: A value or a zero-argument callable producing one

    Returns:
        The resolved value
    """
    if callable(default):
        return default()
    return default
