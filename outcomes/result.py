"""Result type for functional error handling.

This module implements a Rust-style Result type that makes error handling
explicit in type signatures without relying on exceptions for control flow.

A ``Result[T, E]`` is either ``Ok(value)`` or ``Err(error)``. Both variants are
frozen dataclasses and the union is closed: code narrows with ``is_ok()`` /
``is_err()``, ``match(ok=..., err=...)`` or a ``match`` statement::

    match divide(10, 2):
        case Ok(value):
            ...
        case Err(error):
            ...
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Generic, Literal, TypeVar, Union, final

from pydantic import ValidationError

from outcomes.exceptions import UnwrapError
from outcomes.shared.config import get_settings

if TYPE_CHECKING:
    from outcomes.option import Option

logger = logging.getLogger(__name__)

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Map target type
R = TypeVar("R")  # Match handler result type


def _log_captured_enabled() -> bool:
    # Invalid settings must never turn a captured exception into a new one
    try:
        return get_settings().log_captured_exceptions
    except ValidationError:
        return False


@final
@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result containing a value."""

    tag: ClassVar[Literal["value"]] = "value"

    value: T

    def is_ok(self) -> bool:
        """Check if this is a success result."""
        return True

    def is_err(self) -> bool:
        """Check if this is an error result."""
        return False

    def unwrap(self) -> T:
        """Get the value (safe because this is Ok)."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Get the value or default (returns value because this is Ok)."""
        return self.value

    def unwrap_or_else(self, func: Callable[[E], T]) -> T:
        """Get the value; ``func`` is never called for Ok."""
        return self.value

    def map(self, func: Callable[[T], U]) -> "Result[U, E]":
        """Transform the success value.

        Exceptions raised by ``func`` are captured and returned as ``Err``.
        """
        try:
            return Ok(func(self.value))
        except Exception as e:
            captured = Err(e)
            if _log_captured_enabled():
                logger.debug(f"map captured {type(e).__name__} from {func!r}: {e}")
            return captured  # type: ignore[return-value]

    def flat_map(self, func: "Callable[[T], Result[U, E]]") -> "Result[U, E]":
        """Chain a function returning a Result. Exceptions propagate."""
        return func(self.value)

    async def flat_map_async(
        self, func: "Callable[[T], Awaitable[Result[U, E]]]"
    ) -> "Result[U, E]":
        """Chain a coroutine function returning a Result and await it."""
        return await func(self.value)

    def match(self, *, ok: Callable[[T], R], err: Callable[[E], R]) -> R:
        """Call ``ok`` with the value and return its result."""
        return ok(self.value)

    def to_option(self) -> "Option[T]":
        """Convert to Some(value), or Nothing if the value is None."""
        from outcomes.option import option

        return option(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@final
@dataclass(frozen=True)
class Err(Generic[E]):
    """Error result containing an error value.

    The error is not required to be an exception.
    """

    tag: ClassVar[Literal["error"]] = "error"

    error: E

    def is_ok(self) -> bool:
        """Check if this is a success result."""
        return False

    def is_err(self) -> bool:
        """Check if this is an error result."""
        return True

    def unwrap(self) -> T:  # type: ignore[type-var]
        """Get the value (raises because this is Err)."""
        message = f"Called unwrap on Err: {self.error!r}"
        if isinstance(self.error, BaseException):
            raise UnwrapError(message, self.error) from self.error
        raise UnwrapError(message, self.error)

    def unwrap_or(self, default: T) -> T:  # type: ignore[type-var]
        """Get the value or default (returns default because this is Err)."""
        return default

    def unwrap_or_else(self, func: Callable[[E], T]) -> T:  # type: ignore[type-var]
        """Compute a value from the error."""
        return func(self.error)

    def map(self, func: Callable[[T], U]) -> "Err[E]":  # type: ignore[type-var]
        """Transform the success value (does nothing for Err)."""
        return self

    def flat_map(self, func: "Callable[[T], Result[U, E]]") -> "Err[E]":  # type: ignore[type-var]
        """Chain a function returning a Result (does nothing for Err)."""
        return self

    async def flat_map_async(
        self, func: "Callable[[T], Awaitable[Result[U, E]]]"  # type: ignore[type-var]
    ) -> "Err[E]":
        """Chain a coroutine function (returns at once for Err)."""
        return self

    def match(self, *, ok: Callable[[T], R], err: Callable[[E], R]) -> R:  # type: ignore[type-var]
        """Call ``err`` with the error and return its result."""
        return err(self.error)

    def to_option(self) -> "Option[T]":  # type: ignore[type-var]
        """Convert to Nothing."""
        from outcomes.option import NOTHING

        return NOTHING

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for clearer function signatures
Result = Union[Ok[T], Err[E]]
