"""Option type for values that may be absent.

An ``Option[T]`` is either ``Some(value)`` or the ``NOTHING`` singleton. Unlike
``Optional[T]``, a ``Some`` can never hold ``None``, so an absent value cannot
hide inside a present one.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Literal, TypeVar, Union, final

from outcomes.exceptions import AbsentValueError, FlattenError, UnwrapError
from outcomes.result import Err, Ok, Result
from outcomes.shared.lazy import ValueOrFn, is_absent, resolve_default

T = TypeVar("T")  # Present value type
E = TypeVar("E")  # Error type for ok_or
U = TypeVar("U")  # Map target type
R = TypeVar("R")  # Match handler result type


@final
@dataclass(frozen=True)
class Some(Generic[T]):
    """A present value. Constructing ``Some(None)`` raises AbsentValueError."""

    tag: ClassVar[Literal["some"]] = "some"

    value: T

    def __post_init__(self) -> None:
        if is_absent(self.value):
            raise AbsentValueError("Some value cannot be None")

    def is_some(self) -> bool:
        """Check if a value is present."""
        return True

    def is_none(self) -> bool:
        """Check if the value is absent."""
        return False

    def unwrap(self) -> T:
        """Get the value (safe because this is Some)."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Get the value or default (returns value because this is Some)."""
        return self.value

    def unwrap_or_else(self, func: Callable[[], T]) -> T:
        """Get the value; ``func`` is never called for Some."""
        return self.value

    def map(self, func: Callable[[T], U]) -> "Option[U]":
        """Transform the value.

        Raises:
            AbsentValueError: If ``func`` returns None
        """
        return Some(func(self.value))

    def map_or(self, func: Callable[[T], U], default: "ValueOrFn[U | None]") -> "Option[U]":
        """Transform the value, wrapping the result with ``option()``."""
        return option(func(self.value))

    def flat_map(self, func: "Callable[[T], Option[U]]") -> "Option[U]":
        """Chain a function returning an Option. Exceptions propagate."""
        return func(self.value)

    async def flat_map_async(
        self, func: "Callable[[T], Awaitable[Option[U]]]"
    ) -> "Option[U]":
        """Chain a coroutine function returning an Option and await it."""
        return await func(self.value)

    def flatten(self) -> "Option[Any]":
        """Remove one level of nesting from ``Some(Some(x))``.

        Raises:
            FlattenError: If the value is Nothing or not an Option at all
        """
        inner = self.value
        if isinstance(inner, Some):
            return inner
        if isinstance(inner, Nothing):
            raise FlattenError("Cannot flatten a Nothing value")
        raise FlattenError(
            f"Cannot flatten Some({type(inner).__name__}): value is not an Option"
        )

    def ok_or(self, error: E) -> "Result[T, E]":
        """Convert to Ok(value)."""
        return Ok(self.value)

    def match(self, *, some: Callable[[T], R], none: Callable[[], R]) -> R:
        """Call ``some`` with the value and return its result."""
        return some(self.value)

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@final
@dataclass(frozen=True)
class Nothing:
    """The absent value.

    There is exactly one instance, ``NOTHING``; calling ``Nothing()`` returns it.
    """

    tag: ClassVar[Literal["none"]] = "none"

    _instance: ClassVar["Nothing | None"] = None

    def __new__(cls) -> "Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self) -> str:
        # Pickle and copy resolve to the module-level singleton
        return "NOTHING"

    def is_some(self) -> bool:
        """Check if a value is present."""
        return False

    def is_none(self) -> bool:
        """Check if the value is absent."""
        return True

    def unwrap(self) -> Any:
        """Get the value (raises because this is Nothing)."""
        raise UnwrapError("Cannot unwrap Nothing")

    def unwrap_or(self, default: T) -> T:
        """Get the default (returns default because this is Nothing)."""
        return default

    def unwrap_or_else(self, func: Callable[[], T]) -> T:
        """Compute the default."""
        return func()

    def map(self, func: Callable[[Any], U]) -> "Nothing":
        """Transform the value (does nothing for Nothing)."""
        return self

    def map_or(self, func: Callable[[Any], U], default: "ValueOrFn[U | None]") -> "Option[U]":
        """Fall back to ``default``.

        A callable default is invoked with no arguments. The result is wrapped
        with ``option()``, so a None default gives Nothing.
        """
        return option(resolve_default(default))

    def flat_map(self, func: "Callable[[Any], Option[U]]") -> "Nothing":
        """Chain a function returning an Option (does nothing for Nothing)."""
        return self

    async def flat_map_async(self, func: "Callable[[Any], Awaitable[Option[U]]]") -> "Nothing":
        """Chain a coroutine function (returns at once for Nothing)."""
        return self

    def flatten(self) -> "Nothing":
        """Flatten (returns NOTHING for Nothing)."""
        return self

    def ok_or(self, error: E) -> "Err[E]":
        """Convert to Err(error)."""
        return Err(error)

    def match(self, *, some: Callable[[Any], R], none: Callable[[], R]) -> R:
        """Call ``none`` and return its result."""
        return none()

    def __repr__(self) -> str:
        return "Nothing"


NOTHING = Nothing()
"""The single absent value shared by every Option."""

# Type alias for clearer function signatures
Option = Union[Some[T], Nothing]


def some(value: T) -> Some[T]:
    """Wrap a present value.

    Raises:
        AbsentValueError: If ``value`` is None
    """
    return Some(value)


def nothing() -> Nothing:
    """Return the absent value."""
    return NOTHING


def option(value: "T | None") -> "Option[T]":
    """Wrap ``value``, mapping None to Nothing."""
    return NOTHING if is_absent(value) else Some(value)  # type: ignore[arg-type]
