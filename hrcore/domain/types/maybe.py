"""Maybe type: an optional value without ``None`` checks at call sites."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from hrcore.domain.types.base import UnwrapError
from hrcore.domain.types.result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, repr=False)
class Maybe(Generic[T]):
    """Presence (some) or absence (none) of a value.

    ``Maybe.from_nullable`` is the only bridge from ``None``-returning code;
    ``Maybe.some(None)`` is rejected.
    """

    _value: Any = None
    _present: bool = False

    @classmethod
    def some(cls, value: T) -> "Maybe[T]":
        if value is None:
            raise ValueError("Maybe.some() cannot accept None")
        return cls(value, True)

    @classmethod
    def none(cls) -> "Maybe[Any]":
        return cls(None, False)

    @classmethod
    def from_nullable(cls, value: T | None) -> "Maybe[T]":
        return cls.none() if value is None else cls.some(value)

    @property
    def is_some(self) -> bool:
        return self._present

    @property
    def is_none(self) -> bool:
        return not self._present

    @property
    def value(self) -> T:
        if not self._present:
            raise UnwrapError("Cannot get value from None")
        return self._value

    def map(self, fn: Callable[[T], U | None]) -> "Maybe[U]":
        """Transform the value; ``None`` results or exceptions give none."""
        if self.is_none:
            return Maybe.none()
        try:
            return Maybe.from_nullable(fn(self._value))
        except Exception:
            return Maybe.none()

    def flat_map(self, fn: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        if self.is_none:
            return Maybe.none()
        return fn(self._value)

    def filter(self, predicate: Callable[[T], bool]) -> "Maybe[T]":
        if self.is_none or not predicate(self._value):
            return Maybe.none()
        return self

    def get_or_else(self, default: T) -> T:
        return self._value if self.is_some else default

    def get_or_else_get(self, supplier: Callable[[], T]) -> T:
        return self._value if self.is_some else supplier()

    def or_else(self, other: "Maybe[T]") -> "Maybe[T]":
        return self if self.is_some else other

    def to_result(self, error: E) -> Result[T, E]:
        """Success with the value, or failure with ``error`` when absent."""
        if self.is_some:
            return Result.success(self._value)
        return Result.failure(error)

    def __repr__(self) -> str:
        if self.is_some:
            return f"Maybe.some({self._value!r})"
        return "Maybe.none()"
