"""Either type: one of two values, conventionally error (left) or success (right)."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from hrcore.domain.types.base import UnwrapError

L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")


@dataclass(frozen=True, slots=True, repr=False)
class Either(Generic[L, R]):
    """Left or right value."""

    _is_left: bool
    _left: Any = None
    _right: Any = None

    @classmethod
    def left(cls, value: L) -> "Either[L, Any]":
        return cls(True, value, None)

    @classmethod
    def right(cls, value: R) -> "Either[Any, R]":
        return cls(False, None, value)

    @property
    def is_left(self) -> bool:
        return self._is_left

    @property
    def is_right(self) -> bool:
        return not self._is_left

    @property
    def left_value(self) -> L:
        if not self._is_left:
            raise UnwrapError("Cannot get left value from right Either")
        return self._left

    @property
    def right_value(self) -> R:
        if self._is_left:
            raise UnwrapError("Cannot get right value from left Either")
        return self._right

    def map(self, fn: Callable[[R], U]) -> "Either[L, U]":
        """Transform the right value; an exception from ``fn`` becomes a left."""
        if self._is_left:
            return Either.left(self._left)
        try:
            return Either.right(fn(self._right))
        except Exception as exc:
            return Either.left(exc)

    def map_left(self, fn: Callable[[L], U]) -> "Either[U, R]":
        if not self._is_left:
            return Either.right(self._right)
        try:
            return Either.left(fn(self._left))
        except Exception as exc:
            return Either.left(exc)

    def flat_map(self, fn: Callable[[R], "Either[L, U]"]) -> "Either[L, U]":
        if self._is_left:
            return Either.left(self._left)
        return fn(self._right)

    def fold(self, left_fn: Callable[[L], U], right_fn: Callable[[R], U]) -> U:
        if self._is_left:
            return left_fn(self._left)
        return right_fn(self._right)

    def get_or_else(self, default: R) -> R:
        return default if self._is_left else self._right

    def swap(self) -> "Either[R, L]":
        if self._is_left:
            return Either.right(self._left)
        return Either.left(self._right)

    def __repr__(self) -> str:
        if self._is_left:
            return f"Either.left({self._left!r})"
        return f"Either.right({self._right!r})"
