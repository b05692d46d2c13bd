"""Result type: success or failure, without raising for business errors."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from hrcore.domain.types.base import CombinedError, UnwrapError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True, slots=True, repr=False)
class Result(Generic[T, E]):
    """Outcome of an operation that can fail.

    Build instances with ``Result.success`` or ``Result.failure`` only.
    Reading ``value`` on a failure (or ``error`` on a success) raises
    ``UnwrapError``.
    """

    _is_success: bool
    _value: Any = None
    _error: Any = None

    @classmethod
    def success(cls, value: T) -> "Result[T, Any]":
        return cls(True, value, None)

    @classmethod
    def failure(cls, error: E) -> "Result[Any, E]":
        return cls(False, None, error)

    @classmethod
    def combine(cls, results: Iterable["Result[Any, Any]"]) -> "Result[list[Any], Any]":
        """Combine independent results, collecting every failure.

        Unlike ``flat_map`` chaining this does not stop at the first failure:
        all failures are gathered into a ``CombinedError`` whose message joins
        each failure's message.

        Args:
            results: Results to combine

        Returns:
            Success with the list of values, or failure with a CombinedError
        """
        results = list(results)
        errors = [r.error for r in results if r.is_failure]
        if errors:
            return cls.failure(CombinedError(errors))
        return cls.success([r.value for r in results])

    @classmethod
    def attempt(
        cls,
        fn: Callable[..., T],
        *args: Any,
        catch: tuple[type[BaseException], ...] = (Exception,),
        **kwargs: Any,
    ) -> "Result[T, Any]":
        """Run a raising callable and capture its outcome.

        Only exceptions of the ``catch`` types become failures; anything else
        propagates.
        """
        try:
            return cls.success(fn(*args, **kwargs))
        except catch as exc:
            return cls.failure(exc)

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def is_failure(self) -> bool:
        return not self._is_success

    @property
    def value(self) -> T:
        if not self._is_success:
            raise UnwrapError("Cannot get value from failed result")
        return self._value

    @property
    def error(self) -> E:
        if self._is_success:
            raise UnwrapError("Cannot get error from successful result")
        return self._error

    def map(self, fn: Callable[[T], U]) -> "Result[U, E]":
        """Transform the success value; an exception from ``fn`` becomes the failure."""
        if self.is_failure:
            return Result.failure(self._error)
        try:
            return Result.success(fn(self._value))
        except Exception as exc:
            return Result.failure(exc)

    def map_error(self, fn: Callable[[E], F]) -> "Result[T, F]":
        """Transform the failure only."""
        if self.is_success:
            return Result.success(self._value)
        try:
            return Result.failure(fn(self._error))
        except Exception as exc:
            return Result.failure(exc)

    def flat_map(self, fn: Callable[[T], "Result[U, F]"]) -> "Result[U, E | F]":
        """Chain an operation that itself returns a Result."""
        if self.is_failure:
            return Result.failure(self._error)
        return fn(self._value)

    def on_success(self, fn: Callable[[T], Any]) -> "Result[T, E]":
        if self.is_success:
            fn(self._value)
        return self

    def on_failure(self, fn: Callable[[E], Any]) -> "Result[T, E]":
        if self.is_failure:
            fn(self._error)
        return self

    def fold(self, on_failure: Callable[[E], U], on_success: Callable[[T], U]) -> U:
        if self.is_success:
            return on_success(self._value)
        return on_failure(self._error)

    def get_or_else(self, default: T) -> T:
        return self._value if self.is_success else default

    def get_or_else_get(self, supplier: Callable[[], T]) -> T:
        return self._value if self.is_success else supplier()

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.success({self._value!r})"
        return f"Result.failure({self._error!r})"
