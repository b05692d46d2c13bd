"""Fluent construction of composite specifications."""

from collections.abc import Callable, Iterable
from datetime import date
from functools import reduce
from typing import Any, Generic, Optional, TypeVar

from hrcore.domain.specification.base import (
    AndSpecification,
    OrSpecification,
    Specification,
)
from hrcore.domain.specification.leaf import (
    ComparisonOperator,
    DateRangeSpecification,
    InSpecification,
    NotInSpecification,
    NotNullSpecification,
    NullSpecification,
    PredicateSpecification,
    PropertySpecification,
    TrueSpecification,
)

T = TypeVar("T")


class SpecificationBuilder(Generic[T]):
    """Collects specifications and joins them into one.

    Every method but ``build``/``build_or`` returns the builder, so calls
    chain:

        spec = (
            SpecificationBuilder()
            .property("department", "equals", "Engineering")
            .is_null("termination_date")
            .build()
        )
    """

    def __init__(self) -> None:
        self._specs: list[Specification[T]] = []

    def add(self, spec: Specification[T]) -> "SpecificationBuilder[T]":
        self._specs.append(spec)
        return self

    def property(
        self, name: str, op: ComparisonOperator | str, value: Any
    ) -> "SpecificationBuilder[T]":
        return self.add(PropertySpecification(name, op, value))

    def is_null(self, name: str) -> "SpecificationBuilder[T]":
        return self.add(NullSpecification(name))

    def is_not_null(self, name: str) -> "SpecificationBuilder[T]":
        return self.add(NotNullSpecification(name))

    def in_(self, name: str, values: Iterable[Any]) -> "SpecificationBuilder[T]":
        return self.add(InSpecification(name, values))

    def not_in(self, name: str, values: Iterable[Any]) -> "SpecificationBuilder[T]":
        return self.add(NotInSpecification(name, values))

    def date_range(
        self, name: str, start: Optional[date] = None, end: Optional[date] = None
    ) -> "SpecificationBuilder[T]":
        return self.add(DateRangeSpecification(name, start, end))

    def custom(
        self, predicate: Callable[[T], bool], description: str = "PredicateSpecification"
    ) -> "SpecificationBuilder[T]":
        return self.add(PredicateSpecification(predicate, description))

    def build(self) -> Specification[T]:
        """Join everything with AND, left to right.

        An empty builder gives ``TrueSpecification``; a single specification
        is returned unchanged.
        """
        return self._join(AndSpecification)

    def build_or(self) -> Specification[T]:
        """Join everything with OR, left to right.

        Same empty and single-specification rules as ``build``.
        """
        return self._join(OrSpecification)

    def _join(self, composite: type[Specification[T]]) -> Specification[T]:
        if not self._specs:
            return TrueSpecification()
        return reduce(composite, self._specs)
