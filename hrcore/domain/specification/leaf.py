"""Leaf specifications over candidate properties.

Properties are read by attribute name, or by key when the candidate is a
mapping. Dotted names walk nested objects (``"salary.root"``). A missing
property reads as ``None``.
"""

import operator
from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, TypeVar

from hrcore.domain.specification.base import Specification

T = TypeVar("T")

_MISSING = object()


def read_property(candidate: Any, name: str) -> Any:
    """Value of a (possibly dotted) property, or None when absent."""
    value = candidate
    for part in name.split("."):
        if isinstance(value, Mapping):
            value = value.get(part, _MISSING)
        else:
            value = getattr(value, part, _MISSING)
        if value is _MISSING or value is None:
            return None
    return value


class TrueSpecification(Specification[T]):
    def is_satisfied_by(self, candidate: T) -> bool:
        return True

    def __str__(self) -> str:
        return "TRUE"


class FalseSpecification(Specification[T]):
    def is_satisfied_by(self, candidate: T) -> bool:
        return False

    def __str__(self) -> str:
        return "FALSE"


class PredicateSpecification(Specification[T]):
    """Specification backed by an arbitrary predicate."""

    def __init__(
        self, predicate: Callable[[T], bool], description: str = "PredicateSpecification"
    ):
        self.predicate = predicate
        self.description = description

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self.predicate(candidate))

    def __str__(self) -> str:
        return self.description


class ComparisonOperator(str, Enum):
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"
    CONTAINS = "contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"


_ORDERING = {
    ComparisonOperator.GREATER_THAN: operator.gt,
    ComparisonOperator.LESS_THAN: operator.lt,
    ComparisonOperator.GREATER_THAN_OR_EQUAL: operator.ge,
    ComparisonOperator.LESS_THAN_OR_EQUAL: operator.le,
}

_TEXT = {
    ComparisonOperator.CONTAINS: lambda text, part: part in text,
    ComparisonOperator.STARTS_WITH: str.startswith,
    ComparisonOperator.ENDS_WITH: str.endswith,
}


def _text(value: Any) -> str:
    return str(value.value) if isinstance(value, Enum) else str(value)


class PropertySpecification(Specification[T]):
    """Compare one property of the candidate with a fixed value.

    Ordering comparisons are false when the property is missing or the two
    values cannot be ordered. Text comparisons use the string form of both
    sides.
    """

    def __init__(self, name: str, op: ComparisonOperator | str, value: Any):
        self.name = name
        self.operator = ComparisonOperator(op)
        self.value = value

    def is_satisfied_by(self, candidate: T) -> bool:
        actual = read_property(candidate, self.name)
        if self.operator is ComparisonOperator.EQUALS:
            return actual == self.value
        if self.operator is ComparisonOperator.NOT_EQUALS:
            return actual != self.value
        if actual is None:
            return False
        if self.operator in _ORDERING:
            try:
                return bool(_ORDERING[self.operator](actual, self.value))
            except TypeError:
                return False
        return _TEXT[self.operator](_text(actual), _text(self.value))

    def __str__(self) -> str:
        return f"{self.name} {self.operator.value} {_text(self.value)}"


class NullSpecification(Specification[T]):
    def __init__(self, name: str):
        self.name = name

    def is_satisfied_by(self, candidate: T) -> bool:
        return read_property(candidate, self.name) is None

    def __str__(self) -> str:
        return f"{self.name} IS NULL"


class NotNullSpecification(Specification[T]):
    def __init__(self, name: str):
        self.name = name

    def is_satisfied_by(self, candidate: T) -> bool:
        return read_property(candidate, self.name) is not None

    def __str__(self) -> str:
        return f"{self.name} IS NOT NULL"


class InSpecification(Specification[T]):
    def __init__(self, name: str, values: Iterable[Any]):
        self.name = name
        self.values = tuple(values)

    def is_satisfied_by(self, candidate: T) -> bool:
        return read_property(candidate, self.name) in self.values

    def __str__(self) -> str:
        return f"{self.name} IN ({', '.join(_text(v) for v in self.values)})"


class NotInSpecification(Specification[T]):
    def __init__(self, name: str, values: Iterable[Any]):
        self.name = name
        self.values = tuple(values)

    def is_satisfied_by(self, candidate: T) -> bool:
        return read_property(candidate, self.name) not in self.values

    def __str__(self) -> str:
        return f"{self.name} NOT IN ({', '.join(_text(v) for v in self.values)})"


def _day(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def _before(value: date, bound: date) -> bool:
    # Mixed date/datetime pairs are compared by day
    if isinstance(value, datetime) != isinstance(bound, datetime):
        return _day(value) < _day(bound)
    return value < bound


class DateRangeSpecification(Specification[T]):
    """Date property within inclusive bounds; either bound may be open.

    Candidates whose property is not a date never satisfy it.
    """

    def __init__(self, name: str, start: Optional[date] = None, end: Optional[date] = None):
        self.name = name
        self.start = start
        self.end = end

    def is_satisfied_by(self, candidate: T) -> bool:
        value = read_property(candidate, self.name)
        if not isinstance(value, date):
            return False
        try:
            if self.start is not None and _before(value, self.start):
                return False
            if self.end is not None and _before(self.end, value):
                return False
        except TypeError:
            # naive and aware datetimes cannot be ordered
            return False
        return True

    def __str__(self) -> str:
        start = self.start.isoformat() if self.start else "null"
        end = self.end.isoformat() if self.end else "null"
        return f"{self.name} BETWEEN {start} AND {end}"
