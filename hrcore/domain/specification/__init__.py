"""Specification algebra and builder."""

from hrcore.domain.specification.base import (
    AndSpecification,
    NotSpecification,
    OrSpecification,
    Specification,
)
from hrcore.domain.specification.builder import SpecificationBuilder
from hrcore.domain.specification.leaf import (
    ComparisonOperator,
    DateRangeSpecification,
    FalseSpecification,
    InSpecification,
    NotInSpecification,
    NotNullSpecification,
    NullSpecification,
    PredicateSpecification,
    PropertySpecification,
    TrueSpecification,
    read_property,
)

__all__ = [
    "Specification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "TrueSpecification",
    "FalseSpecification",
    "PredicateSpecification",
    "ComparisonOperator",
    "PropertySpecification",
    "NullSpecification",
    "NotNullSpecification",
    "InSpecification",
    "NotInSpecification",
    "DateRangeSpecification",
    "SpecificationBuilder",
    "read_property",
]
