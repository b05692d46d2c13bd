"""Algebraic result types: Result, Maybe and Either."""

from hrcore.domain.types.base import CombinedError, UnwrapError
from hrcore.domain.types.either import Either
from hrcore.domain.types.maybe import Maybe
from hrcore.domain.types.result import Result

__all__ = [
    "CombinedError",
    "Either",
    "Maybe",
    "Result",
    "UnwrapError",
]
