"""Monetary value objects."""

from decimal import Decimal
from typing import Any, ClassVar

from pydantic import field_validator

from hrcore.domain.error import ValidationError
from hrcore.domain.value.common import RootValueObject

MAX_SALARY = Decimal("1000000")
_CENT = Decimal("0.01")


class Salary(RootValueObject[Decimal]):
    """Monthly salary in BRL.

    Non-negative, capped at R$ 1,000,000 and never more precise than cents.
    The stored amount always has exactly two decimal places.
    """

    value_type: ClassVar[str] = "salary"

    @field_validator("root", mode="before")
    @classmethod
    def coerce_amount(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError("Salary must be a valid number")
        if isinstance(v, float):
            # repr of a float is its shortest round-tripping text
            return Decimal(repr(v))
        return v

    @field_validator("root")
    @classmethod
    def validate_amount(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError("Salary must be a valid number")
        if v < 0:
            raise ValueError("Salary cannot be negative")
        if v > MAX_SALARY:
            raise ValueError("Salary cannot exceed R$ 1,000,000")
        if v != 0 and v.normalize().as_tuple().exponent < -2:
            raise ValueError("Salary cannot have more than 2 decimal places")
        return v.quantize(_CENT)

    @property
    def cents(self) -> int:
        return int(self.root * 100)

    @property
    def formatted_value(self) -> str:
        """Amount in Brazilian currency notation, e.g. ``R$ 1.234,56``."""
        text = f"{self.root:,.2f}"
        return "R$ " + text.replace(",", "_").replace(".", ",").replace("_", ".")

    @classmethod
    def from_cents(cls, cents: int) -> "Salary":
        return cls(Decimal(cents) / 100)

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        try:
            cls(value)
        except ValidationError:
            return False
        return True

    def __str__(self) -> str:
        return self.formatted_value
