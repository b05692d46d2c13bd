"""Personal document value objects."""

import re
from typing import Any, ClassVar

from pydantic import field_validator

from hrcore.domain.error import ValidationError
from hrcore.domain.value.common import RootValueObject

_NON_DIGITS = re.compile(r"\D")


def _check_digit(digits: str) -> int:
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


class Cpf(RootValueObject[str]):
    """Brazilian individual taxpayer number (CPF).

    Stored as its 11 digits; punctuation in the input is ignored. The last
    two digits are mod-11 check digits over the preceding ones.
    Examples: '529.982.247-25', '52998224725'
    """

    value_type: ClassVar[str] = "cpf"

    @field_validator("root", mode="before")
    @classmethod
    def sanitize(cls, v: Any) -> str:
        """Strip everything but digits."""
        if not isinstance(v, str):
            raise ValueError("CPF must be a string")
        return _NON_DIGITS.sub("", v)

    @field_validator("root")
    @classmethod
    def validate_cpf(cls, v: str) -> str:
        if len(v) != 11:
            raise ValueError("CPF must have exactly 11 digits")
        if len(set(v)) == 1:
            raise ValueError("CPF cannot have all digits equal")
        if _check_digit(v[:9]) != int(v[9]) or _check_digit(v[:10]) != int(v[10]):
            raise ValueError("Invalid CPF checksum")
        return v

    @property
    def raw_value(self) -> str:
        return self.root

    @property
    def formatted_value(self) -> str:
        """CPF in XXX.XXX.XXX-XX form."""
        v = self.root
        return f"{v[:3]}.{v[3:6]}.{v[6:9]}-{v[9:]}"

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        try:
            cls(value)
        except ValidationError:
            return False
        return True

    def __str__(self) -> str:
        return self.formatted_value
