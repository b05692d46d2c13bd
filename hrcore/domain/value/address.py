"""Postal address value object."""

import re
from typing import ClassVar, Optional

from pydantic import Field, field_validator, model_validator

from hrcore.domain.value.common import ValueObject
from hrcore.domain.value.types import AddressType

BRAZILIAN_STATES = frozenset(
    {
        "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES", "GO", "MA",
        "MT", "MS", "MG", "PA", "PB", "PR", "PE", "PI", "RJ", "RN",
        "RS", "RO", "RR", "SC", "SP", "SE", "TO",
    }
)  # fmt: skip

_NON_DIGITS = re.compile(r"\D")


class Address(ValueObject):
    """Postal address.

    Two addresses are equal when every component is equal, including the
    optional complement and the extra reference lines.
    """

    value_type: ClassVar[str] = "address"

    street: str = Field(min_length=3, max_length=200)
    number: str = Field(min_length=1, max_length=20)
    neighborhood: str = Field(min_length=2, max_length=100)
    city: str = Field(min_length=2, max_length=100)
    state: str = Field(min_length=2, max_length=2)
    zip_code: str
    country: str = Field(default="Brasil", min_length=2, max_length=100)
    type: AddressType = AddressType.RESIDENTIAL
    complement: Optional[str] = Field(default=None, max_length=100)
    lines: tuple[str, ...] = ()

    @field_validator(
        "street", "number", "neighborhood", "city", "country", "complement", mode="before"
    )
    @classmethod
    def strip_text(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("state", mode="before")
    @classmethod
    def normalize_state(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("zip_code")
    @classmethod
    def validate_zip_code(cls, v: str) -> str:
        """Brazilian CEP: 8 digits, punctuation ignored."""
        digits = _NON_DIGITS.sub("", v)
        if len(digits) != 8:
            raise ValueError("Zip code must have exactly 8 digits")
        return digits

    @model_validator(mode="after")
    def validate_state(self) -> "Address":
        if self.country == "Brasil" and self.state not in BRAZILIAN_STATES:
            raise ValueError("Invalid Brazilian state")
        return self

    @property
    def formatted_zip_code(self) -> str:
        return f"{self.zip_code[:5]}-{self.zip_code[5:]}"

    @property
    def formatted_address(self) -> str:
        parts = [f"{self.street}, {self.number}"]
        if self.complement:
            parts.append(self.complement)
        parts.append(self.neighborhood)
        parts.append(f"{self.city}/{self.state}")
        parts.append(self.formatted_zip_code)
        if self.country != "Brasil":
            parts.append(self.country)
        return ", ".join(parts)

    def __str__(self) -> str:
        return self.formatted_address
