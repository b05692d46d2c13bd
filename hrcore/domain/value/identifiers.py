"""Strongly typed identifiers for domain entities.

Identifiers are value objects: two ids are equal when they are of the same
kind and wrap the same value. Each kind validates its own format on
construction.
"""

import re
import uuid
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import field_validator

from hrcore.domain.error import ValidationError
from hrcore.domain.types import Result
from hrcore.domain.value.common import RootValueObject

T = TypeVar("T")

_UUID_V4 = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


class Id(RootValueObject[T], Generic[T]):
    """Base class for entity identifiers."""

    @classmethod
    def create(cls, value: Any) -> Result["Id[T]", ValidationError]:
        """Build an id without raising.

        Returns:
            Success with the id, or failure with the validation error
        """
        return Result.attempt(cls, value, catch=(ValidationError,))


class StringId(Id[str]):
    """Free-form, non-blank string identifier."""

    value_type: ClassVar[str] = "string_id"

    @field_validator("root")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("ID cannot be empty")
        return v

    @classmethod
    def generate(cls) -> "StringId":
        return cls(uuid.uuid4().hex)


class NumberId(Id[int]):
    """Positive integer identifier."""

    value_type: ClassVar[str] = "number_id"

    @field_validator("root", mode="before")
    @classmethod
    def reject_bool(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError("ID must be a number")
        return v

    @field_validator("root")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("ID must be a positive number")
        return v


class UuidId(Id[str]):
    """UUID version 4 identifier, stored in lowercase text form.

    Accepts ``uuid.UUID`` instances as well as text in any letter case.
    """

    value_type: ClassVar[str] = "uuid_id"

    @field_validator("root", mode="before")
    @classmethod
    def normalize_uuid(cls, v: Any) -> Any:
        if isinstance(v, uuid.UUID):
            v = str(v)
        if not isinstance(v, str):
            raise ValueError("UUID must be a string")
        v = v.strip().lower()
        if not _UUID_V4.match(v):
            raise ValueError("Invalid UUID v4 format")
        return v

    @classmethod
    def generate(cls) -> "UuidId":
        return cls(str(uuid.uuid4()))

    def as_uuid(self) -> uuid.UUID:
        return uuid.UUID(self.root)


class IdKind(str, Enum):
    """Kinds of identifier the factory can build."""

    STRING = "string"
    NUMBER = "number"
    UUID = "uuid"


class IdFactory:
    """Build identifiers by kind, for callers that pick the kind at runtime."""

    _kinds: ClassVar[dict[IdKind, type[Id[Any]]]] = {
        IdKind.STRING: StringId,
        IdKind.NUMBER: NumberId,
        IdKind.UUID: UuidId,
    }

    @classmethod
    def create(cls, kind: IdKind | str, value: Any) -> Result[Id[Any], ValidationError]:
        try:
            id_cls = cls._kinds[IdKind(kind)]
        except ValueError:
            return Result.failure(
                ValidationError(f"Unknown ID type: {kind}", "id_type", kind)
            )
        return id_cls.create(value)

    @classmethod
    def generate(cls, kind: IdKind | str) -> Id[Any]:
        """Generate a fresh id.

        Raises:
            ValidationError: If the kind cannot be generated (number ids
                come from a sequence the caller owns)
        """
        try:
            kind = IdKind(kind)
        except ValueError:
            raise ValidationError(f"Unknown ID type: {kind}", "id_type", kind) from None
        if kind is IdKind.STRING:
            return StringId.generate()
        if kind is IdKind.UUID:
            return UuidId.generate()
        raise ValidationError(f"Cannot generate ID of type: {kind.value}", "id_type", kind.value)
