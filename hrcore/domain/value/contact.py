"""Contact value objects."""

import re
from typing import Any, ClassVar

from pydantic import field_validator

from hrcore.domain.error import ValidationError
from hrcore.domain.value.common import RootValueObject

_EMAIL_PATTERN = re.compile(
    r"^[a-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?"
    r"(?:\.[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?)*$"
)


class Email(RootValueObject[str]):
    """Email address, trimmed and lowercased."""

    value_type: ClassVar[str] = "email"

    @field_validator("root", mode="before")
    @classmethod
    def sanitize(cls, v: Any) -> str:
        if not isinstance(v, str):
            raise ValueError("Email must be a string")
        return v.strip().lower()

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate the address format and length limits."""
        if not v:
            raise ValueError("Email cannot be empty")
        if v.count("@") != 1:
            raise ValueError("Email must contain exactly one @ symbol")
        if not _EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email format")
        if len(v) > 254:
            raise ValueError("Email cannot exceed 254 characters")
        username = v.split("@")[0]
        if len(username) > 64:
            raise ValueError("Email username cannot exceed 64 characters")
        if username.startswith(".") or username.endswith("."):
            raise ValueError("Email username cannot start or end with a dot")
        if ".." in username:
            raise ValueError("Email username cannot have consecutive dots")
        return v

    @property
    def username(self) -> str:
        return self.root.split("@")[0]

    @property
    def domain(self) -> str:
        return self.root.split("@")[1]

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        try:
            cls(value)
        except ValidationError:
            return False
        return True
