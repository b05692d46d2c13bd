"""Domain layer errors.

Every domain error carries a stable machine-readable ``code`` and optional
structured ``details`` so the boundary layer can map it onto a transport
response without parsing messages.

Domain errors do not derive from ``ValueError``: pydantic only
wraps ``ValueError``/``AssertionError`` raised inside validators, so domain
errors raised from a validator reach the caller unchanged.
"""

from typing import Any, ClassVar

from pydantic import ValidationError as PydanticValidationError


class DomainError(Exception):
    """Base domain error."""

    code: ClassVar[str] = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for the transport layer."""
        return {"code": self.code, "message": self.message, "details": self.details}


class ValidationError(DomainError):
    """Field-level validation error."""

    code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        field: str,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["field"] = self.field
        return data

    @classmethod
    def from_pydantic(
        cls, exc: PydanticValidationError, field: str | None = None
    ) -> "ValidationError":
        """Translate a pydantic validation error into a domain error.

        The first reported error becomes the message; the full list is kept
        in ``details["errors"]``.

        Args:
            exc: Error raised by pydantic
            field: Field name to report when pydantic gives no location

        Returns:
            Domain validation error
        """
        errors = exc.errors(include_url=False)
        first = errors[0] if errors else {}
        loc = ".".join(str(part) for part in first.get("loc", ()) if part != "root")
        name = loc or field or exc.title
        message = first.get("msg", str(exc))
        return cls(
            f"{name}: {message}",
            name,
            first.get("input"),
            details={
                "errors": [
                    {
                        "field": ".".join(str(p) for p in e.get("loc", ())) or name,
                        "message": e.get("msg"),
                        "type": e.get("type"),
                    }
                    for e in errors
                ]
            },
        )


class BusinessRuleViolationError(DomainError):
    """Cross-field or lifecycle invariant violated."""

    code = "BUSINESS_RULE_VIOLATION"

    def __init__(self, rule: str, details: dict[str, Any] | None = None):
        super().__init__(f"Business rule violated: {rule}", details)
        self.rule = rule


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    code = "ENTITY_NOT_FOUND"

    def __init__(self, entity_type: str, identifier: str):
        super().__init__(
            f"{entity_type} with id {identifier} not found",
            {"entity_type": entity_type, "id": identifier},
        )
        self.entity_type = entity_type
        self.identifier = identifier


class OperationNotAllowedError(DomainError):
    """Raised when an operation is not allowed in the current state."""

    code = "OPERATION_NOT_ALLOWED"

    def __init__(self, operation: str, reason: str):
        super().__init__(
            f"Operation '{operation}' not allowed: {reason}",
            {"operation": operation, "reason": reason},
        )
        self.operation = operation
        self.reason = reason


class ConcurrencyError(DomainError):
    """Optimistic lock conflict between load and save."""

    code = "CONCURRENCY_ERROR"

    def __init__(
        self,
        entity_type: str,
        identifier: str,
        expected_version: int,
        actual_version: int,
    ):
        super().__init__(
            f"Concurrency conflict for {entity_type} {identifier}. "
            f"Expected version {expected_version}, but got {actual_version}",
            {
                "entity_type": entity_type,
                "id": identifier,
                "expected_version": expected_version,
                "actual_version": actual_version,
            },
        )
        self.expected_version = expected_version
        self.actual_version = actual_version
