"""Unit tests for domain errors."""

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hrcore.domain.error import (
    BusinessRuleViolationError,
    ConcurrencyError,
    DomainError,
    EntityNotFoundError,
    OperationNotAllowedError,
    ValidationError,
)


class Payload(BaseModel):
    age: int
    name: str


class TestErrorTaxonomy:
    @pytest.mark.parametrize(
        "error, code",
        [
            (ValidationError("bad", "field"), "VALIDATION_ERROR"),
            (BusinessRuleViolationError("rule"), "BUSINESS_RULE_VIOLATION"),
            (EntityNotFoundError("Employee", "42"), "ENTITY_NOT_FOUND"),
            (OperationNotAllowedError("terminate", "already terminated"), "OPERATION_NOT_ALLOWED"),
            (ConcurrencyError("Employee", "42", 1, 2), "CONCURRENCY_ERROR"),
        ],
    )
    def test_codes(self, error, code):
        assert isinstance(error, DomainError)
        assert not isinstance(error, ValueError)
        assert error.code == code
        assert error.to_dict()["code"] == code

    def test_validation_error_serializes_field(self):
        data = ValidationError("age must be positive", "age", -1).to_dict()

        assert data == {
            "code": "VALIDATION_ERROR",
            "message": "age must be positive",
            "details": {},
            "field": "age",
        }

    def test_messages(self):
        assert str(EntityNotFoundError("Employee", "42")) == "Employee with id 42 not found"
        assert BusinessRuleViolationError("x").message == "Business rule violated: x"
        assert "Expected version 1, but got 2" in str(ConcurrencyError("Employee", "42", 1, 2))


class TestFromPydantic:
    def test_first_error_becomes_message_and_all_are_kept(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            Payload(age="old", name=None)

        error = ValidationError.from_pydantic(exc_info.value)

        assert error.field == "age"
        assert error.value == "old"
        assert error.message.startswith("age: ")
        assert [e["field"] for e in error.details["errors"]] == ["age", "name"]

    def test_fallback_field_name(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            Payload.model_validate("not a dict")

        assert ValidationError.from_pydantic(exc_info.value, field="root_model").field == "root_model"
