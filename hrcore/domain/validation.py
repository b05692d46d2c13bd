"""Field validation toolkit.

A field validator is a callable that returns a ``ValidationError`` for a bad
value and ``None`` for a good one. Validators are built by the factories
below and run with ``validate_field`` (first error wins) or
``validate_fields`` (first error per field, every field checked).

Use these to check raw input up front, before it reaches a constructor that
would raise on the first problem.
"""

import math
import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Collection, Iterable, Mapping, Sequence
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Generic, Optional, TypeVar

from hrcore.domain.error import ValidationError
from hrcore.domain.model.employee import HIRE_MANAGED_FIELDS
from hrcore.domain.types import Result
from hrcore.domain.value import Cpf, Email, Salary

T = TypeVar("T")

FieldValidator = Callable[[Any], Optional[ValidationError]]

_SIMPLE_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def rule(predicate: Callable[[Any], bool], field: str, message: str) -> FieldValidator:
    """Validator that fails with ``message`` when ``predicate`` is false."""

    def validator(value: Any) -> Optional[ValidationError]:
        if not predicate(value):
            return ValidationError(message, field, value)
        return None

    return validator


def validate_field(value: Any, validators: Iterable[FieldValidator]) -> Optional[ValidationError]:
    """Run validators in order and return the first error, if any."""
    for validator in validators:
        error = validator(value)
        if error is not None:
            return error
    return None


def validate_fields(
    data: Mapping[str, Any], rules: Mapping[str, Sequence[FieldValidator]]
) -> Result[Mapping[str, Any], list[ValidationError]]:
    """Validate several fields, collecting one error per failing field.

    Fields absent from ``data`` are validated as ``None``.

    Returns:
        Success with ``data``, or failure with the errors in ``rules`` order
    """
    errors = [
        error
        for field, validators in rules.items()
        if (error := validate_field(data.get(field), validators)) is not None
    ]
    if errors:
        return Result.failure(errors)
    return Result.success(data)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    return not (isinstance(value, float) and math.isnan(value))


def _not_a_number(field: str, value: Any) -> ValidationError:
    return ValidationError(f"{field} must be a valid number", field, value)


class StringValidator:
    @staticmethod
    def not_empty(field: str) -> FieldValidator:
        def validator(value: Any) -> Optional[ValidationError]:
            if not isinstance(value, str):
                return ValidationError(f"{field} must be a string", field, value)
            if not value.strip():
                return ValidationError(f"{field} cannot be empty", field, value)
            return None

        return validator

    @staticmethod
    def min_length(length: int, field: str) -> FieldValidator:
        def validator(value: Any) -> Optional[ValidationError]:
            if not isinstance(value, str):
                return ValidationError(f"{field} must be a string", field, value)
            if len(value) < length:
                return ValidationError(
                    f"{field} must be at least {length} characters long", field, value
                )
            return None

        return validator

    @staticmethod
    def max_length(length: int, field: str) -> FieldValidator:
        def validator(value: Any) -> Optional[ValidationError]:
            if not isinstance(value, str):
                return ValidationError(f"{field} must be a string", field, value)
            if len(value) > length:
                return ValidationError(
                    f"{field} must be at most {length} characters long", field, value
                )
            return None

        return validator

    @staticmethod
    def pattern(
        regex: re.Pattern[str] | str, field: str, message: Optional[str] = None
    ) -> FieldValidator:
        compiled = re.compile(regex)

        def validator(value: Any) -> Optional[ValidationError]:
            if not isinstance(value, str):
                return ValidationError(f"{field} must be a string", field, value)
            if not compiled.search(value):
                return ValidationError(message or f"{field} format is invalid", field, value)
            return None

        return validator

    @staticmethod
    def email(field: str) -> FieldValidator:
        return StringValidator.pattern(
            _SIMPLE_EMAIL, field, f"{field} must be a valid email address"
        )


class NumberValidator:
    """Numeric checks. Booleans are not numbers."""

    @staticmethod
    def is_number(field: str) -> FieldValidator:
        return rule(_is_number, field, f"{field} must be a valid number")

    @staticmethod
    def positive(field: str) -> FieldValidator:
        def validator(value: Any) -> Optional[ValidationError]:
            if not _is_number(value):
                return _not_a_number(field, value)
            if value <= 0:
                return ValidationError(f"{field} must be positive", field, value)
            return None

        return validator

    @staticmethod
    def min(minimum: float, field: str) -> FieldValidator:
        def validator(value: Any) -> Optional[ValidationError]:
            if not _is_number(value):
                return _not_a_number(field, value)
            if value < minimum:
                return ValidationError(f"{field} must be at least {minimum}", field, value)
            return None

        return validator

    @staticmethod
    def max(maximum: float, field: str) -> FieldValidator:
        def validator(value: Any) -> Optional[ValidationError]:
            if not _is_number(value):
                return _not_a_number(field, value)
            if value > maximum:
                return ValidationError(f"{field} must be at most {maximum}", field, value)
            return None

        return validator

    @staticmethod
    def integer(field: str) -> FieldValidator:
        def validator(value: Any) -> Optional[ValidationError]:
            if not _is_number(value):
                return _not_a_number(field, value)
            if isinstance(value, float) and not value.is_integer():
                return ValidationError(f"{field} must be an integer", field, value)
            if isinstance(value, Decimal) and value != value.to_integral_value():
                return ValidationError(f"{field} must be an integer", field, value)
            return None

        return validator


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


class SequenceValidator:
    """Checks for lists and tuples. Strings are not sequences here."""

    @staticmethod
    def is_sequence(field: str) -> FieldValidator:
        return rule(_is_sequence, field, f"{field} must be a list")

    @staticmethod
    def not_empty(field: str) -> FieldValidator:
        def validator(value: Any) -> Optional[ValidationError]:
            if not _is_sequence(value):
                return ValidationError(f"{field} must be a list", field, value)
            if not value:
                return ValidationError(f"{field} cannot be empty", field, value)
            return None

        return validator

    @staticmethod
    def min_length(length: int, field: str) -> FieldValidator:
        def validator(value: Any) -> Optional[ValidationError]:
            if not _is_sequence(value):
                return ValidationError(f"{field} must be a list", field, value)
            if len(value) < length:
                return ValidationError(f"{field} must have at least {length} items", field, value)
            return None

        return validator

    @staticmethod
    def max_length(length: int, field: str) -> FieldValidator:
        def validator(value: Any) -> Optional[ValidationError]:
            if not _is_sequence(value):
                return ValidationError(f"{field} must be a list", field, value)
            if len(value) > length:
                return ValidationError(f"{field} must have at most {length} items", field, value)
            return None

        return validator


class MappingValidator:
    @staticmethod
    def is_mapping(field: str) -> FieldValidator:
        return rule(lambda v: isinstance(v, Mapping), field, f"{field} must be an object")

    @staticmethod
    def has_key(key: str, field: str) -> FieldValidator:
        def validator(value: Any) -> Optional[ValidationError]:
            if not isinstance(value, Mapping):
                return ValidationError(f"{field} must be an object", field, value)
            if key not in value:
                return ValidationError(f"{field} must have property '{key}'", field, value)
            return None

        return validator


class RequiredValidator:
    @staticmethod
    def required(field: str) -> FieldValidator:
        return rule(lambda v: v is not None, field, f"{field} is required")


class OptionalValidator:
    @staticmethod
    def optional(validator: FieldValidator) -> FieldValidator:
        """Skip ``validator`` when the value is None."""

        def optional_validator(value: Any) -> Optional[ValidationError]:
            return None if value is None else validator(value)

        return optional_validator


class EnumValidator:
    @staticmethod
    def one_of(allowed: Collection[Any], field: str) -> FieldValidator:
        allowed = tuple(allowed)
        listed = ", ".join(str(getattr(v, "value", v)) for v in allowed)
        return rule(lambda v: v in allowed, field, f"{field} must be one of: {listed}")


def _as_day(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def _align(value: date, bound: date) -> tuple[date, date]:
    if isinstance(value, datetime) != isinstance(bound, datetime):
        return _as_day(value), _as_day(bound)
    return value, bound


class DateValidator:
    @staticmethod
    def is_valid_date(field: str) -> FieldValidator:
        return rule(lambda v: isinstance(v, date), field, f"{field} must be a valid date")

    @staticmethod
    def before(limit: date, field: str) -> FieldValidator:
        """Value strictly before ``limit``."""

        def validator(value: Any) -> Optional[ValidationError]:
            if not isinstance(value, date):
                return ValidationError(f"{field} must be a valid date", field, value)
            current, bound = _align(value, limit)
            if current >= bound:
                return ValidationError(
                    f"{field} must be before {limit.isoformat()}", field, value
                )
            return None

        return validator

    @staticmethod
    def after(limit: date, field: str) -> FieldValidator:
        """Value strictly after ``limit``."""

        def validator(value: Any) -> Optional[ValidationError]:
            if not isinstance(value, date):
                return ValidationError(f"{field} must be a valid date", field, value)
            current, bound = _align(value, limit)
            if current <= bound:
                return ValidationError(
                    f"{field} must be after {limit.isoformat()}", field, value
                )
            return None

        return validator


class BaseValidator(ABC, Generic[T]):
    """Validates raw input for one kind of object."""

    @abstractmethod
    def validate(self, data: Any) -> Result[T, list[ValidationError]]:
        """Check ``data``, reporting every failing field.

        Args:
            data: Raw input

        Returns:
            Success with the validated value, or failure with all errors
        """
        pass

    @staticmethod
    def _combine(
        results: Iterable[Result[Any, ValidationError]], value: T
    ) -> Result[T, list[ValidationError]]:
        errors = [r.error for r in results if r.is_failure]
        if errors:
            return Result.failure(errors)
        return Result.success(value)


def _value_object(cls: type, field: str) -> FieldValidator:
    """Validator that accepts what ``cls`` accepts, reporting its error under ``field``."""

    def validator(value: Any) -> Optional[ValidationError]:
        if isinstance(value, cls):
            return None
        try:
            cls(value)
        except ValidationError as exc:
            return ValidationError(exc.message, field, value, exc.details)
        return None

    return validator


class EmployeeValidator(BaseValidator[dict[str, Any]]):
    """Checks whether raw input can become an Employee.

    Reports every invalid field at once, unlike the Employee constructor
    which stops at the first problem.
    """

    def validate(self, data: Any) -> Result[dict[str, Any], list[ValidationError]]:
        if not isinstance(data, Mapping):
            return Result.failure([ValidationError("employee must be an object", "employee", data)])

        def text(field: str, length: int) -> list[FieldValidator]:
            return [StringValidator.not_empty(field), StringValidator.min_length(length, field)]

        today = date.today()
        rules: dict[str, list[FieldValidator]] = {
            "first_name": text("first_name", 2),
            "last_name": text("last_name", 2),
            "employee_number": [StringValidator.not_empty("employee_number")],
            "position": text("position", 2),
            "department": text("department", 2),
            "cpf": [
                RequiredValidator.required("cpf"),
                _value_object(Cpf, "cpf"),
            ],
            "personal_email": [
                RequiredValidator.required("personal_email"),
                _value_object(Email, "personal_email"),
            ],
            "birth_date": [
                RequiredValidator.required("birth_date"),
                DateValidator.is_valid_date("birth_date"),
                rule(lambda v: _as_day(v) <= today, "birth_date", "birth_date cannot be in the future"),
            ],
            "hire_date": [
                OptionalValidator.optional(DateValidator.is_valid_date("hire_date")),
                rule(
                    lambda v: v is None or _as_day(v) <= today,
                    "hire_date",
                    "hire_date cannot be in the future",
                ),
            ],
            "salary": [
                RequiredValidator.required("salary"),
                _value_object(Salary, "salary"),
            ],
        }
        results = [
            Result.failure(error) if (error := validate_field(data.get(field), validators))
            else Result.success(data.get(field))
            for field, validators in rules.items()
        ]
        managed = sorted(HIRE_MANAGED_FIELDS.intersection(data))
        if managed:
            results.append(
                Result.failure(
                    ValidationError(
                        f"Fields set by the hire cannot be supplied: {', '.join(managed)}",
                        "employee",
                        managed,
                    )
                )
            )
        return self._combine(results, dict(data))
