"""Builders for test data."""

from datetime import date
from decimal import Decimal
from typing import Any

from hrcore.domain.model import Employee

VALID_CPF = "52998224725"
OTHER_CPF = "11144477735"


def make_employee_data(**overrides: Any) -> dict[str, Any]:
    """Raw input for a valid hire; keyword arguments replace fields."""
    data: dict[str, Any] = {
        "first_name": "Maria",
        "last_name": "Silva",
        "birth_date": date(1990, 5, 17),
        "cpf": VALID_CPF,
        "personal_email": "maria.silva@example.com",
        "employee_number": "EMP-001",
        "position": "Software Engineer",
        "department": "Engineering",
        "hire_date": date(2020, 3, 2),
        "salary": Decimal("8500.00"),
    }
    data.update(overrides)
    return data


def make_employee(created_by: str | None = "hr-admin", **overrides: Any) -> Employee:
    """A freshly hired employee with its ``EmployeeHired`` event pending."""
    return Employee.hire(make_employee_data(**overrides), created_by)
