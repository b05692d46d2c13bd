"""Ready-made specifications for querying employees."""

from datetime import date
from decimal import Decimal
from typing import Optional

from hrcore.domain.model.employee import Employee
from hrcore.domain.specification.base import Specification
from hrcore.domain.specification.builder import SpecificationBuilder
from hrcore.domain.specification.leaf import (
    ComparisonOperator,
    DateRangeSpecification,
    PredicateSpecification,
    PropertySpecification,
)
from hrcore.domain.value import ContractType, EmployeeStatus, UuidId


def with_status(status: EmployeeStatus) -> Specification[Employee]:
    return PropertySpecification("status", ComparisonOperator.EQUALS, EmployeeStatus(status))


def active_employees() -> Specification[Employee]:
    return with_status(EmployeeStatus.ACTIVE)


def in_department(department: str) -> Specification[Employee]:
    return PropertySpecification("department", ComparisonOperator.EQUALS, department)


def with_position(position: str) -> Specification[Employee]:
    return PropertySpecification("position", ComparisonOperator.EQUALS, position)


def with_contract_type(contract_type: ContractType) -> Specification[Employee]:
    return PropertySpecification(
        "contract_type", ComparisonOperator.EQUALS, ContractType(contract_type)
    )


def managed_by(manager_id: UuidId) -> Specification[Employee]:
    return PropertySpecification("manager_id", ComparisonOperator.EQUALS, manager_id)


def on_probation() -> Specification[Employee]:
    return PredicateSpecification(lambda e: e.is_on_probation, "on probation")


def name_contains(text: str) -> Specification[Employee]:
    """Case-insensitive match against the full name."""
    wanted = text.strip().casefold()
    return PredicateSpecification(
        lambda e: wanted in e.full_name.casefold(), f"full_name contains {text}"
    )


def hired_between(
    start: Optional[date] = None, end: Optional[date] = None
) -> Specification[Employee]:
    return DateRangeSpecification("hire_date", start, end)


def salary_between(
    minimum: Optional[Decimal] = None, maximum: Optional[Decimal] = None
) -> Specification[Employee]:
    """Employees whose salary lies within the inclusive bounds.

    Either bound may be omitted.
    """
    builder = SpecificationBuilder[Employee]()
    if minimum is not None:
        builder.property("salary.value", ComparisonOperator.GREATER_THAN_OR_EQUAL, Decimal(minimum))
    if maximum is not None:
        builder.property("salary.value", ComparisonOperator.LESS_THAN_OR_EQUAL, Decimal(maximum))
    return builder.build()


def aged_between(minimum: int, maximum: int) -> Specification[Employee]:
    return PredicateSpecification(
        lambda e: minimum <= e.age <= maximum, f"age BETWEEN {minimum} AND {maximum}"
    )
