"""Events recorded by the Employee aggregate."""

from datetime import date
from decimal import Decimal
from typing import ClassVar, Optional

from hrcore.domain.event.base import DomainEvent


class EmployeeHired(DomainEvent):
    event_type: ClassVar[str] = "EmployeeHired"

    employee_number: str
    full_name: str
    position: str
    department: str
    hire_date: date


class EmployeePersonalDataUpdated(DomainEvent):
    """Names, birth date or personal email changed."""

    event_type: ClassVar[str] = "EmployeePersonalDataUpdated"

    changed_fields: tuple[str, ...]


class EmployeePositionChanged(DomainEvent):
    event_type: ClassVar[str] = "EmployeePositionChanged"

    previous_position: str
    new_position: str
    previous_department: str
    new_department: str


class EmployeeSalaryChanged(DomainEvent):
    event_type: ClassVar[str] = "EmployeeSalaryChanged"

    previous_salary: Optional[Decimal] = None
    new_salary: Decimal


class EmployeeSkillAdded(DomainEvent):
    event_type: ClassVar[str] = "EmployeeSkillAdded"

    skill: str


class EmployeeSkillRemoved(DomainEvent):
    event_type: ClassVar[str] = "EmployeeSkillRemoved"

    skill: str


class EmployeeTerminated(DomainEvent):
    event_type: ClassVar[str] = "EmployeeTerminated"

    termination_date: date
    reason: Optional[str] = None
