"""Employee aggregate root."""

from datetime import date
from collections.abc import Mapping
from typing import Any, ClassVar, Optional

from pydantic import Field, computed_field, field_validator

from hrcore.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    OperationNotAllowedError,
    ValidationError,
)
from hrcore.domain.event.employee import (
    EmployeeHired,
    EmployeePersonalDataUpdated,
    EmployeePositionChanged,
    EmployeeSalaryChanged,
    EmployeeSkillAdded,
    EmployeeSkillRemoved,
    EmployeeTerminated,
)
from hrcore.domain.model.aggregate import (
    AuditableAggregateRoot,
    OptimisticLockAggregateRoot,
    SoftDeletableAggregateRoot,
)
from hrcore.domain.types import Result
from hrcore.domain.value import (
    Address,
    ContractType,
    Cpf,
    EducationLevel,
    Email,
    EmployeeStatus,
    Gender,
    MaritalStatus,
    Salary,
    UuidId,
)

MINIMUM_AGE = 16

# Set by the hire itself, never taken from input
HIRE_MANAGED_FIELDS = frozenset(
    {
        "status",
        "version",
        "created_by",
        "updated_by",
        "created_at",
        "updated_at",
        "deleted_at",
        "deleted_by",
    }
)


def _years_before(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        # 29 February in a non-leap target year
        return day.replace(year=day.year - years, day=28)


def _require_text(value: str, label: str) -> str:
    if len(value.strip()) < 2:
        raise ValueError(f"{label} must have at least 2 characters")
    return value.strip()


class Employee(
    AuditableAggregateRoot, SoftDeletableAggregateRoot, OptimisticLockAggregateRoot
):
    """Employee aggregate root.

    Holds personal and professional data for one person employed by the
    company. Every change goes through an intention-revealing method that
    re-validates the whole aggregate, bumps the version and records an
    event:
    - Personal data: names, birth date, email, marital status
    - Position and department, salary, skills
    - Termination, soft deletion and restoration
    """

    entity_type: ClassVar[str] = "Employee"

    id: UuidId

    # Personal data
    first_name: str
    last_name: str
    birth_date: date
    cpf: Cpf
    personal_email: Email
    gender: Optional[Gender] = None
    marital_status: Optional[MaritalStatus] = None
    education_level: Optional[EducationLevel] = None
    residential_address: Optional[Address] = None

    # Professional data
    employee_number: str
    position: str
    department: str
    manager_id: Optional[UuidId] = None
    contract_type: ContractType = ContractType.CLT
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    hire_date: date
    termination_date: Optional[date] = None
    probation_end_date: Optional[date] = None
    salary: Salary
    skills: tuple[str, ...] = Field(default=())

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, v: str) -> str:
        return _require_text(v, "First name")

    @field_validator("last_name")
    @classmethod
    def validate_last_name(cls, v: str) -> str:
        return _require_text(v, "Last name")

    @field_validator("position")
    @classmethod
    def validate_position(cls, v: str) -> str:
        return _require_text(v, "Position")

    @field_validator("department")
    @classmethod
    def validate_department(cls, v: str) -> str:
        return _require_text(v, "Department")

    @field_validator("employee_number")
    @classmethod
    def validate_employee_number(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Employee number cannot be empty")
        return v.strip()

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date(cls, v: date) -> date:
        today = date.today()
        if v > today:
            raise ValueError("Birth date cannot be in the future")
        if v > _years_before(today, MINIMUM_AGE):
            raise ValueError(f"Employee must be at least {MINIMUM_AGE} years old")
        return v

    @field_validator("hire_date")
    @classmethod
    def validate_hire_date(cls, v: date) -> date:
        if v > date.today():
            raise ValueError("Hire date cannot be in the future")
        return v

    def check_invariants(self) -> None:
        if self.termination_date and self.termination_date <= self.hire_date:
            raise BusinessRuleViolationError("Termination date must be after hire date")
        if self.probation_end_date and self.probation_end_date <= self.hire_date:
            raise BusinessRuleViolationError("Probation end date must be after hire date")
        if (
            self.status is EmployeeStatus.TERMINATED
            and self.termination_date
            and self.termination_date > date.today()
        ):
            raise BusinessRuleViolationError(
                "Terminated employee cannot have future termination date"
            )
        if self.manager_id is not None and self.manager_id == self.id:
            raise BusinessRuleViolationError("Employee cannot be their own manager")

    @computed_field
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @computed_field
    @property
    def is_active(self) -> bool:
        return self.status is EmployeeStatus.ACTIVE

    @property
    def age(self) -> int:
        """Age in whole years as of today."""
        today = date.today()
        had_birthday = (today.month, today.day) >= (self.birth_date.month, self.birth_date.day)
        return today.year - self.birth_date.year - (0 if had_birthday else 1)

    @property
    def is_on_probation(self) -> bool:
        if self.probation_end_date is None or self.status is EmployeeStatus.TERMINATED:
            return False
        return date.today() <= self.probation_end_date

    @classmethod
    def hire(
        cls, data: Mapping[str, Any], created_by: Optional[str] = None
    ) -> "Employee":
        """Create a newly hired, active employee.

        Generates an id when none is given and defaults the hire date to
        today. Records ``EmployeeHired`` at version 1.

        Args:
            data: Employee fields
            created_by: Who registered the hire

        Returns:
            New employee

        Raises:
            ValidationError: If a field is invalid, or ``data`` holds a field
                the hire sets itself (status, version, audit fields)
            BusinessRuleViolationError: If a cross-field rule is broken
        """
        managed = sorted(HIRE_MANAGED_FIELDS.intersection(data))
        if managed:
            raise ValidationError(
                f"Fields set by the hire cannot be supplied: {', '.join(managed)}",
                "employee",
                managed,
            )
        employee = cls(
            **{
                "id": UuidId.generate(),
                "hire_date": date.today(),
                **data,
                "status": EmployeeStatus.ACTIVE,
                "version": 1,
                "created_by": created_by,
                "updated_by": created_by,
            }
        )
        employee._record_event(
            EmployeeHired,
            employee_number=employee.employee_number,
            full_name=employee.full_name,
            position=employee.position,
            department=employee.department,
            hire_date=employee.hire_date,
        )
        return employee

    @classmethod
    def create(
        cls, data: Mapping[str, Any], created_by: Optional[str] = None
    ) -> Result["Employee", DomainError]:
        """Hire an employee, reporting invalid input as a failed Result."""
        return Result.attempt(cls.hire, data, created_by, catch=(DomainError,))

    def update_personal_data(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        birth_date: Optional[date] = None,
        personal_email: Optional[Email | str] = None,
        marital_status: Optional[MaritalStatus] = None,
        updated_by: Optional[str] = None,
    ) -> None:
        """Change personal data; arguments left as None keep their value."""
        self._ensure_not_deleted("update_personal_data")
        changes = {
            name: value
            for name, value in (
                ("first_name", first_name),
                ("last_name", last_name),
                ("birth_date", birth_date),
                ("personal_email", personal_email),
                ("marital_status", marital_status),
            )
            if value is not None
        }
        if not changes:
            return
        self._apply_change(
            changes,
            EmployeePersonalDataUpdated,
            updated_by,
            changed_fields=tuple(changes),
        )

    def change_position(
        self, position: str, department: str, updated_by: Optional[str] = None
    ) -> None:
        self._ensure_not_deleted("change_position")
        self._apply_change(
            {"position": position, "department": department},
            EmployeePositionChanged,
            updated_by,
            previous_position=self.position,
            new_position=position.strip(),
            previous_department=self.department,
            new_department=department.strip(),
        )

    def change_salary(self, salary: Salary, updated_by: Optional[str] = None) -> None:
        self._ensure_not_deleted("change_salary")
        if not isinstance(salary, Salary):
            salary = Salary(salary)
        self._apply_change(
            {"salary": salary},
            EmployeeSalaryChanged,
            updated_by,
            previous_salary=self.salary.value,
            new_salary=salary.value,
        )

    def add_skill(self, skill: str, updated_by: Optional[str] = None) -> None:
        """Add a skill.

        Raises:
            ValidationError: If the skill is blank
            BusinessRuleViolationError: If the skill is already listed
        """
        self._ensure_not_deleted("add_skill")
        skill = skill.strip()
        if not skill:
            raise ValidationError("Skill cannot be empty", "skills", skill)
        if skill.casefold() in (s.casefold() for s in self.skills):
            raise BusinessRuleViolationError(f"Skill already registered: {skill}")
        self._apply_change(
            {"skills": (*self.skills, skill)}, EmployeeSkillAdded, updated_by, skill=skill
        )

    def remove_skill(self, skill: str, updated_by: Optional[str] = None) -> None:
        """Remove a skill.

        Raises:
            OperationNotAllowedError: If the skill is not listed
        """
        self._ensure_not_deleted("remove_skill")
        wanted = skill.strip().casefold()
        remaining = tuple(s for s in self.skills if s.casefold() != wanted)
        if len(remaining) == len(self.skills):
            raise OperationNotAllowedError("remove_skill", f"skill not found: {skill}")
        self._apply_change(
            {"skills": remaining}, EmployeeSkillRemoved, updated_by, skill=skill.strip()
        )

    def terminate(
        self,
        termination_date: Optional[date] = None,
        reason: Optional[str] = None,
        updated_by: Optional[str] = None,
    ) -> None:
        """End the employment contract.

        Raises:
            OperationNotAllowedError: If the employee is already terminated
            BusinessRuleViolationError: If the date is not after the hire
                date or lies in the future
        """
        self._ensure_not_deleted("terminate")
        if self.status is EmployeeStatus.TERMINATED:
            raise OperationNotAllowedError("terminate", "employee is already terminated")
        termination_date = termination_date or date.today()
        self._apply_change(
            {"status": EmployeeStatus.TERMINATED, "termination_date": termination_date},
            EmployeeTerminated,
            updated_by,
            termination_date=termination_date,
            reason=reason,
        )

    def _ensure_not_deleted(self, operation: str) -> None:
        if self.is_deleted:
            raise OperationNotAllowedError(operation, "employee is deleted")
