"""Employee domain service."""

from collections.abc import Mapping
from typing import Any, Optional

import logfire

from hrcore.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
)
from hrcore.domain.event import DomainEventBus
from hrcore.domain.model.employee import Employee
from hrcore.domain.repository import EmployeeRepository
from hrcore.domain.specification import Specification, TrueSpecification
from hrcore.domain.types import Result
from hrcore.domain.validation import EmployeeValidator
from hrcore.domain.value import Cpf, UuidId

from .base import Service


class EmployeeService(Service):
    """Domain service for employee operations."""

    def __init__(
        self, employee_repository: EmployeeRepository, event_bus: DomainEventBus
    ) -> None:
        """Initialize employee service.

        Args:
            employee_repository: Employee repository
            event_bus: Bus receiving the events of saved employees
        """
        self.employee_repository = employee_repository
        self.event_bus = event_bus
        self.validator = EmployeeValidator()

    async def hire(
        self, data: Mapping[str, Any], created_by: Optional[str] = None
    ) -> Result[Employee, list[DomainError]]:
        """Hire a new employee from raw input.

        Args:
            data: Employee fields
            created_by: Who registered the hire

        Returns:
            Success with the saved employee, or failure with every problem
            found in the input
        """
        with logfire.span(
            "employee_service.hire",
            employee_number=data.get("employee_number") if isinstance(data, Mapping) else None,
        ):
            validation = self.validator.validate(data)
            if validation.is_failure:
                logfire.warn(
                    "Employee data rejected",
                    fields=[error.field for error in validation.error],
                )
                return Result.failure(list(validation.error))

            fields = validation.value
            cpf = fields["cpf"] if isinstance(fields["cpf"], Cpf) else Cpf(fields["cpf"])
            existing = await self.employee_repository.find_by_cpf(cpf)
            if existing.is_some:
                logfire.warn("Duplicate CPF on hire", employee_id=str(existing.value.id))
                return Result.failure(
                    [
                        BusinessRuleViolationError(
                            "An employee with this CPF already exists",
                            {"cpf": cpf.formatted_value},
                        )
                    ]
                )

            created = Employee.create(fields, created_by)
            if created.is_failure:
                logfire.warn("Employee rejected", error=str(created.error))
                return Result.failure([created.error])

            employee = await self.save(created.value)
            logfire.info(
                "Employee hired",
                employee_id=str(employee.id),
                employee_number=employee.employee_number,
            )
            return Result.success(employee)

    async def get(self, employee_id: UuidId) -> Employee:
        """Get an employee by ID.

        Args:
            employee_id: Employee ID

        Returns:
            Employee

        Raises:
            EntityNotFoundError: If no employee has this ID
        """
        with logfire.span("employee_service.get", employee_id=str(employee_id)):
            found = await self.employee_repository.find_by_id(employee_id)
            if found.is_none:
                logfire.warn("Employee not found", employee_id=str(employee_id))
                raise EntityNotFoundError(Employee.entity_type, str(employee_id))
            return found.value

    async def save(
        self, employee: Employee, expected_version: Optional[int] = None
    ) -> Employee:
        """Persist an employee and publish its pending events.

        Events are marked as committed only after every handler has run.

        Args:
            employee: Employee to save
            expected_version: Version the caller loaded, if it should be
                checked

        Returns:
            Saved employee

        Raises:
            ConcurrencyError: If the stored version differs from
                ``expected_version``
        """
        with logfire.span(
            "employee_service.save",
            employee_id=str(employee.id),
            version=employee.version,
        ):
            saved = await self.employee_repository.save(employee, expected_version)
            events = employee.get_uncommitted_events()
            await self.event_bus.publish_all(events)
            employee.mark_events_as_committed()
            logfire.info(
                "Employee saved",
                employee_id=str(saved.id),
                version=saved.version,
                events=len(events),
            )
            return saved

    async def find(
        self,
        specification: Optional[Specification[Employee]] = None,
        include_deleted: bool = False,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Employee]:
        """Find employees satisfying a specification (all when omitted)."""
        specification = specification or TrueSpecification()
        with logfire.span("employee_service.find", specification=str(specification)):
            return await self.employee_repository.find_by_specification(
                specification, include_deleted=include_deleted, limit=limit, offset=offset
            )

    async def count(
        self,
        specification: Optional[Specification[Employee]] = None,
        include_deleted: bool = False,
    ) -> int:
        specification = specification or TrueSpecification()
        return await self.employee_repository.count_by_specification(
            specification, include_deleted=include_deleted
        )
