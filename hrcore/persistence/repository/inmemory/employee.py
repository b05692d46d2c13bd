"""In-memory employee repository for testing."""

from typing import Optional

from hrcore.domain.model.employee import Employee
from hrcore.domain.repository.employee import EmployeeRepository
from hrcore.domain.specification import Specification
from hrcore.domain.types import Maybe
from hrcore.domain.value import Cpf, UuidId


class InMemoryEmployeeRepository(EmployeeRepository):
    """In-memory implementation of EmployeeRepository for testing.

    Stores and returns copies, so changes to a loaded employee only reach
    the store through ``save``.
    """

    def __init__(self) -> None:
        self._employees: dict[UuidId, Employee] = {}

    def _load(self, employee: Optional[Employee]) -> Maybe[Employee]:
        return Maybe.from_nullable(employee).map(lambda e: e.clone())

    async def find_by_id(self, employee_id: UuidId) -> Maybe[Employee]:
        """Find an employee by ID."""
        return self._load(self._employees.get(employee_id))

    async def find_by_cpf(self, cpf: Cpf) -> Maybe[Employee]:
        """Find an employee by CPF (includes deleted employees)."""
        return self._load(next((e for e in self._employees.values() if e.cpf == cpf), None))

    async def find_by_employee_number(self, employee_number: str) -> Maybe[Employee]:
        return self._load(
            next(
                (e for e in self._employees.values() if e.employee_number == employee_number),
                None,
            )
        )

    def _matching(
        self, specification: Specification[Employee], include_deleted: bool
    ) -> list[Employee]:
        employees = list(self._employees.values())

        # Filter deleted
        if not include_deleted:
            employees = [e for e in employees if not e.is_deleted]

        employees = specification.select(employees)
        employees.sort(key=lambda e: (e.hire_date, e.created_at))
        return employees

    async def find_by_specification(
        self,
        specification: Specification[Employee],
        include_deleted: bool = False,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Employee]:
        """Find employees satisfying a specification."""
        employees = self._matching(specification, include_deleted)

        # Paginate
        end = None if limit is None else offset + limit
        return [e.clone() for e in employees[offset:end]]

    async def count_by_specification(
        self, specification: Specification[Employee], include_deleted: bool = False
    ) -> int:
        return len(self._matching(specification, include_deleted))

    async def exists(self, employee_id: UuidId) -> bool:
        return employee_id in self._employees

    async def save(
        self, employee: Employee, expected_version: Optional[int] = None
    ) -> Employee:
        """Save an employee, checking the stored version when asked to."""
        stored = self._employees.get(employee.id)
        if expected_version is not None and stored is not None:
            stored.check_version(expected_version)

        # Events are not persisted; the caller publishes them
        snapshot = employee.clone()
        snapshot.mark_events_as_committed()
        self._employees[employee.id] = snapshot
        return employee

    async def delete(self, employee_id: UuidId) -> bool:
        return self._employees.pop(employee_id, None) is not None
