"""Employee repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from hrcore.domain.model.employee import Employee
from hrcore.domain.specification import Specification
from hrcore.domain.types import Maybe
from hrcore.domain.value import Cpf, UuidId


class EmployeeRepository(ABC):
    """Repository for the Employee aggregate.

    Defines the contract for employee persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, employee_id: UuidId) -> Maybe[Employee]:
        """Find an employee by ID.

        Args:
            employee_id: The employee's unique identifier

        Returns:
            The employee if found, none otherwise
        """
        pass

    @abstractmethod
    async def find_by_cpf(self, cpf: Cpf) -> Maybe[Employee]:
        """Find an employee by CPF.

        Args:
            cpf: The employee's CPF

        Returns:
            The employee if found, none otherwise
        """
        pass

    @abstractmethod
    async def find_by_employee_number(self, employee_number: str) -> Maybe[Employee]:
        """Find an employee by their company registration number."""
        pass

    @abstractmethod
    async def find_by_specification(
        self,
        specification: Specification[Employee],
        include_deleted: bool = False,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Employee]:
        """Find employees satisfying a specification.

        Args:
            specification: Selection criteria
            include_deleted: Whether to include soft-deleted employees
            limit: Maximum number of employees to return (None for all)
            offset: Number of employees to skip

        Returns:
            Matching employees, oldest hire first
        """
        pass

    @abstractmethod
    async def count_by_specification(
        self, specification: Specification[Employee], include_deleted: bool = False
    ) -> int:
        """Count employees satisfying a specification."""
        pass

    @abstractmethod
    async def exists(self, employee_id: UuidId) -> bool:
        pass

    @abstractmethod
    async def save(
        self, employee: Employee, expected_version: Optional[int] = None
    ) -> Employee:
        """Save an employee (create or update).

        Args:
            employee: Employee to save
            expected_version: Version the caller loaded; checked against the
                stored version when given

        Returns:
            Saved employee

        Raises:
            ConcurrencyError: If the stored version differs from
                ``expected_version``
        """
        pass

    @abstractmethod
    async def delete(self, employee_id: UuidId) -> bool:
        """Remove an employee permanently.

        Soft deletion is a state change on the aggregate and goes through
        ``save``.

        Returns:
            True if an employee was removed, False if none existed
        """
        pass
