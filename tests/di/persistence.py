"""Mock persistence providers for testing."""

from dishka import Scope, provide

from hrcore.domain.repository import EmployeeRepository
from hrcore.persistence.repository.inmemory import InMemoryEmployeeRepository
from hrcore.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_employee_repository(self) -> EmployeeRepository:
        """Provide in-memory employee repository."""
        return InMemoryEmployeeRepository()
