"""Persistence infrastructure providers."""

from dishka import Scope, provide

from hrcore.domain.repository import EmployeeRepository
from hrcore.persistence.repository.inmemory import InMemoryEmployeeRepository
from hrcore.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Keeps one in-memory store for the lifetime of the application.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_employee_repository(self) -> EmployeeRepository:
        """Provide Employee repository."""
        return InMemoryEmployeeRepository()
