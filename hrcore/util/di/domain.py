"""Domain layer DI providers."""

from dishka import Scope, provide

from hrcore.config import EventSettings
from hrcore.domain.event import DomainEventBus
from hrcore.domain.repository import EmployeeRepository
from hrcore.domain.service import EmployeeService
from hrcore.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    The event bus lives for the whole application so subscriptions made at
    startup reach every service. Services are REQUEST-scoped to follow the
    repository lifecycle.
    """

    @provide(scope=Scope.APP)
    def get_event_bus(self, event_settings: EventSettings) -> DomainEventBus:
        """Provide the application event bus."""
        return DomainEventBus(concurrent=event_settings.publish_concurrently)

    @provide(scope=Scope.REQUEST)
    def get_employee_service(
        self, employee_repository: EmployeeRepository, event_bus: DomainEventBus
    ) -> EmployeeService:
        """Provide employee domain service."""
        return EmployeeService(
            employee_repository=employee_repository, event_bus=event_bus
        )
