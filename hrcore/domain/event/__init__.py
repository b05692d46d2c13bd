"""Domain events and the in-process event bus."""

from hrcore.domain.event.base import (
    AggregateDeleted,
    AggregateRestored,
    DomainEvent,
    DomainEventHandler,
)
from hrcore.domain.event.bus import DomainEventBus
from hrcore.domain.event.employee import (
    EmployeeHired,
    EmployeePersonalDataUpdated,
    EmployeePositionChanged,
    EmployeeSalaryChanged,
    EmployeeSkillAdded,
    EmployeeSkillRemoved,
    EmployeeTerminated,
)

__all__ = [
    "DomainEvent",
    "DomainEventHandler",
    "DomainEventBus",
    "AggregateDeleted",
    "AggregateRestored",
    "EmployeeHired",
    "EmployeePersonalDataUpdated",
    "EmployeePositionChanged",
    "EmployeeSalaryChanged",
    "EmployeeSkillAdded",
    "EmployeeSkillRemoved",
    "EmployeeTerminated",
]
