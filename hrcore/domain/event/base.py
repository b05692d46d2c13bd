"""Domain events and handlers.

Aggregates record events while they change; the service that persists an
aggregate drains them and hands them to the event bus.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, ClassVar, Generic, Optional, TypeVar
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class DomainEvent(BaseModel):
    """Base class for domain events.

    Every concrete event declares its ``event_type``, the stable name the
    bus routes on. Events are immutable once created.
    """

    model_config = ConfigDict(
        frozen=True,  # Events describe the past and never change
        arbitrary_types_allowed=True,
    )

    event_type: ClassVar[str] = ""

    event_id: UUID = Field(default_factory=uuid4)
    occurred_on: datetime = Field(default_factory=datetime.now)
    aggregate_id: str
    version: int = Field(ge=1)

    def model_post_init(self, context: Any) -> None:
        if not type(self).event_type:
            raise TypeError(f"{type(self).__name__} must declare an event_type")

    def to_json(self) -> dict[str, Any]:
        return {"event_type": self.event_type, **self.model_dump(mode="json")}

    def __str__(self) -> str:
        return (
            f"{self.event_type}(id={self.event_id}, "
            f"aggregate_id={self.aggregate_id}, version={self.version})"
        )


class AggregateDeleted(DomainEvent):
    """An aggregate was soft deleted."""

    event_type: ClassVar[str] = "AggregateDeleted"

    deleted_by: Optional[str] = None


class AggregateRestored(DomainEvent):
    """A soft deleted aggregate was restored."""

    event_type: ClassVar[str] = "AggregateRestored"


E = TypeVar("E", bound=DomainEvent)


class DomainEventHandler(ABC, Generic[E]):
    """Reacts to one kind of domain event.

    Set ``handles`` to narrow ``can_handle`` to a single event class.
    """

    handles: ClassVar[Optional[type[DomainEvent]]] = None

    @abstractmethod
    async def handle(self, event: E) -> None:
        """Process the event.

        Args:
            event: Event to process
        """
        pass

    def can_handle(self, event: DomainEvent) -> bool:
        return self.handles is None or isinstance(event, self.handles)

    @property
    def handler_name(self) -> str:
        return type(self).__name__
