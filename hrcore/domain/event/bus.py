"""In-process domain event bus."""

import asyncio
from collections.abc import Iterable

import logfire

from hrcore.domain.event.base import DomainEvent, DomainEventHandler


def _event_key(event_type: type[DomainEvent] | str) -> str:
    if isinstance(event_type, str):
        return event_type
    if not event_type.event_type:
        raise TypeError(f"{event_type.__name__} does not declare an event_type")
    return event_type.event_type


class DomainEventBus:
    """Routes events to the handlers subscribed to their ``event_type``.

    Handlers for one event run one after another, in subscription order.
    A failing handler is logged and skipped; it never stops the handlers
    after it, nor reaches the publisher.

    Args:
        concurrent: Whether ``publish_all`` dispatches events concurrently
    """

    def __init__(self, concurrent: bool = True) -> None:
        self.concurrent = concurrent
        self._handlers: dict[str, list[DomainEventHandler]] = {}

    def subscribe(
        self, event_type: type[DomainEvent] | str, handler: DomainEventHandler
    ) -> None:
        self._handlers.setdefault(_event_key(event_type), []).append(handler)

    def unsubscribe(
        self, event_type: type[DomainEvent] | str, handler: DomainEventHandler
    ) -> bool:
        """Remove one subscription.

        Returns:
            True if the handler was subscribed, False otherwise
        """
        key = _event_key(event_type)
        handlers = self._handlers.get(key, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        if not handlers:
            del self._handlers[key]
        return True

    def clear(self) -> None:
        self._handlers = {}

    def handler_count(self, event_type: type[DomainEvent] | str) -> int:
        return len(self._handlers.get(_event_key(event_type), []))

    def registered_event_types(self) -> list[str]:
        return list(self._handlers)

    async def publish(self, event: DomainEvent) -> None:
        """Deliver one event to its handlers."""
        # Subscriptions made while publishing apply to the next event
        handlers = list(self._handlers.get(event.event_type, []))
        with logfire.span(
            "event_bus.publish",
            event_type=event.event_type,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        ):
            for handler in handlers:
                if not handler.can_handle(event):
                    continue
                try:
                    await handler.handle(event)
                except Exception:
                    logfire.exception(
                        "Event handler failed",
                        handler=handler.handler_name,
                        event_type=event.event_type,
                        event_id=str(event.event_id),
                        aggregate_id=event.aggregate_id,
                    )

    async def publish_all(self, events: Iterable[DomainEvent]) -> None:
        """Deliver several events.

        Returns once every event has been handled (or its handler failures
        logged).
        """
        events = list(events)
        with logfire.span(
            "event_bus.publish_all",
            event_count=len(events),
            concurrent=self.concurrent,
        ):
            if self.concurrent:
                await asyncio.gather(*(self.publish(event) for event in events))
            else:
                for event in events:
                    await self.publish(event)
