"""Unit tests for domain events and the event bus."""

import asyncio
from typing import ClassVar

import pytest

from hrcore.domain.event import (
    DomainEvent,
    DomainEventBus,
    DomainEventHandler,
    EmployeeHired,
    EmployeeTerminated,
)


class SomethingHappened(DomainEvent):
    event_type: ClassVar[str] = "SomethingHappened"

    note: str = ""


class OtherThingHappened(DomainEvent):
    event_type: ClassVar[str] = "OtherThingHappened"


class Untyped(DomainEvent):
    pass


class Recorder(DomainEventHandler[DomainEvent]):
    def __init__(self, log: list, name: str = "recorder", delay: float = 0.0):
        self.log = log
        self.name = name
        self.delay = delay

    async def handle(self, event: DomainEvent) -> None:
        if self.delay:
            await asyncio.sleep(self.delay)
        self.log.append((self.name, event.event_type, getattr(event, "note", "")))


class Exploding(DomainEventHandler[DomainEvent]):
    async def handle(self, event: DomainEvent) -> None:
        raise RuntimeError("handler bug")


class Handshake(DomainEventHandler[DomainEvent]):
    def __init__(self, signal: asyncio.Event, wait_for: asyncio.Event):
        self.signal = signal
        self.wait_for = wait_for

    async def handle(self, event: DomainEvent) -> None:
        self.signal.set()
        await self.wait_for.wait()


class HiredOnly(Recorder):
    handles = EmployeeHired


def _event(note: str = "", event_cls=SomethingHappened) -> DomainEvent:
    if event_cls is SomethingHappened:
        return SomethingHappened(aggregate_id="agg-1", version=1, note=note)
    return event_cls(aggregate_id="agg-1", version=1)


class TestDomainEvent:
    def test_event_defaults(self):
        event = _event()

        assert event.event_id is not None
        assert event.occurred_on is not None
        assert event.event_id != _event().event_id

    def test_events_are_immutable(self):
        with pytest.raises(Exception):
            _event().note = "changed"

    def test_event_without_type_is_rejected(self):
        with pytest.raises(TypeError):
            Untyped(aggregate_id="a", version=1)

    def test_to_json_includes_event_type(self):
        data = _event("x").to_json()

        assert data["event_type"] == "SomethingHappened"
        assert data["aggregate_id"] == "agg-1"
        assert data["note"] == "x"

    def test_str(self):
        assert str(_event()).startswith("SomethingHappened(id=")

    def test_handler_name_and_can_handle(self):
        handler = HiredOnly([])

        assert handler.handler_name == "HiredOnly"
        assert not handler.can_handle(_event())
        assert Recorder([]).can_handle(_event())


class TestSubscriptions:
    def test_subscribe_by_class_or_name(self):
        bus = DomainEventBus()
        handler = Recorder([])

        bus.subscribe(SomethingHappened, handler)
        bus.subscribe("SomethingHappened", handler)

        assert bus.handler_count(SomethingHappened) == 2
        assert bus.registered_event_types() == ["SomethingHappened"]

    def test_subscribing_untyped_class_fails(self):
        with pytest.raises(TypeError):
            DomainEventBus().subscribe(Untyped, Recorder([]))

    def test_unsubscribe(self):
        bus = DomainEventBus()
        handler = Recorder([])
        bus.subscribe(SomethingHappened, handler)

        assert bus.unsubscribe(SomethingHappened, handler)
        assert not bus.unsubscribe(SomethingHappened, handler)
        assert bus.registered_event_types() == []

    def test_clear(self):
        bus = DomainEventBus()
        bus.subscribe(SomethingHappened, Recorder([]))

        bus.clear()

        assert bus.handler_count(SomethingHappened) == 0


class TestPublish:
    @pytest.mark.asyncio
    async def test_handlers_run_in_subscription_order(self):
        log = []
        bus = DomainEventBus()
        bus.subscribe(SomethingHappened, Recorder(log, "first", delay=0.01))
        bus.subscribe(SomethingHappened, Recorder(log, "second"))

        await bus.publish(_event())

        assert [name for name, _, _ in log] == ["first", "second"]

    @pytest.mark.asyncio
    async def test_only_matching_event_type_is_delivered(self):
        log = []
        bus = DomainEventBus()
        bus.subscribe(OtherThingHappened, Recorder(log))

        await bus.publish(_event())

        assert log == []

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self):
        log = []
        bus = DomainEventBus()
        bus.subscribe(SomethingHappened, Exploding())
        bus.subscribe(SomethingHappened, Recorder(log))

        await bus.publish(_event())

        assert log == [("recorder", "SomethingHappened", "")]

    @pytest.mark.asyncio
    async def test_handler_that_cannot_handle_is_skipped(self):
        log = []
        bus = DomainEventBus()
        bus.subscribe(SomethingHappened, HiredOnly(log))

        await bus.publish(_event())

        assert log == []

    @pytest.mark.asyncio
    async def test_publish_without_handlers_is_fine(self):
        await DomainEventBus().publish(_event())


class TestPublishAll:
    @pytest.mark.asyncio
    async def test_sequential_publish_keeps_event_order(self):
        log = []
        bus = DomainEventBus(concurrent=False)
        bus.subscribe(SomethingHappened, Recorder(log, delay=0.01))

        await bus.publish_all([_event("a"), _event("b"), _event("c")])

        assert [note for _, _, note in log] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_concurrent_publish_delivers_everything(self):
        log = []
        bus = DomainEventBus(concurrent=True)
        bus.subscribe(SomethingHappened, Recorder(log, delay=0.01))
        bus.subscribe(OtherThingHappened, Exploding())

        await bus.publish_all(
            [_event("a"), _event(event_cls=OtherThingHappened), _event("b")]
        )

        assert sorted(note for _, _, note in log) == ["a", "b"]

    @staticmethod
    def _handshake_bus(concurrent: bool) -> DomainEventBus:
        # Each handler signals its own flag, then waits for the other one
        first, second = asyncio.Event(), asyncio.Event()
        bus = DomainEventBus(concurrent=concurrent)
        bus.subscribe(SomethingHappened, Handshake(signal=first, wait_for=second))
        bus.subscribe(OtherThingHappened, Handshake(signal=second, wait_for=first))
        return bus

    @pytest.mark.asyncio
    async def test_concurrent_publish_runs_events_together(self):
        bus = self._handshake_bus(concurrent=True)

        await asyncio.wait_for(
            bus.publish_all([_event(), _event(event_cls=OtherThingHappened)]), timeout=1
        )

    @pytest.mark.asyncio
    async def test_sequential_publish_waits_for_each_event(self):
        bus = self._handshake_bus(concurrent=False)

        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(
                bus.publish_all([_event(), _event(event_cls=OtherThingHappened)]),
                timeout=0.1,
            )

    @pytest.mark.asyncio
    async def test_employee_events_route_by_type(self):
        log = []
        bus = DomainEventBus()
        bus.subscribe(EmployeeTerminated, Recorder(log))

        await bus.publish_all(
            [EmployeeTerminated(aggregate_id="e-1", version=2, termination_date="2024-01-31")]
        )

        assert log == [("recorder", "EmployeeTerminated", "")]
