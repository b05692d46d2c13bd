"""Aggregate roots.

An aggregate root is the consistency boundary for a cluster of domain
objects. Each state change bumps its version by exactly one and records one
domain event in an uncommitted buffer, which the persisting service drains.
"""

from typing import Any, Optional

from pydantic import PrivateAttr

from hrcore.domain.error import ConcurrencyError
from hrcore.domain.event.base import AggregateDeleted, AggregateRestored, DomainEvent
from hrcore.domain.model.common import AuditableEntity, SoftDeletableEntity, VersionedEntity


class AggregateRoot(VersionedEntity):
    """Versioned entity that records domain events."""

    _uncommitted_events: list[DomainEvent] = PrivateAttr(default_factory=list)

    def get_uncommitted_events(self) -> tuple[DomainEvent, ...]:
        """Snapshot of the events recorded since the last commit, oldest first."""
        return tuple(self._uncommitted_events)

    def mark_events_as_committed(self) -> None:
        # Replace rather than clear so snapshots taken earlier stay intact
        self._uncommitted_events = []

    def has_uncommitted_events(self) -> bool:
        return bool(self._uncommitted_events)

    @property
    def uncommitted_event_count(self) -> int:
        return len(self._uncommitted_events)

    def _new_event(self, event_cls: type[DomainEvent], version: int, **payload: Any) -> DomainEvent:
        return event_cls(aggregate_id=str(self.id), version=version, **payload)

    def _record_event(self, event_cls: type[DomainEvent], **payload: Any) -> DomainEvent:
        """Record an event at the current version."""
        event = self._new_event(event_cls, self.version, **payload)
        self._uncommitted_events.append(event)
        return event

    def _apply_change(
        self,
        changes: dict[str, Any],
        event_cls: type[DomainEvent],
        updated_by: Optional[str] = None,
        **payload: Any,
    ) -> DomainEvent:
        """Apply a state change as one atomic step.

        The candidate state (with the version bumped by one) and the event
        are both built before anything is committed, so a validation error
        leaves state, version and event buffer untouched.

        Args:
            changes: Field values to change
            event_cls: Event to record for the change
            updated_by: Who made the change, for auditable aggregates
            **payload: Event-specific fields

        Returns:
            The recorded event
        """
        candidate = self._candidate({**changes, "version": self.version + 1}, updated_by)
        event = self._new_event(event_cls, candidate.version, **payload)
        self._commit(candidate)
        self._uncommitted_events.append(event)
        return event


class AuditableAggregateRoot(AuditableEntity, AggregateRoot):
    """Aggregate root that records who created and last changed it."""


class SoftDeletableAggregateRoot(SoftDeletableEntity, AggregateRoot):
    """Aggregate root whose deletion and restoration are versioned events."""

    def delete(self, deleted_by: Optional[str] = None) -> None:
        self._ensure_can_delete()
        self._apply_change(
            self._deletion_changes(deleted_by),
            AggregateDeleted,
            deleted_by,
            deleted_by=deleted_by,
        )

    def restore(self) -> None:
        self._ensure_can_restore()
        self._apply_change({"deleted_at": None, "deleted_by": None}, AggregateRestored)


class OptimisticLockAggregateRoot(AggregateRoot):
    """Aggregate root that can assert the version a caller loaded."""

    def check_version(self, expected_version: int) -> None:
        """Check that nobody changed the aggregate since ``expected_version``.

        Raises:
            ConcurrencyError: If the current version differs
        """
        if self.version != expected_version:
            raise ConcurrencyError(
                self.entity_type, str(self.id), expected_version, self.version
            )
