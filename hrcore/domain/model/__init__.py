"""Domain model entities and aggregates."""

from hrcore.domain.model.aggregate import (
    AggregateRoot,
    AuditableAggregateRoot,
    OptimisticLockAggregateRoot,
    SoftDeletableAggregateRoot,
)
from hrcore.domain.model.common import (
    AuditableEntity,
    DomainModel,
    Entity,
    SoftDeletableEntity,
    VersionedEntity,
)
from hrcore.domain.model.employee import Employee

__all__ = [
    "DomainModel",
    "Entity",
    "AuditableEntity",
    "VersionedEntity",
    "SoftDeletableEntity",
    "AggregateRoot",
    "AuditableAggregateRoot",
    "SoftDeletableAggregateRoot",
    "OptimisticLockAggregateRoot",
    "Employee",
]
