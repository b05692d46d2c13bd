"""Base classes for domain entities.

Entities have identity: two entities are the same when they are of the same
type and carry the same id, whatever the rest of their state. Entities are
frozen pydantic models, so plain attribute assignment is rejected; state only
changes through ``_mutate``, which validates a complete candidate state
before committing any of it.
"""

from datetime import datetime, timedelta
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from hrcore.domain.error import OperationNotAllowedError, ValidationError
from hrcore.domain.value.identifiers import Id

# Smallest step between two successive updated_at values
_TICK = timedelta(microseconds=1)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class Entity(DomainModel):
    """Identity-bearing domain object.

    Subclasses put cross-field business rules in ``check_invariants``; they
    run on construction and again on every mutation, after pydantic's own
    field validation.
    """

    entity_type: ClassVar[str] = "Entity"

    id: Id
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "entity_type" not in cls.__dict__:
            cls.entity_type = cls.__name__

    def __init__(self, /, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            raise ValidationError.from_pydantic(exc, field=type(self).entity_type) from exc

    @model_validator(mode="before")
    @classmethod
    def default_timestamps(cls, data: Any) -> Any:
        """A new entity starts with updated_at equal to created_at."""
        if not isinstance(data, dict):
            return data
        created_at = data.get("created_at") or datetime.now()
        return {
            **data,
            "created_at": created_at,
            "updated_at": data.get("updated_at") or created_at,
        }

    @model_validator(mode="after")
    def run_invariant_checks(self) -> "Entity":
        if self.updated_at < self.created_at:
            raise ValueError("updated_at cannot be earlier than created_at")
        self.check_invariants()
        return self

    def check_invariants(self) -> None:
        """Check business rules spanning several fields.

        Raises:
            ValidationError: If a field holds an invalid value
            BusinessRuleViolationError: If a cross-field rule is broken
        """

    def is_new(self) -> bool:
        """True until the first mutation."""
        return self.created_at == self.updated_at

    def touch(self, updated_by: Optional[str] = None) -> None:
        """Refresh the modification timestamp without changing any field."""
        self._mutate({}, updated_by)

    def clone(self):
        """Return a distinct instance with the same identity and state."""
        return self.model_copy(deep=True)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def _touch_changes(self, updated_by: Optional[str]) -> dict[str, Any]:
        now = datetime.now(self.updated_at.tzinfo)
        floor = self.updated_at + _TICK
        return {"updated_at": now if now >= floor else floor}

    def _candidate(self, changes: dict[str, Any], updated_by: Optional[str]):
        """Build and fully validate the state a mutation would produce."""
        state = {name: getattr(self, name) for name in type(self).model_fields}
        state.update(changes)
        state.update(self._touch_changes(updated_by))
        return type(self)(**state)

    def _commit(self, candidate: "Entity") -> None:
        # Private attributes (e.g. the event buffer) are not part of __dict__
        self.__dict__.update(candidate.__dict__)

    def _mutate(self, changes: dict[str, Any], updated_by: Optional[str] = None) -> None:
        """Apply ``changes`` atomically.

        Either every change is applied and the new state is valid, or the
        error propagates and the entity is left exactly as it was.
        """
        self._commit(self._candidate(changes, updated_by))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.entity_type == other.entity_type and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.entity_type, self.id))


class AuditableEntity(Entity):
    """Entity that records who created it and who last changed it."""

    created_by: Optional[str] = None
    updated_by: Optional[str] = None

    def _touch_changes(self, updated_by: Optional[str]) -> dict[str, Any]:
        changes = super()._touch_changes(updated_by)
        if updated_by is not None:
            changes["updated_by"] = updated_by
        return changes


class VersionedEntity(Entity):
    """Entity with a version counter that grows with every change."""

    version: int = Field(default=1, ge=1)

    def increment_version(self) -> None:
        self._mutate({"version": self.version + 1})

    def is_modified_since(self, version: int) -> bool:
        return self.version > version


class SoftDeletableEntity(Entity):
    """Entity that is marked deleted instead of being removed."""

    deleted_at: Optional[datetime] = None
    deleted_by: Optional[str] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def delete(self, deleted_by: Optional[str] = None) -> None:
        """Mark the entity deleted.

        Raises:
            OperationNotAllowedError: If it is already deleted
        """
        self._ensure_can_delete()
        self._mutate(self._deletion_changes(deleted_by), deleted_by)

    def restore(self) -> None:
        """Undo a soft delete.

        Raises:
            OperationNotAllowedError: If it is not deleted
        """
        self._ensure_can_restore()
        self._mutate({"deleted_at": None, "deleted_by": None})

    def _ensure_can_delete(self) -> None:
        if self.is_deleted:
            raise OperationNotAllowedError("delete", f"{self.entity_type} is already deleted")

    def _ensure_can_restore(self) -> None:
        if not self.is_deleted:
            raise OperationNotAllowedError("restore", f"{self.entity_type} is not deleted")

    def _deletion_changes(self, deleted_by: Optional[str]) -> dict[str, Any]:
        return {"deleted_at": datetime.now(self.updated_at.tzinfo), "deleted_by": deleted_by}
