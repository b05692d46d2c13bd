"""Base classes for value objects.

Value objects are immutable and compared by value, not identity. Concrete
types only declare their components; equality and hashing are derived from
``primitive_values()`` by the structural helpers in this module.

The structural walks assume components are acyclic, which holds for
immutable value objects built from plain data. A depth guard turns an
accidental cycle into a ``RecursionError`` instead of a hang.
"""

import copy
import math
import numbers
from collections.abc import (
    Mapping,
    MutableSequence,
    MutableSet,
    Sequence,
    Set,
)
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar, get_args, get_origin
from uuid import UUID

from pydantic import BaseModel, ConfigDict, RootModel, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticUndefined

from hrcore.domain.error import ValidationError

MAX_STRUCTURAL_DEPTH = 64

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= _INT32_MASK
    return value - (_INT32_MASK + 1) if value & _INT32_SIGN else value


def fold_hash(current: int, component: int) -> int:
    """One step of the rolling hash: ``(h << 5) - h + component``."""
    return to_int32((current << 5) - current + component)


def hash_string(text: str) -> int:
    """Hash a string character by character."""
    result = 0
    for char in text:
        result = fold_hash(result, ord(char))
    return result


def _check_depth(depth: int) -> None:
    if depth > MAX_STRUCTURAL_DEPTH:
        raise RecursionError(
            f"Structural comparison exceeded {MAX_STRUCTURAL_DEPTH} levels; "
            "value object components must be acyclic"
        )


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


# Fixed hashes for non-finite numbers, shared by float and Decimal
_POSITIVE_INFINITY_HASH = 0x7FF00000
_NEGATIVE_INFINITY_HASH = to_int32(0xFFF00000)
_NAN_HASH = 0x7FF80000


def _number_hash(value: Any) -> int:
    if isinstance(value, Decimal):
        if value.is_nan():
            return _NAN_HASH
        if value.is_infinite():
            return _NEGATIVE_INFINITY_HASH if value.is_signed() else _POSITIVE_INFINITY_HASH
    elif not math.isfinite(value):
        if math.isnan(value):
            return _NAN_HASH
        return _NEGATIVE_INFINITY_HASH if value < 0 else _POSITIVE_INFINITY_HASH
    return to_int32(math.floor(value))


def _time_hash(value: time) -> int:
    offset = value.utcoffset()
    if offset is None:
        return hash_string(value.isoformat())
    # Aware times compare by their UTC instant, without wrapping at midnight
    instant = (
        timedelta(
            hours=value.hour,
            minutes=value.minute,
            seconds=value.second,
            microseconds=value.microsecond,
        )
        - offset
    )
    return fold_hash(
        to_int32(instant.days * 86400 + instant.seconds), instant.microseconds
    )


def structural_hash(value: Any, _depth: int = 0) -> int:
    """Deterministic 32-bit hash of a component value.

    Agrees with ``structurally_equal``: equal values always hash equally.
    Mappings and sets are combined order-independently because their
    equality ignores order.
    """
    _check_depth(_depth)
    if value is None:
        return 0
    if isinstance(value, StructuralEquality):
        return value._structural_hash(_depth + 1)
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, Enum):
        return structural_hash(value.value, _depth + 1)
    if isinstance(value, str):
        return hash_string(value)
    if isinstance(value, int):
        return to_int32(value)
    if isinstance(value, (numbers.Real, Decimal)):
        return _number_hash(value)
    if isinstance(value, datetime):
        if value.utcoffset() is not None:
            value = value.astimezone(timezone.utc)
        return hash_string(value.isoformat())
    if isinstance(value, time):
        return _time_hash(value)
    if isinstance(value, date):
        return hash_string(value.isoformat())
    if isinstance(value, UUID):
        return hash_string(str(value))
    if isinstance(value, (bytes, bytearray)):
        result = 0
        for byte in value:
            result = fold_hash(result, byte)
        return result
    if isinstance(value, Mapping):
        return to_int32(
            sum(
                fold_hash(
                    structural_hash(key, _depth + 1), structural_hash(item, _depth + 1)
                )
                for key, item in value.items()
            )
        )
    if isinstance(value, Set):
        return to_int32(sum(structural_hash(item, _depth + 1) for item in value))
    if _is_sequence(value):
        result = 0
        for item in value:
            result = fold_hash(result, structural_hash(item, _depth + 1))
        return result
    # hash() of arbitrary objects is salted per process
    return hash_string(repr(value))


def structurally_equal(left: Any, right: Any, _depth: int = 0) -> bool:
    """Compare two component values, recursing into containers.

    Sequences compare element-wise, mappings key by key regardless of
    insertion order, nested value objects by their own components.
    """
    _check_depth(_depth)
    if isinstance(left, StructuralEquality):
        return left._structurally_equals(right, _depth + 1)
    if isinstance(right, StructuralEquality):
        return False
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if len(left) != len(right) or left.keys() != right.keys():
            return False
        return all(structurally_equal(left[k], right[k], _depth + 1) for k in left)
    if _is_sequence(left) and _is_sequence(right):
        if len(left) != len(right):
            return False
        return all(
            structurally_equal(a, b, _depth + 1) for a, b in zip(left, right)
        )
    return left == right


class FrozenDict(dict):
    """Read-only dict holding the mapping components of a value object.

    Stays a ``dict`` so pydantic serializes it like the declared field type.
    """

    def _immutable(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError("value object components are immutable")

    __setitem__ = _immutable
    __delitem__ = _immutable
    __ior__ = _immutable
    clear = _immutable
    pop = _immutable
    popitem = _immutable
    setdefault = _immutable
    update = _immutable

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (dict(self),)

    def __deepcopy__(self, memo: dict[int, Any]) -> "FrozenDict":
        return type(self)(copy.deepcopy(dict(self), memo))

    def __hash__(self) -> int:  # type: ignore[override]
        return structural_hash(self)


# Annotations whose validated values are mutable containers
_MUTABLE_ORIGINS = (list, set, bytearray, MutableSequence, MutableSet, Sequence, Set)


def _is_mutable_annotation(annotation: Any) -> bool:
    origin = get_origin(annotation) or annotation
    if any(origin is mutable for mutable in _MUTABLE_ORIGINS):
        return True
    return any(_is_mutable_annotation(arg) for arg in get_args(annotation))


def _check_component_annotations(cls: type[BaseModel]) -> None:
    for name, field in cls.model_fields.items():
        if _is_mutable_annotation(field.annotation):
            raise TypeError(
                f"{cls.__qualname__}.{name}: value object components must be "
                f"immutable, use tuple or frozenset instead of {field.annotation}"
            )


def freeze(value: Any) -> Any:
    """Immutable equivalent of a component value.

    Lists become tuples, sets become frozensets and mappings become
    ``FrozenDict``, recursively.
    """
    if isinstance(value, (StructuralEquality, str, bytes)):
        return value
    if isinstance(value, bytearray):
        return bytes(value)
    if isinstance(value, Mapping):
        return FrozenDict({key: freeze(item) for key, item in value.items()})
    if isinstance(value, list) or type(value) is tuple:
        return tuple(freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze(item) for item in value)
    return value


class StructuralEquality:
    """Equality and hashing derived from an ordered list of components.

    ``value_type`` is an explicit type tag: two values are only comparable
    when their tags match. Classes that do not declare one get a tag built
    from their module and qualified name when the class is created.
    """

    value_type: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "value_type" not in cls.__dict__:
            cls.value_type = f"{cls.__module__}.{cls.__qualname__}"

    def primitive_values(self) -> tuple[Any, ...]:
        raise NotImplementedError

    def equals(self, other: object) -> bool:
        """Structural equality with another value object."""
        return self._structurally_equals(other, 0)

    def hash_code(self) -> int:
        """Deterministic signed 32-bit hash of the components."""
        return self._structural_hash(0)

    def is_empty(self) -> bool:
        return False

    def _structurally_equals(self, other: object, depth: int) -> bool:
        if other is None or not isinstance(other, StructuralEquality):
            return False
        if other.value_type != self.value_type:
            return False
        mine = self.primitive_values()
        theirs = other.primitive_values()
        if len(mine) != len(theirs):
            return False
        return all(structurally_equal(a, b, depth) for a, b in zip(mine, theirs))

    def _structural_hash(self, depth: int) -> int:
        result = 0
        for component in self.primitive_values():
            result = fold_hash(result, structural_hash(component, depth))
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StructuralEquality):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return self.hash_code()


class ValueObject(StructuralEquality, BaseModel):
    """Base class for value objects with several components.

    Components are the declared fields, in declaration order.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
        arbitrary_types_allowed=True,
    )

    def __init__(self, /, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            raise ValidationError.from_pydantic(exc, field=type(self).value_type) from exc

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        _check_component_annotations(cls)

    @model_validator(mode="after")
    def freeze_components(self) -> "ValueObject":
        # frozen=True only blocks reassignment, not changes inside containers
        for name in type(self).model_fields:
            self.__dict__[name] = freeze(self.__dict__[name])
        return self

    def primitive_values(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def clone(self) -> "ValueObject":
        """Return an independent deep copy."""
        return self.model_copy(deep=True)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


T = TypeVar("T")


class RootValueObject(StructuralEquality, RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    RootValueObject uses Pydantic's RootModel, which means:
    - The model wraps a single value (accessed via .root or .value)
    - model_dump() returns the primitive value, not a dict
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
    )

    def __init__(self, /, root: Any = PydanticUndefined, **data: Any) -> None:
        try:
            super().__init__(root, **data)
        except PydanticValidationError as exc:
            raise ValidationError.from_pydantic(exc, field=type(self).value_type) from exc

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        _check_component_annotations(cls)

    @model_validator(mode="after")
    def freeze_root(self) -> "RootValueObject[T]":
        self.__dict__["root"] = freeze(self.__dict__["root"])
        return self

    @property
    def value(self) -> T:
        return self.root

    def primitive_values(self) -> tuple[Any, ...]:
        return (self.root,)

    def clone(self) -> "RootValueObject[T]":
        """Return an independent deep copy."""
        return self.model_copy(deep=True)

    def to_json(self) -> Any:
        return self.model_dump(mode="json")

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
