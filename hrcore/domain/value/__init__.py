"""Domain value objects."""

from hrcore.domain.value.address import Address
from hrcore.domain.value.common import RootValueObject, ValueObject
from hrcore.domain.value.contact import Email
from hrcore.domain.value.documents import Cpf
from hrcore.domain.value.identifiers import (
    Id,
    IdFactory,
    IdKind,
    NumberId,
    StringId,
    UuidId,
)
from hrcore.domain.value.money import Salary
from hrcore.domain.value.types import (
    AddressType,
    ContractType,
    EducationLevel,
    EmployeeStatus,
    Gender,
    MaritalStatus,
)

__all__ = [
    # Base classes
    "ValueObject",
    "RootValueObject",
    # Identifiers
    "Id",
    "StringId",
    "NumberId",
    "UuidId",
    "IdKind",
    "IdFactory",
    # Types
    "Address",
    "AddressType",
    "ContractType",
    "Cpf",
    "EducationLevel",
    "Email",
    "EmployeeStatus",
    "Gender",
    "MaritalStatus",
    "Salary",
]
