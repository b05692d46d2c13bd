"""Enumerated HR value types."""

from enum import Enum


class EmployeeStatus(str, Enum):
    """Employment status."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
    ON_LEAVE = "on_leave"
    TERMINATED = "terminated"
    RETIRED = "retired"

    @property
    def is_employed(self) -> bool:
        """Whether the employee still has a contract with the company."""
        return self not in (EmployeeStatus.TERMINATED, EmployeeStatus.RETIRED)


class ContractType(str, Enum):
    """Employment contract regime."""

    CLT = "clt"
    PJ = "pj"
    INTERNSHIP = "internship"
    TRAINEE = "trainee"
    OUTSOURCED = "outsourced"
    FREELANCER = "freelancer"
    TEMPORARY = "temporary"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    NON_BINARY = "non_binary"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class MaritalStatus(str, Enum):
    SINGLE = "single"
    MARRIED = "married"
    DIVORCED = "divorced"
    WIDOWED = "widowed"
    SEPARATED = "separated"
    COMMON_LAW_MARRIAGE = "common_law_marriage"


class EducationLevel(str, Enum):
    """Highest completed (or in progress) education level."""

    PRIMARY_INCOMPLETE = "primary_incomplete"
    PRIMARY_COMPLETE = "primary_complete"
    SECONDARY_INCOMPLETE = "secondary_incomplete"
    SECONDARY_COMPLETE = "secondary_complete"
    HIGHER_INCOMPLETE = "higher_incomplete"
    HIGHER_COMPLETE = "higher_complete"
    POSTGRADUATE_INCOMPLETE = "postgraduate_incomplete"
    POSTGRADUATE_COMPLETE = "postgraduate_complete"
    MASTERS_INCOMPLETE = "masters_incomplete"
    MASTERS_COMPLETE = "masters_complete"
    DOCTORATE_INCOMPLETE = "doctorate_incomplete"
    DOCTORATE_COMPLETE = "doctorate_complete"


class AddressType(str, Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    MAILING = "mailing"
