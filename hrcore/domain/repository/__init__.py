"""Repository interfaces for the HR domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from hrcore.domain.repository.employee import EmployeeRepository

__all__ = [
    "EmployeeRepository",
]
