"""Domain services."""

from .base import Service
from .employee_service import EmployeeService

__all__ = [
    "EmployeeService",
    "Service",
]
