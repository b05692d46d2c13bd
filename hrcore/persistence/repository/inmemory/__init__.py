"""In-memory repository implementations for testing."""

from .employee import InMemoryEmployeeRepository

__all__ = [
    "InMemoryEmployeeRepository",
]
