"""Test configuration and fixtures."""

import logfire
import pytest

from hrcore.domain.model import Employee
from tests.factories import make_employee

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def employee() -> Employee:
    return make_employee()
