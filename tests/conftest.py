import os
import pytest
from unittest.mock import AsyncMock, Mock

from solid_principles.domain.employee.aggregate import Employee
from solid_principles.domain.employee.repository import EmployeeRepository
from solid_principles.domain.greeting.language_provider import Greeter
from solid_principles.infrastructure.persistence.employee_repository import (
    InMemoryEmployeeRepository,
)

CONFIG_ENV_VARS = (
    "SOLID_CONFIG_FILE",
    "SOLID_DEFAULT_LOCALE",
    "SOLID_LOGDIR",
    "LOG_LEVEL",
    "LOG_DESTINATION",
)


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Keep configuration environment variables out of every test."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def active_employee():
    return Employee(id=1)


@pytest.fixture
def retired_employee():
    return Employee(id=2, is_retired=True)


@pytest.fixture
def employee_on_leave():
    return Employee(id=3, on_medical_leave=True, is_retired=True)


@pytest.fixture
def employee_repository(active_employee, retired_employee, employee_on_leave):
    return InMemoryEmployeeRepository([active_employee, retired_employee, employee_on_leave])


@pytest.fixture
def mock_employee_repository():
    repository = Mock(spec=EmployeeRepository)
    repository.get = AsyncMock()
    repository.update = AsyncMock(return_value=True)
    return repository


@pytest.fixture
def make_greeter():
    """Build an ad-hoc Greeter variant returning the given text."""
    def _make(text: str) -> Greeter:
        class CustomGreeter(Greeter):
            def greet(self) -> str:
                return text

        return CustomGreeter()

    return _make


@pytest.fixture
def config_file(tmp_path):
    """Write a JSON config file and return its path."""
    def _write(content: str) -> str:
        path = tmp_path / "solid_config.json"
        path.write_text(content)
        return os.fspath(path)

    return _write
