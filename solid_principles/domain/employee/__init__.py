"""Employee bounded context."""

from .aggregate import Employee
from .exceptions import EmployeeNotFoundError
from .repository import EmployeeRepository

__all__ = ["Employee", "EmployeeRepository", "EmployeeNotFoundError"]
