"""Employee repository interface - contract for employee data access."""

from abc import ABC, abstractmethod
from typing import Any

from .aggregate import Employee


class EmployeeRepository(ABC):
    """Repository interface for employees.

    Database details stay behind this abstraction; callers only await
    ``get`` and ``update``.
    """

    @abstractmethod
    async def get(self, employee_id: Any) -> Employee:
        """Fetch an employee by id.

        Raises:
            EmployeeNotFoundError: If no employee has the given id
        """

    @abstractmethod
    async def update(self, employee: Employee) -> bool:
        """Persist changes to an employee and report success."""
