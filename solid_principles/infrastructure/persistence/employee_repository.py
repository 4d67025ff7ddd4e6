"""Employee repository implementations."""

from typing import Any, Dict, Iterable, Optional

from solid_principles.domain.core.exceptions import NotImplementedOperationError
from solid_principles.domain.employee.aggregate import Employee
from solid_principles.domain.employee.exceptions import EmployeeNotFoundError
from solid_principles.domain.employee.repository import EmployeeRepository
from solid_principles.infrastructure.logging.logger import get_logger


class InMemoryEmployeeRepository(EmployeeRepository):
    """Dictionary-backed employee repository."""

    def __init__(self, employees: Optional[Iterable[Employee]] = None):
        self._employees: Dict[Any, Employee] = {}
        self.logger = get_logger(__name__)
        for employee in employees or []:
            self.add(employee)

    def add(self, employee: Employee) -> None:
        """Seed the repository with an employee."""
        self._employees[employee.id] = employee

    async def get(self, employee_id: Any) -> Employee:
        employee = self._employees.get(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        self.logger.debug("Employee loaded", employee_id=employee_id)
        return employee

    async def update(self, employee: Employee) -> bool:
        """Store the employee; return True if it was already known."""
        existed = employee.id in self._employees
        self._employees[employee.id] = employee
        self.logger.debug("Employee saved", employee_id=employee.id, existed=existed)
        return existed

    def __len__(self) -> int:
        return len(self._employees)


class UnimplementedEmployeeRepository(EmployeeRepository):
    """Placeholder for a repository that would be wired to a real backend."""

    async def get(self, employee_id: Any) -> Employee:
        raise NotImplementedOperationError("EmployeeRepository.get")

    async def update(self, employee: Employee) -> bool:
        raise NotImplementedOperationError("EmployeeRepository.update")
