"""Employee domain exceptions."""

from typing import Any

from solid_principles.domain.core.exceptions import EntityNotFoundError


class EmployeeNotFoundError(EntityNotFoundError):
    """Raised when an employee is not found."""

    def __init__(self, employee_id: Any):
        super().__init__("Employee", employee_id)
