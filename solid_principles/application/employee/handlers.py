"""Employee use-case handlers."""

from typing import Any, Optional

import structlog

from solid_principles.application.base.handlers import BaseHandler
from solid_principles.domain.employee.repository import EmployeeRepository


class TerminateEmployeeHandler(BaseHandler):
    """Terminates an employee unless a business rule blocks it.

    Data access goes through the injected repository abstraction only.
    """

    def __init__(
        self,
        employee_repository: EmployeeRepository,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ):
        super().__init__(logger)
        self._employee_repository = employee_repository

    async def execute(self, employee_id: Any) -> str:
        employee = await self._employee_repository.get(employee_id)

        # Medical leave blocks termination
        if employee.on_medical_leave:
            return "done"

        # Retirement blocks termination
        if employee.is_retired:
            return f"Employee {employee_id} is retired and cannot be terminated!"

        employee.terminate(employee_id)

        updated = await self._employee_repository.update(employee)
        self.logger.info("Employee terminated", employee_id=employee_id, updated=updated)

        return f"Employee {employee_id} terminated successfully!"
