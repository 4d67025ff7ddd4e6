"""Employee entity."""

from typing import Any

from solid_principles.domain.base.entity import Entity


class Employee(Entity):
    """Employee record as seen by the termination workflow."""

    on_medical_leave: bool = False
    is_retired: bool = False
    terminated: bool = False

    def terminate(self, employee_id: Any) -> Any:
        """Mark the employee as terminated and return the given id."""
        self.terminated = True
        return employee_id
