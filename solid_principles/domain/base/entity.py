"""Base domain entities - foundation for all domain objects."""
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """Base class for all domain entities."""
    model_config = ConfigDict(
        frozen=False,  # Entities are mutable
        validate_assignment=True,
    )

    id: Optional[Any] = None

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID and type."""
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash((self.__class__, self.id))
