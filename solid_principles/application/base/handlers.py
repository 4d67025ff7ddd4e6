"""Base handler for application use cases."""

from abc import ABC, abstractmethod
from typing import Any, Optional

import structlog

from solid_principles.infrastructure.logging.logger import get_logger


class BaseHandler(ABC):
    """
    Root base handler with common cross-cutting concerns.

    Handlers receive their collaborators through the constructor and expose
    a single ``execute`` entry point.
    """

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None):
        """Initialize base handler with an optional logger."""
        self.logger = logger or get_logger(self.__class__.__module__)

    @abstractmethod
    async def execute(self, *args: Any, **kwargs: Any) -> Any:
        """Run the use case."""
