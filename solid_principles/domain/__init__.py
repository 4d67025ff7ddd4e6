"""
Domain Layer - one bounded context per example

- core/: Domain exceptions shared by all contexts
- base/: Shared kernel with the base entity
- statistics/: Single responsibility example
- shapes/: Open-closed and Liskov substitution examples
- greeting/: Greeter capability and language providers
- payment/: Payment capability and payment providers
- employee/: Employee entity and repository contract
"""

from .core.exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    NotImplementedOperationError,
    UnsupportedLocaleError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "NotImplementedOperationError",
    "UnsupportedLocaleError",
    "ConfigurationError",
]
