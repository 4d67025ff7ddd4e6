"""Core domain primitives shared by every example."""

from .exceptions import (
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
