# solid_principles/domain/core/exceptions.py
from typing import Any, Optional, List


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""
    def __init__(self, entity_type: str, entity_id: Any):
        super().__init__(f"{entity_type} with ID {entity_id} not found")
        self.entity_type = entity_type
        self.entity_id = entity_id


class NotImplementedOperationError(DomainException):
    """Raised when a capability operation has not been built yet."""
    def __init__(self, operation: str):
        super().__init__(f"Method not implemented: {operation}")
        self.operation = operation


class UnsupportedLocaleError(DomainException):
    """Raised when no language provider exists for a locale."""
    def __init__(self, locale: str, available: Optional[List[str]] = None):
        super().__init__(f"Unsupported locale: {locale}")
        self.locale = locale
        self.available = available or []


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
