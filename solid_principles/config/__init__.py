"""Configuration package."""

from .defaults import (
    DEFAULT_CONFIG,
    ConfigurationManager,
    LogDestination,
    LogLevel,
    PaymentProviderType,
)
from .schemas import AppConfig

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigurationManager",
    "LogLevel",
    "LogDestination",
    "PaymentProviderType",
    "AppConfig",
]
