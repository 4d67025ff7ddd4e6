"""Configuration schemas."""

from .app_schema import AppConfig, GreetingConfig, LogFileConfig, LoggingConfig, StoreConfig

__all__ = ["AppConfig", "LoggingConfig", "LogFileConfig", "GreetingConfig", "StoreConfig"]
