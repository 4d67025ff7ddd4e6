"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from solid_principles.config.defaults import DEFAULT_LOG_FORMAT


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field("logs/solid_principles.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(5, description="Number of rotated files to keep")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Root log level")
    destination: str = Field(
        "stdout", description="stdout (console stream on stderr), file or both"
    )
    format: str = Field(DEFAULT_LOG_FORMAT, description="Log record format")
    file: LogFileConfig = Field(default_factory=LogFileConfig)

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper()


class GreetingConfig(BaseModel):
    """Greeting configuration."""

    default_locale: str = Field("en", description="Locale used when none is given")


class StoreConfig(BaseModel):
    """Store configuration."""

    default_amount: float = Field(20, ge=0, description="Checkout amount")
    default_payment: str = Field("googlepay", description="Payment provider name")

    @field_validator("default_payment")
    @classmethod
    def normalize_payment(cls, v: str) -> str:
        return v.lower()


class AppConfig(BaseModel):
    """Application configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    greeting: GreetingConfig = Field(default_factory=GreetingConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)

    @classmethod
    def from_config_dict(cls, config: Dict[str, Any]) -> "AppConfig":
        """Build from the upper-case section dictionary used by ConfigurationManager."""
        return cls(
            logging=config.get("LOGGING_CONFIG", {}),
            greeting=config.get("GREETING_CONFIG", {}),
            store=config.get("STORE_CONFIG", {}),
        )
