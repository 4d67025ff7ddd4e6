# solid_principles/config/defaults.py
from typing import Dict, Any, Optional
from enum import Enum
import copy
import os
import re
import json

from solid_principles.domain.core.exceptions import ConfigurationError


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class PaymentProviderType(str, Enum):
    """Payment provider enumeration."""
    PAYPAL = "paypal"
    GOOGLEPAY = "googlepay"


DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"

DEFAULT_CONFIG = {
    # Logging configuration
    "LOGGING_CONFIG": {
        "level": "${LOG_LEVEL:INFO}",
        "destination": "${LOG_DESTINATION:stdout}",
        "format": DEFAULT_LOG_FORMAT,
        "file": {
            "path": "${SOLID_LOGDIR:logs}/solid_principles.log",
            "max_size_mb": 10,
            "backup_count": 5
        }
    },

    # Greeting configuration
    "GREETING_CONFIG": {
        "default_locale": "${SOLID_DEFAULT_LOCALE:en}"
    },

    # Store configuration
    "STORE_CONFIG": {
        "default_amount": 20,
        "default_payment": "googlepay"
    }
}


_ENV_REFERENCE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}")


def _expand_reference(match: 're.Match') -> str:
    # Unset variables without a default are left untouched
    var_name, default = match.group(1), match.group(2)
    if var_name in os.environ:
        return os.environ[var_name]
    if default is not None:
        return default
    return match.group(0)


class ConfigurationManager:
    """
    Manages application configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Applying user configuration file overrides
    - Applying environment variable overrides
    - Variable interpolation
    - Configuration validation
    """

    ENV_MAPPINGS = {
        "LOG_LEVEL": ("LOGGING_CONFIG", "level"),
        "LOG_DESTINATION": ("LOGGING_CONFIG", "destination"),
        "SOLID_DEFAULT_LOCALE": ("GREETING_CONFIG", "default_locale"),
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager with defaults.

        Args:
            config_file: Optional path to a JSON configuration file. If not
                        provided, SOLID_CONFIG_FILE is used when set.
        """
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        config_file = config_file or os.environ.get("SOLID_CONFIG_FILE")
        if config_file:
            self._load_config_file(config_file)

        # Environment variables have the highest priority
        self._load_env_vars()

        self.validate_config()

    def _load_config_file(self, config_path: str) -> None:
        """Load configuration from file."""
        try:
            with open(config_path, 'r') as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}")
        if not isinstance(user_config, dict):
            raise ConfigurationError(
                f"Failed to load configuration: expected a JSON object in {config_path}, "
                f"got {type(user_config).__name__}"
            )
        self.update_config(user_config)
        self._check_sections()

    def _check_sections(self) -> None:
        """Ensure every built-in section is still a mapping."""
        invalid = [
            section for section in DEFAULT_CONFIG
            if not isinstance(self._config.get(section), dict)
        ]
        if invalid:
            raise ConfigurationError(
                f"Configuration sections must be JSON objects: {', '.join(invalid)}",
                invalid,
            )

    def _load_env_vars(self) -> None:
        """Load and apply environment variable overrides."""
        for env_var, path in self.ENV_MAPPINGS.items():
            if env_var in os.environ:
                self._set_nested_value(self._config, path, os.environ[env_var])

    def _set_nested_value(self, config: Dict[str, Any], path: tuple, value: Any) -> None:
        """Set a nested configuration value."""
        current = config
        for key in path[:-1]:
            current = current.setdefault(key, {})
        current[path[-1]] = value

    def _interpolate_values(self, config: Any) -> Any:
        """Interpolate ${VAR} and ${VAR:default} references in configuration values."""
        if isinstance(config, str):
            return _ENV_REFERENCE.sub(_expand_reference, config)
        elif isinstance(config, dict):
            return {k: self._interpolate_values(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._interpolate_values(v) for v in config]
        return config

    def update_config(self, user_config: Dict[str, Any]) -> None:
        """
        Update configuration with user-provided values.

        Args:
            user_config: Configuration dictionary from user config file
        """
        def deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
            for key, value in source.items():
                if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                    deep_update(target[key], value)
                else:
                    target[key] = value

        deep_update(self._config, user_config)

    def get_config(self) -> Dict[str, Any]:
        """
        Get the complete configuration with all interpolations applied.

        Returns:
            Dict containing the complete configuration
        """
        return self._interpolate_values(self._config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found
        """
        value = self.get_config()
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def get_typed(self) -> 'AppConfig':
        """Get the configuration as a validated AppConfig."""
        from solid_principles.config.schemas.app_schema import AppConfig

        return AppConfig.from_config_dict(self.get_config())

    def validate_config(self) -> None:
        """
        Validate the configuration.

        Validates:
        - Log level and destination are known values
        - Default payment provider is known
        - Default store amount is a non-negative number

        Raises:
            ConfigurationError: If configuration is invalid with detailed error messages
        """
        self._check_sections()
        config = self.get_config()
        errors = []

        log_config = config["LOGGING_CONFIG"]
        log_level = str(log_config["level"]).upper()
        if log_level not in LogLevel.__members__:
            errors.append(f"Invalid log level: {log_level}")

        log_dest = str(log_config["destination"]).lower()
        try:
            LogDestination(log_dest)
        except ValueError:
            errors.append(
                f"Invalid log destination: {log_dest}. "
                f"Must be one of: {', '.join(d.value for d in LogDestination)}"
            )

        store_config = config["STORE_CONFIG"]
        payment = str(store_config["default_payment"]).lower()
        try:
            PaymentProviderType(payment)
        except ValueError:
            errors.append(
                f"Invalid payment provider: {payment}. "
                f"Must be one of: {', '.join(p.value for p in PaymentProviderType)}"
            )

        try:
            if float(store_config["default_amount"]) < 0:
                errors.append("STORE_CONFIG.default_amount must be non-negative")
        except (TypeError, ValueError):
            errors.append("STORE_CONFIG.default_amount must be a number")

        if not config["GREETING_CONFIG"].get("default_locale"):
            errors.append("GREETING_CONFIG.default_locale is required")

        if errors:
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(errors)
            )
