import os
import logging
import structlog
from logging.handlers import RotatingFileHandler
from typing import Dict, Any, Optional


class DetailedFormatter(structlog.stdlib.ProcessorFormatter):
    """Formatter that adds caller information to every record."""

    def format(self, record: logging.LogRecord) -> str:
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def setup_logging(config: Optional[Dict[str, Any]] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Configuration dictionary from ConfigurationManager.
               If None, uses environment variables and defaults.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from solid_principles.config.defaults import ConfigurationManager

        config = ConfigurationManager().get_config()

    logging_config = config["LOGGING_CONFIG"]
    destination = logging_config["destination"].lower()

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, logging_config["level"].upper()))

    formatter = DetailedFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=False),
        foreign_pre_chain=_SHARED_PROCESSORS,
        fmt=logging_config["format"],
    )

    handlers = []

    log_file = None
    if destination in ("file", "both"):
        log_file = os.path.expandvars(logging_config["file"]["path"])
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=logging_config["file"]["max_size_mb"] * 1024 * 1024,
            backupCount=logging_config["file"]["backup_count"]
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # "stdout" means the console stream, which is stderr so command output stays on stdout
    if destination in ("stdout", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # Loggers are bound at import time, so caching would pin the first configuration
        cache_logger_on_first_use=False,
    )

    logger = get_logger("solid_principles")
    logger.debug(
        "Logging configured",
        log_level=logging_config["level"],
        log_destination=destination,
        log_file=log_file
    )

    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for the given module name."""
    return structlog.get_logger(name)
