"""Structured logging setup with structlog."""

import logging
import sys
from pathlib import Path

import structlog
from rich.console import Console
from rich.logging import RichHandler

from solarsite.config.settings import LoggingConfig
from solarsite.exceptions import ConfigurationError

_FORMATS = ("console", "json")

# Handlers installed by configure_logging, removed again on reconfiguration
_installed_handlers: list[logging.Handler] = []


def configure_logging(
    level: str = "INFO",
    format_type: str = "console",
    log_file: Path | None = None
) -> None:
    """Configure structured logging for the application.

    Safe to call more than once; the previous SolarSite handlers are replaced.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Output format ("console" for development, "json" for production)
        log_file: Optional file path for log output

    Raises:
        ConfigurationError: If the level or format is unknown
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ConfigurationError("Unknown log level", details={"level": level})
    if format_type not in _FORMATS:
        raise ConfigurationError(
            "Unknown log format", details={"format": format_type}
        )

    root = logging.getLogger()
    for handler in _installed_handlers:
        root.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()
    root.setLevel(log_level)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if format_type == "console":
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True)
        ]

        # structlog adds the timestamp
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
        )
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer()
        ]

        handler = logging.StreamHandler(sys.stdout)

    handler.setLevel(log_level)
    root.addHandler(handler)
    _installed_handlers.append(handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        root.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_from_settings(settings: LoggingConfig, verbose: bool = False) -> None:
    """Configure logging from the logging section of the app config.

    Args:
        settings: Logging settings
        verbose: Force DEBUG level regardless of settings
    """
    configure_logging(
        level="DEBUG" if verbose else settings.level,
        format_type=settings.format,
        log_file=settings.file,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
