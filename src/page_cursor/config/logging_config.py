"""Centralized logging configuration for page-cursor.

Provides consistent, configurable logging with environment-based control
over verbosity and log levels (see ``PageCursorSettings``).
"""

import logging
import logging.config
from typing import Any, Dict, Optional
from enum import Enum

from .constants import LoggerNames
from .settings import PageCursorSettings, get_settings


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS: Dict[LogFormat, str] = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    return verbosity_map.get(LogVerbosity(verbosity.upper()), LogLevel.WARNING.value)


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "asyncio",
    ]

    @classmethod
    def build(cls, settings: PageCursorSettings) -> Dict[str, Any]:
        """Build a ``dictConfig`` mapping from settings.

        Verbosity drives the console handler and the root logger, while
        ``log_level`` applies to the ``page_cursor`` package logger only.
        """
        effective_log_level = get_log_level_from_verbosity(settings.log_verbosity)
        format_string = FORMAT_STRINGS[LogFormat(settings.log_format)]

        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": effective_log_level,
                "handlers": ["console"],
            },
            "loggers": {
                LoggerNames.ROOT: {
                    "level": LogLevel(settings.log_level).value,
                },
            },
        }

        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }

        return logging_config

    @classmethod
    def configure(cls, settings: Optional[PageCursorSettings] = None) -> None:
        """Configure logging from settings (environment by default)."""
        settings = settings or get_settings()
        logging.config.dictConfig(cls.build(settings))

        logger = logging.getLogger(__name__)
        logger.debug(
            f"Logging configured: verbosity={settings.log_verbosity}, "
            f"level={settings.log_level}, format={settings.log_format}"
        )

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a configured logger for the given module name.

        Args:
            name: Module name (usually __name__)

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)


def setup_logging(settings: Optional[PageCursorSettings] = None) -> None:
    """Setup logging configuration from environment variables.

    This is the main entry point for configuring logging. It is called
    once when the package is imported.
    """
    LoggingConfig.configure(settings)


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger.

    Args:
        name: Module name (usually __name__)

    Returns:
        Configured logger instance
    """
    return LoggingConfig.get_logger(name)
