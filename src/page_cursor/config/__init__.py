"""Configuration for page-cursor: settings, logging and constants."""

from .constants import LIKELY_BUG, LoggerNames, EnvPrefix
from .settings import PageCursorSettings, get_settings, reload_settings
from .logging_config import (
    LoggingConfig,
    LogLevel,
    LogVerbosity,
    LogFormat,
    setup_logging,
    get_logger,
)

__all__ = [
    "LIKELY_BUG",
    "LoggerNames",
    "EnvPrefix",
    "PageCursorSettings",
    "get_settings",
    "reload_settings",
    "LoggingConfig",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "setup_logging",
    "get_logger",
]
