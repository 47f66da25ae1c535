"""Runtime settings for page-cursor, loaded from the environment."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import EnvPrefix


class PageCursorSettings(BaseSettings):
    """Settings that control logging around pagination."""

    model_config = SettingsConfigDict(
        env_prefix=EnvPrefix.SETTINGS,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="INFO")
    log_verbosity: str = Field(default="NORMAL")
    log_format: str = Field(default="simple")

    # Log every page hop at INFO instead of DEBUG
    trace_navigation: bool = Field(default=False)

    @field_validator("log_level", "log_verbosity")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.upper()

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return value

    @field_validator("log_verbosity")
    @classmethod
    def _known_verbosity(cls, value: str) -> str:
        if value not in {"QUIET", "NORMAL", "VERBOSE", "DEBUG"}:
            raise ValueError(f"Unknown log verbosity: {value}")
        return value

    @field_validator("log_format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        value = value.lower()
        if value not in {"simple", "detailed", "json"}:
            raise ValueError(f"Unknown log format: {value}")
        return value


@lru_cache()
def get_settings() -> PageCursorSettings:
    """Get cached settings instance."""
    return PageCursorSettings()


def reload_settings() -> PageCursorSettings:
    """Drop the cached settings and read the environment again."""
    get_settings.cache_clear()
    return get_settings()
