"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.queue.value_objects import AudioFilter
from ..domain.shared.constants import LogLevels
from ..domain.shared.exceptions import ValidationError as DomainValidationError
from ..domain.shared.messages import ErrorMessages
from ..domain.shared.validators import validate_filter_names


class QueueSettings(BaseModel):
    """Guild queue configuration."""

    model_config = SettingsConfigDict(frozen=True, strict=True, populate_by_name=True)

    filter_names: tuple[str, ...] = Field(
        default_factory=AudioFilter.names,
        validation_alias=AliasChoices("filter_names", "filters"),
    )

    @field_validator("filter_names", mode="before")
    @classmethod
    def validate_filter_names(cls, v: str | list[str] | tuple[str, ...]) -> tuple[str, ...]:
        """Accept a comma-separated string or a list, and reject blank or duplicate names."""
        if isinstance(v, str):
            v = [name.strip() for name in v.split(",") if name.strip()]
        try:
            return validate_filter_names(v)
        except DomainValidationError as e:
            raise ValueError(e.message) from e


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - QUEUE__FILTER_NAMES (JSON array of filter names)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        strict=True,
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    queue: QueueSettings = Field(default_factory=QueueSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        v_upper = v.upper()
        if v_upper not in LogLevels.ALL:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=sorted(LogLevels.ALL))
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
