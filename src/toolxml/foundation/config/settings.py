"""Environment-based configuration using pydantic-settings.

Example:
    >>> from toolxml.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.schema_limits.max_tools
    5

    # Or with environment variables:
    # TOOLXML_LOG_LEVEL=DEBUG
    # TOOLXML_BATCH_MAX_WORKERS=8
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TOOLXML_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


class BatchSettings(BaseSettings):
    """Batch conversion defaults."""

    model_config = SettingsConfigDict(
        env_prefix="TOOLXML_BATCH_",
        extra="ignore",
    )

    max_workers: PositiveInt = Field(default=1, description="Worker threads for batch conversion (1 = sequential)")


class SchemaSettings(BaseSettings):
    """Limits advertised in the JSON-schema artifact. Never enforced during conversion."""

    model_config = SettingsConfigDict(
        env_prefix="TOOLXML_SCHEMA_",
        extra="ignore",
    )

    max_tools: Annotated[int, Field(ge=1, le=50)] = 5
    max_files: Annotated[int, Field(ge=1, le=50)] = 5


class ToolxmlSettings(BaseSettings):
    """Root settings for toolxml.

    Loads configuration from environment variables with TOOLXML_ prefix.

    Example environment variables:
        TOOLXML_DEBUG=true
        TOOLXML_LOG_FORMAT=json
        TOOLXML_SCHEMA_MAX_TOOLS=3
    """

    model_config = SettingsConfigDict(
        env_prefix="TOOLXML_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    batch: BatchSettings = Field(default_factory=BatchSettings)
    schema_limits: SchemaSettings = Field(default_factory=SchemaSettings)


@lru_cache(maxsize=1)
def get_settings() -> ToolxmlSettings:
    """Get the global settings instance (cached)."""
    return ToolxmlSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
