"""Configuration management using pydantic-settings."""

from .settings import (
    BatchSettings,
    LoggingSettings,
    SchemaSettings,
    ToolxmlSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "BatchSettings",
    "LoggingSettings",
    "SchemaSettings",
    "ToolxmlSettings",
    "clear_settings_cache",
    "get_settings",
]
