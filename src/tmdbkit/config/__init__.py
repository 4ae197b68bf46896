"""Configuration package for tmdbkit."""

from tmdbkit.config.settings import (
    LoggingSettings,
    Settings,
    TMDBSettings,
    load_logging_settings,
    load_settings,
)

__all__ = [
    "LoggingSettings",
    "Settings",
    "TMDBSettings",
    "load_logging_settings",
    "load_settings",
]
