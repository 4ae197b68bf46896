"""tmdbkit Settings.

Configuration is read from the environment through pydantic-settings:

- ``TMDB_*`` variables feed :class:`TMDBSettings`
- ``TMDBKIT_LOG_*`` variables feed :class:`LoggingSettings`
"""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tmdbkit.shared.constants import TMDB, NetworkConfig
from tmdbkit.shared.errors import ApplicationError, ErrorCode, ErrorContext

LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TMDBSettings(BaseSettings):
    """TMDB API configuration.

    Security: api_key is masked in __repr__ to prevent accidental exposure
    in logs.
    """

    model_config = SettingsConfigDict(
        env_prefix="TMDB_",
        env_ignore_empty=True,
        extra="ignore",
    )

    api_key: str = Field(
        default="",
        repr=False,
        description="TMDB API key (required for API access)",
    )
    base_url: str = Field(
        default=TMDB.API_BASE_URL,
        description="Base URL of the TMDB v3 API",
    )
    timeout: float = Field(
        default=NetworkConfig.DEFAULT_TIMEOUT,
        gt=0,
        description="Request timeout in seconds",
    )
    language: str | None = Field(
        default=None,
        description="Default `language` option for calls that do not set one",
    )

    auto_retry: bool = Field(
        default=False,
        description="Retry automatically when the API answers 429",
    )
    max_retries: int = Field(
        default=NetworkConfig.DEFAULT_RETRIES,
        ge=0,
        description="Maximum number of re-issued requests per call",
    )
    retry_delay: float = Field(
        default=NetworkConfig.RETRY_DELAY,
        ge=0,
        description="Delay used when Retry-After is absent or unparseable",
    )
    max_retry_delay: float = Field(
        default=NetworkConfig.MAX_RETRY_DELAY,
        ge=0,
        description="Upper bound for a single retry sleep",
    )

    def __repr__(self) -> str:
        masked_key = "****" if self.api_key else "[empty]"
        return (
            f"TMDBSettings("
            f"api_key={masked_key}, "
            f"base_url={self.base_url}, "
            f"timeout={self.timeout}, "
            f"auto_retry={self.auto_retry}, "
            f"max_retries={self.max_retries})"
        )


class LoggingSettings(BaseSettings):
    """Logging configuration for applications embedding tmdbkit."""

    model_config = SettingsConfigDict(
        env_prefix="TMDBKIT_LOG_",
        env_ignore_empty=True,
        extra="ignore",
    )

    level: str = Field(default="WARNING", description="Log level name")
    file: str | None = Field(default=None, description="Optional JSON log file path")
    rich_console: bool = Field(default=True, description="Use rich console output")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize the level name to upper case."""
        level = v.strip().upper()
        if level not in LOG_LEVEL_NAMES:
            msg = f"Unknown log level {v!r}, expected one of {', '.join(LOG_LEVEL_NAMES)}"
            raise ValueError(msg)
        return level


class Settings(BaseModel):
    """Container for all tmdbkit configuration domains."""

    tmdb: TMDBSettings = Field(default_factory=TMDBSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def load_settings(**tmdb_overrides: object) -> Settings:
    """Build settings from the environment.

    Keyword arguments override individual ``TMDBSettings`` fields, e.g.
    ``load_settings(api_key="...")``. ``None`` values are ignored so CLI
    options that were not given fall back to the environment.

    Raises:
        ApplicationError: If a value (from the environment or an override)
            is invalid
    """
    overrides = {key: value for key, value in tmdb_overrides.items() if value is not None}
    try:
        return Settings(tmdb=TMDBSettings(**overrides), logging=LoggingSettings())
    except ValidationError as e:
        raise _config_error(e, "load_settings") from e


def load_logging_settings() -> LoggingSettings:
    """Read only the ``TMDBKIT_LOG_*`` settings.

    Used where logging must be configured before the TMDB settings are
    needed, e.g. in the CLI callback.

    Raises:
        ApplicationError: If a ``TMDBKIT_LOG_*`` value is invalid
    """
    try:
        return LoggingSettings()
    except ValidationError as e:
        raise _config_error(e, "load_logging_settings") from e


def _config_error(error: ValidationError, operation: str) -> ApplicationError:
    fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in error.errors())
    return ApplicationError(
        ErrorCode.CONFIG_INVALID,
        f"Invalid configuration: {fields}",
        ErrorContext(operation=operation),
        original_error=error,
    )
