"""
CLI Context Management Module

Global options parsed by the main callback are stored in a ContextVar so
that every command sees the same configuration.
"""

from __future__ import annotations

import contextvars
from enum import Enum

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Log level enumeration for type safety."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CliContext(BaseModel):
    """
    Options shared by all commands.

    Attributes:
        log_level: Logging level
        api_key: API key given on the command line, if any
        auto_retry: Whether 429 answers are retried automatically
        json_errors: Whether errors are reported as JSON on stdout
    """

    log_level: LogLevel = Field(default=LogLevel.WARNING)
    api_key: str | None = Field(default=None, repr=False)
    auto_retry: bool = Field(default=False)
    json_errors: bool = Field(default=False)


_cli_context: contextvars.ContextVar[CliContext | None] = contextvars.ContextVar(
    "tmdbkit_cli_context",
    default=None,
)


def set_cli_context(context: CliContext) -> None:
    _cli_context.set(context)


def get_cli_context() -> CliContext:
    """Return the current CLI context, or defaults if none was set."""
    return _cli_context.get() or CliContext()
