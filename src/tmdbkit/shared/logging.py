"""
Structured logging for tmdbkit.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
attached by applications (or the bundled CLI) through
:func:`setup_structured_logger`.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from tmdbkit.shared.errors import ErrorContext, TMDBKitError

_CREDENTIAL_PATTERN = re.compile(r"((?:api_key|session_id|password)=)[^&]*")


class StructuredFormatter(logging.Formatter):
    """Formatter that renders log records as one JSON document per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created,
                tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in ("error_code", "context", "operation", "duration_ms", "result_info"):
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def mask_credentials(url: str) -> str:
    """Replace credential query values in ``url`` with ``****``.

    Example:
        >>> mask_credentials("https://x/3/movie/550?api_key=abc&language=en")
        'https://x/3/movie/550?api_key=****&language=en'
    """
    return _CREDENTIAL_PATTERN.sub(r"\1****", url)


def _create_rich_console() -> Console:
    custom_theme = Theme(
        {
            "logging.level.debug": "cyan",
            "logging.level.info": "green",
            "logging.level.warning": "yellow",
            "logging.level.error": "red bold",
            "logging.level.critical": "red bold reverse",
            "log.time": "dim cyan",
            "log.message": "white",
            "log.path": "dim blue",
        }
    )
    return Console(theme=custom_theme, stderr=True)


def setup_structured_logger(
    name: str = "tmdbkit",
    level: str = "INFO",
    log_file: str | None = None,
    *,
    use_rich_console: bool = True,
) -> logging.Logger:
    """
    Configure the ``tmdbkit`` logger hierarchy.

    Args:
        name: Logger name (default: "tmdbkit")
        level: Log level name (default: "INFO")
        log_file: Optional path of a JSON-lines log file
        use_rich_console: Use a rich console handler instead of JSON on stderr

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        logger.handlers.clear()

    log_level = getattr(logging, level.upper())
    logger.setLevel(log_level)

    if use_rich_console:
        handler: logging.Handler = RichHandler(
            console=_create_rich_console(),
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            log_time_format="[%H:%M:%S]",
        )
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
    handler.setLevel(log_level)
    logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def _merge_context(
    base: dict[str, Any],
    extra: dict[str, Any] | ErrorContext | None,
) -> dict[str, Any]:
    if extra is None:
        return base
    if isinstance(extra, ErrorContext):
        base.update(extra.safe_dict())
    else:
        base.update(extra)
    return base


def log_operation_error(
    logger: logging.Logger,
    error: TMDBKitError,
    operation: str | None = None,
    additional_context: dict[str, Any] | ErrorContext | None = None,
) -> None:
    """
    Log a TMDBKitError with its structured context.

    Args:
        logger: Logger instance
        error: The error to record
        operation: Operation name (defaults to the error context's operation)
        additional_context: Extra context merged into the record
    """
    context_dict = _merge_context(error.context.safe_dict(), additional_context)

    logger.error(
        error.message,
        extra={
            "error_code": error.code.name,
            "context": context_dict,
            "operation": operation or error.context.operation,
        },
        exc_info=error.original_error is not None,
    )


def log_operation_success(
    logger: logging.Logger,
    operation: str,
    duration_ms: float,
    result_info: dict[str, Any] | None = None,
    additional_context: dict[str, Any] | ErrorContext | None = None,
) -> None:
    """Log a completed operation at DEBUG level."""
    context_dict = _merge_context({}, additional_context)

    logger.debug(
        "Operation '%s' completed successfully",
        operation,
        extra={
            "operation": operation,
            "duration_ms": duration_ms,
            "result_info": result_info or {},
            "context": context_dict,
        },
    )


def log_api_call(
    logger: logging.Logger,
    endpoint: str,
    method: str = "GET",
    status_code: int | None = None,
    duration_ms: float | None = None,
    context: dict[str, Any] | None = None,
) -> None:
    """
    Log one HTTP exchange with the TMDB API.

    Successful calls are logged at DEBUG, failed ones at WARNING; the
    caller decides whether the failure is surfaced.

    Args:
        logger: Logger instance
        endpoint: Request URL; credentials are masked before logging
        method: HTTP method (default: "GET")
        status_code: HTTP status code, if a response arrived
        duration_ms: Elapsed time in milliseconds
        context: Extra context merged into the record
    """
    masked = mask_credentials(endpoint)
    api_context: dict[str, Any] = {
        "endpoint": masked,
        "method": method,
    }

    if status_code is not None:
        api_context["status_code"] = status_code
    if duration_ms is not None:
        api_context["duration_ms"] = round(duration_ms, 2)
    if context:
        api_context.update(context)

    level = logging.DEBUG
    message = f"{method} {masked}"

    if status_code is not None:
        if status_code >= 400:
            level = logging.WARNING
            message += f" failed with status {status_code}"
        else:
            message += f" succeeded with status {status_code}"

    logger.log(
        level,
        message,
        extra={
            "operation": "api_call",
            "context": api_context,
        },
    )
