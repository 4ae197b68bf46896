"""tmdbkit Error Handling Module

This module defines the error handling system for tmdbkit, providing
structured error classes with context information.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Remote errors keep the TMDb error envelope untouched
- Proper Exception Chaining: Original exceptions are preserved
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

from tmdbkit.shared.constants import HTTPStatusCodes

if TYPE_CHECKING:
    from tmdbkit.services.tmdb.models.base import ErrorResponse

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]

# Default keys to mask in safe_dict so credentials never reach the logs
SAFE_DICT_MASK_KEYS: tuple[str, ...] = ("api_key", "session_id", "password")


class ErrorCode(str, Enum):
    """Error codes for tmdbkit.

    This enum serves as the single source of truth for all error codes
    used throughout the library.
    """

    # Local validation
    VALIDATION_ERROR = "VALIDATION_ERROR"
    API_KEY_MISSING = "API_KEY_MISSING"

    # TMDB API errors
    TMDB_API_CONNECTION_ERROR = "TMDB_API_CONNECTION_ERROR"
    TMDB_API_TIMEOUT = "TMDB_API_TIMEOUT"
    TMDB_API_REQUEST_FAILED = "TMDB_API_REQUEST_FAILED"
    TMDB_API_AUTHENTICATION_ERROR = "TMDB_API_AUTHENTICATION_ERROR"
    TMDB_API_MEDIA_NOT_FOUND = "TMDB_API_MEDIA_NOT_FOUND"
    TMDB_API_SERVER_ERROR = "TMDB_API_SERVER_ERROR"
    TMDB_API_RATE_LIMIT_EXCEEDED = "TMDB_API_RATE_LIMIT_EXCEEDED"
    TMDB_API_INVALID_RESPONSE = "TMDB_API_INVALID_RESPONSE"

    # Configuration
    CONFIG_INVALID = "CONFIG_INVALID"

    # CLI
    CLI_UNEXPECTED_ERROR = "CLI_UNEXPECTED_ERROR"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Converts Path, Enum, Decimal to primitive types.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        elif isinstance(val, Decimal):
            coerced[key] = float(val)
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum, Decimal are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContext:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are allowed in
    additional_data to keep serialization safe.

    Attributes:
        operation: Optional operation name that caused the error
        url: Optional request URL (credentials masked)
        additional_data: Optional dict with primitive values only
    """

    operation: str | None = None
    url: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        """Post-initialization validation and coercion."""
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self, *, mask_keys: tuple[str, ...] | None = None) -> dict[str, Any]:
        """Export context as dict with credential masking.

        Args:
            mask_keys: Keys of additional_data to drop. Defaults to SAFE_DICT_MASK_KEYS.

        Returns:
            Dictionary with masked sensitive fields and guaranteed additional_data key.

        Example:
            >>> context = ErrorContext(operation="get", additional_data={"api_key": "x"})
            >>> context.safe_dict()
            {'operation': 'get', 'additional_data': {}}
        """
        if mask_keys is None:
            mask_keys = SAFE_DICT_MASK_KEYS

        data: dict[str, Any] = {}
        if self.operation is not None:
            data["operation"] = self.operation
        if self.url is not None:
            data["url"] = self.url

        data["additional_data"] = {
            key: val
            for key, val in (self.additional_data or {}).items()
            if key not in mask_keys
        }
        return data


class TMDBKitError(Exception):
    """Base exception class for all tmdbkit errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize TMDBKitError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error

        formatted_message = f"{code.value}: {message}"
        super().__init__(formatted_message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging with credential masking."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(TMDBKitError):
    """Local validation errors.

    Raised before any request leaves the process.

    Examples:
    - Empty request URL
    - Malformed CLI options
    """


class ParsingError(DomainError):
    """Payload decoding errors.

    Examples:
    - Malformed JSON on the success path
    - JSON that does not fit the response model
    - Error bodies that are not a TMDb error envelope
    """


class InfrastructureError(TMDBKitError):
    """Errors raised while talking to the remote API."""


class NetworkError(InfrastructureError):
    """Transport-level failures (connection refused, DNS, timeouts)."""


class RateLimitExceededError(InfrastructureError):
    """Raised when the automatic retry budget for HTTP 429 runs out."""

    def __init__(
        self,
        message: str,
        attempts: int,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(ErrorCode.TMDB_API_RATE_LIMIT_EXCEEDED, message, context)
        self.attempts = attempts


class APIError(InfrastructureError):
    """Error envelope returned by the TMDb API.

    TMDb answers every failed call with a small JSON document::

        {"status_code": 34, "status_message": "The resource ...", "success": false}

    ``message`` holds ``status_message`` verbatim so callers can compare it
    against the API documentation. ``http_status`` is the HTTP status of the
    response, ``status_code`` the TMDb internal code.
    """

    def __init__(
        self,
        message: str,
        http_status: int,
        *,
        status_code: int = 0,
        success: bool = False,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(_code_for_status(http_status), message, context)
        self.http_status = http_status
        self.status_code = status_code
        self.success = success

    @property
    def status_message(self) -> str:
        return self.message

    @classmethod
    def from_response(
        cls,
        envelope: ErrorResponse,
        http_status: int,
        context: ErrorContext | None = None,
    ) -> APIError:
        """Build an APIError from a decoded error envelope."""
        return cls(
            envelope.status_message,
            http_status,
            status_code=envelope.status_code,
            success=envelope.success,
            context=context,
        )


class SecurityError(TMDBKitError):
    """Credential errors, e.g. an empty API key."""


class ApplicationError(TMDBKitError):
    """Configuration and CLI level errors."""


class CliError(ApplicationError):
    """CLI-specific error carrying the process exit code."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
        command: str | None = None,
        exit_code: int = 1,
    ):
        super().__init__(code, message, context, original_error)
        self.command = command
        self.exit_code = exit_code


def _code_for_status(http_status: int) -> ErrorCode:
    if http_status in (HTTPStatusCodes.UNAUTHORIZED, HTTPStatusCodes.FORBIDDEN):
        return ErrorCode.TMDB_API_AUTHENTICATION_ERROR
    if http_status == HTTPStatusCodes.NOT_FOUND:
        return ErrorCode.TMDB_API_MEDIA_NOT_FOUND
    if http_status == HTTPStatusCodes.TOO_MANY_REQUESTS:
        return ErrorCode.TMDB_API_RATE_LIMIT_EXCEEDED
    if http_status >= HTTPStatusCodes.INTERNAL_SERVER_ERROR:
        return ErrorCode.TMDB_API_SERVER_ERROR
    return ErrorCode.TMDB_API_REQUEST_FAILED


# Convenience functions for common error scenarios
def create_validation_error(
    message: str,
    field: str | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> DomainError:
    """Create a validation error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"field": field} if field else None
    )
    context = ErrorContext(
        operation=operation,
        additional_data=additional_data,
    )
    return DomainError(
        ErrorCode.VALIDATION_ERROR,
        message,
        context,
        original_error,
    )


def create_parsing_error(
    message: str,
    url: str | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> ParsingError:
    """Create a payload decoding error with context."""
    context = ErrorContext(
        operation=operation,
        url=url,
    )
    return ParsingError(
        ErrorCode.TMDB_API_INVALID_RESPONSE,
        message,
        context,
        original_error,
    )


def create_network_error(
    message: str,
    url: str | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
    *,
    timeout: bool = False,
) -> NetworkError:
    """Create a transport error with context."""
    context = ErrorContext(
        operation=operation,
        url=url,
    )
    code = ErrorCode.TMDB_API_TIMEOUT if timeout else ErrorCode.TMDB_API_CONNECTION_ERROR
    return NetworkError(code, message, context, original_error)


def create_cli_error(
    message: str,
    command: str | None = None,
    original_error: Exception | None = None,
    exit_code: int = 1,
) -> CliError:
    """Create a CLI error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"command": command} if command else None
    )
    context = ErrorContext(
        operation=command,
        additional_data=additional_data,
    )
    return CliError(
        ErrorCode.CLI_UNEXPECTED_ERROR,
        message,
        context,
        original_error,
        command=command,
        exit_code=exit_code,
    )
