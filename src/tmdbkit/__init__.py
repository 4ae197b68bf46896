"""tmdbkit - a typed client for The Movie Database (TMDB) v3 API."""

from tmdbkit.services.tmdb import RetryPolicy, TMDBClient, fmt_options, init
from tmdbkit.shared.errors import (
    APIError,
    DomainError,
    ErrorCode,
    NetworkError,
    ParsingError,
    RateLimitExceededError,
    SecurityError,
    TMDBKitError,
)

__version__ = "1.0.0"

__all__ = [
    "APIError",
    "DomainError",
    "ErrorCode",
    "NetworkError",
    "ParsingError",
    "RateLimitExceededError",
    "RetryPolicy",
    "SecurityError",
    "TMDBClient",
    "TMDBKitError",
    "__version__",
    "fmt_options",
    "init",
]
