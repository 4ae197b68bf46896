"""TMDB API client package."""

from .client import TMDBClient, init
from .executor import RequestExecutor, fmt_options
from .retry import RetryPolicy

__all__ = ["RequestExecutor", "RetryPolicy", "TMDBClient", "fmt_options", "init"]
