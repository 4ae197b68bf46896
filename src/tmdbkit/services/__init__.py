"""Services module for tmdbkit.

This module contains the client for the TMDB REST API.
"""

from .tmdb import RetryPolicy, TMDBClient, init

__all__ = ["RetryPolicy", "TMDBClient", "init"]
