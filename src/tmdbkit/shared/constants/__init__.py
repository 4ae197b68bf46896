"""
tmdbkit Constants Module

This module provides centralized constants for tmdbkit.
All magic values are defined here to ensure consistency across the codebase.
"""

from .http_codes import ContentTypes, HTTPHeaders, HTTPStatusCodes
from .network import NetworkConfig
from .tmdb import TMDB, TMDBErrorMessages, TMDBOperationNames, TMDBPaths

__all__ = [
    "TMDB",
    "ContentTypes",
    "HTTPHeaders",
    "HTTPStatusCodes",
    "NetworkConfig",
    "TMDBErrorMessages",
    "TMDBOperationNames",
    "TMDBPaths",
]
