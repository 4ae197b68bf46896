"""tmdbkit Shared Module.

This package contains constants, logging helpers and error handling used across tmdbkit.
"""

__all__ = ["constants", "errors", "logging"]
