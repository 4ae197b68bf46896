"""
Network Configuration Constants

This module contains all constants related to the HTTP transport and
the automatic retry policy for rate-limited requests.
"""

BASE_SECOND = 1


class NetworkConfig:
    """Network configuration constants."""

    # Timeout applied when the caller configured none
    DEFAULT_TIMEOUT = 10 * BASE_SECOND

    # Retry settings for HTTP 429
    DEFAULT_RETRIES = 5
    RETRY_DELAY = 5.0 * BASE_SECOND
    MAX_RETRY_DELAY = 60.0 * BASE_SECOND
    BACKOFF_MULTIPLIER = 2.0

    USER_AGENT = "tmdbkit/1.0.0"
