"""TMDB API client.

:class:`TMDBClient` bundles every endpoint family on top of the shared
request executor::

    from tmdbkit import init

    client = init("my-api-key")
    client.set_client_auto_retry()
    season = client.get_tv_season_details(1399, 1, {"language": "pt-BR"})
"""

from __future__ import annotations

import logging

from tmdbkit.config import TMDBSettings

from .endpoints import (
    AuthenticationMixin,
    CertificationsMixin,
    ChangesMixin,
    CollectionsMixin,
    CompaniesMixin,
    ConfigurationMixin,
    CreditsMixin,
    DiscoverMixin,
    FindMixin,
    GenresMixin,
    GuestSessionsMixin,
    KeywordsMixin,
    ListsMixin,
    MoviesMixin,
    NetworksMixin,
    PeopleMixin,
    ReviewsMixin,
    SearchMixin,
    TrendingMixin,
    TVEpisodesMixin,
    TVMixin,
    TVSeasonsMixin,
)
from .retry import RetryPolicy

logger = logging.getLogger(__name__)


class TMDBClient(
    AuthenticationMixin,
    MoviesMixin,
    TVMixin,
    TVSeasonsMixin,
    TVEpisodesMixin,
    PeopleMixin,
    SearchMixin,
    DiscoverMixin,
    FindMixin,
    TrendingMixin,
    CollectionsMixin,
    CompaniesMixin,
    NetworksMixin,
    KeywordsMixin,
    GenresMixin,
    CreditsMixin,
    ReviewsMixin,
    ConfigurationMixin,
    CertificationsMixin,
    ChangesMixin,
    GuestSessionsMixin,
    ListsMixin,
):
    """Client for the TMDB v3 API.

    Configuration is immutable after setup unless changed through
    :meth:`set_client_config` / :meth:`set_client_auto_retry`. A single
    client may be shared between threads for read-only use.
    """

    @classmethod
    def from_settings(cls, settings: TMDBSettings) -> TMDBClient:
        """Create a client from :class:`~tmdbkit.config.TMDBSettings`."""
        client = cls(
            settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            auto_retry=settings.auto_retry,
            retry_policy=RetryPolicy(
                max_retries=settings.max_retries,
                default_delay=settings.retry_delay,
                max_delay=settings.max_retry_delay,
            ),
            language=settings.language,
        )
        logger.debug("TMDB client created from settings: %r", settings)
        return client


def init(api_key: str) -> TMDBClient:
    """Create a :class:`TMDBClient`; fails with ``SecurityError`` on an empty key."""
    return TMDBClient(api_key)
