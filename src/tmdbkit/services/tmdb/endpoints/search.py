"""Search, discover, find and trending endpoints."""

from __future__ import annotations

from tmdbkit.shared.constants import TMDBPaths

from ..executor import Options, RequestExecutor
from ..models import (
    CollectionResult,
    CompanyResult,
    FindResponse,
    Keyword,
    MovieResult,
    MultiResult,
    PagedResponse,
    PersonResult,
    TVShowResult,
)


def _with_query(query: str, options: Options | None) -> dict[str, str]:
    return {"query": query, **(options or {})}


class SearchMixin(RequestExecutor):
    """Text search across the TMDB catalogue.

    ``query`` is mandatory; ``page``, ``language``, ``include_adult``,
    ``region``, ``year`` etc. go through ``options``.
    """

    def search_companies(
        self,
        query: str,
        options: Options | None = None,
    ) -> PagedResponse[CompanyResult]:
        return self._get(
            self._url(f"{TMDBPaths.SEARCH}company", _with_query(query, options)),
            PagedResponse[CompanyResult],
        )

    def search_collections(
        self,
        query: str,
        options: Options | None = None,
    ) -> PagedResponse[CollectionResult]:
        return self._get(
            self._url(f"{TMDBPaths.SEARCH}collection", _with_query(query, options)),
            PagedResponse[CollectionResult],
        )

    def search_keywords(self, query: str, options: Options | None = None) -> PagedResponse[Keyword]:
        return self._get(
            self._url(f"{TMDBPaths.SEARCH}keyword", _with_query(query, options)),
            PagedResponse[Keyword],
        )

    def search_movies(self, query: str, options: Options | None = None) -> PagedResponse[MovieResult]:
        return self._get(
            self._url(f"{TMDBPaths.SEARCH}movie", _with_query(query, options)),
            PagedResponse[MovieResult],
        )

    def search_multi(self, query: str, options: Options | None = None) -> PagedResponse[MultiResult]:
        """Search movies, TV shows and people in a single request."""
        return self._get(
            self._url(f"{TMDBPaths.SEARCH}multi", _with_query(query, options)),
            PagedResponse[MultiResult],
        )

    def search_people(
        self,
        query: str,
        options: Options | None = None,
    ) -> PagedResponse[PersonResult]:
        return self._get(
            self._url(f"{TMDBPaths.SEARCH}person", _with_query(query, options)),
            PagedResponse[PersonResult],
        )

    def search_tv_shows(
        self,
        query: str,
        options: Options | None = None,
    ) -> PagedResponse[TVShowResult]:
        return self._get(
            self._url(f"{TMDBPaths.SEARCH}tv", _with_query(query, options)),
            PagedResponse[TVShowResult],
        )


class DiscoverMixin(RequestExecutor):
    """Filtered discovery (``sort_by``, ``with_genres``, ``year``...)."""

    def discover_movie(self, options: Options | None = None) -> PagedResponse[MovieResult]:
        return self._get(
            self._url(f"{TMDBPaths.DISCOVER}movie", options),
            PagedResponse[MovieResult],
        )

    def discover_tv(self, options: Options | None = None) -> PagedResponse[TVShowResult]:
        return self._get(
            self._url(f"{TMDBPaths.DISCOVER}tv", options),
            PagedResponse[TVShowResult],
        )


class FindMixin(RequestExecutor):
    def find_by_id(
        self,
        external_id: str,
        external_source: str,
        options: Options | None = None,
    ) -> FindResponse:
        """Find TMDB objects by an external id.

        Args:
            external_id: Id in the external database, e.g. ``tt0137523``
            external_source: ``imdb_id``, ``tvdb_id``, ``wikidata_id``, ...
            options: Extra query options such as ``language``
        """
        return self._get(
            self._url(
                f"{TMDBPaths.FIND}{external_id}",
                {"external_source": external_source, **(options or {})},
            ),
            FindResponse,
        )


class TrendingMixin(RequestExecutor):
    def get_trending(
        self,
        media_type: str = "all",
        time_window: str = "day",
        options: Options | None = None,
    ) -> PagedResponse[MultiResult]:
        """Trending items.

        Args:
            media_type: ``all``, ``movie``, ``tv`` or ``person``
            time_window: ``day`` or ``week``
        """
        return self._get(
            self._url(f"{TMDBPaths.TRENDING}{media_type}/{time_window}", options),
            PagedResponse[MultiResult],
        )
