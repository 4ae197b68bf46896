"""Movie endpoints (``/movie``)."""

from __future__ import annotations

from tmdbkit.shared.constants import TMDBPaths

from ..executor import Options, RequestExecutor
from ..models import (
    AccountStates,
    AlternativeTitlesResponse,
    ChangesResponse,
    CreditsResponse,
    DatedPagedResponse,
    ExternalIDs,
    ImagesResponse,
    KeywordsResponse,
    MovieDetails,
    MovieListsResponse,
    MovieReleaseDates,
    MovieResult,
    PagedResponse,
    ReviewsResponse,
    StatusResponse,
    TranslationsResponse,
    VideosResponse,
    WatchProvidersResponse,
)


class MoviesMixin(RequestExecutor):
    """Endpoints of a single movie and the curated movie lists."""

    def get_movie_details(self, movie_id: int, options: Options | None = None) -> MovieDetails:
        """Get the primary information about a movie.

        ``append_to_response`` may request sub-resources in the same call::

            client.get_movie_details(550, {"append_to_response": "credits,videos"})
        """
        return self._get(self._url(f"{TMDBPaths.MOVIE}{movie_id}", options), MovieDetails)

    def get_movie_account_states(
        self,
        movie_id: int,
        options: Options | None = None,
    ) -> AccountStates:
        """Rating, watchlist and favourite status of a movie.

        Requires ``session_id`` or ``guest_session_id`` in ``options``.
        """
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}{movie_id}/account_states", options),
            AccountStates,
        )

    def get_movie_alternative_titles(
        self,
        movie_id: int,
        options: Options | None = None,
    ) -> AlternativeTitlesResponse:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}{movie_id}/alternative_titles", options),
            AlternativeTitlesResponse,
        )

    def get_movie_changes(self, movie_id: int, options: Options | None = None) -> ChangesResponse:
        """Changes of a movie; ``start_date``/``end_date`` span at most 14 days."""
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}{movie_id}/changes", options),
            ChangesResponse,
        )

    def get_movie_credits(self, movie_id: int, options: Options | None = None) -> CreditsResponse:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}{movie_id}/credits", options),
            CreditsResponse,
        )

    def get_movie_external_ids(
        self,
        movie_id: int,
        options: Options | None = None,
    ) -> ExternalIDs:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}{movie_id}/external_ids", options),
            ExternalIDs,
        )

    def get_movie_images(self, movie_id: int, options: Options | None = None) -> ImagesResponse:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}{movie_id}/images", options),
            ImagesResponse,
        )

    def get_movie_keywords(self, movie_id: int, options: Options | None = None) -> KeywordsResponse:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}{movie_id}/keywords", options),
            KeywordsResponse,
        )

    def get_movie_release_dates(
        self,
        movie_id: int,
        options: Options | None = None,
    ) -> MovieReleaseDates:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}{movie_id}/release_dates", options),
            MovieReleaseDates,
        )

    def get_movie_videos(self, movie_id: int, options: Options | None = None) -> VideosResponse:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}{movie_id}/videos", options),
            VideosResponse,
        )

    def get_movie_translations(
        self,
        movie_id: int,
        options: Options | None = None,
    ) -> TranslationsResponse:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}{movie_id}/translations", options),
            TranslationsResponse,
        )

    def get_movie_recommendations(
        self,
        movie_id: int,
        options: Options | None = None,
    ) -> PagedResponse[MovieResult]:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}{movie_id}/recommendations", options),
            PagedResponse[MovieResult],
        )

    def get_movie_similar(
        self,
        movie_id: int,
        options: Options | None = None,
    ) -> PagedResponse[MovieResult]:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}{movie_id}/similar", options),
            PagedResponse[MovieResult],
        )

    def get_movie_reviews(self, movie_id: int, options: Options | None = None) -> ReviewsResponse:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}{movie_id}/reviews", options),
            ReviewsResponse,
        )

    def get_movie_lists(self, movie_id: int, options: Options | None = None) -> MovieListsResponse:
        """User lists that contain this movie."""
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}{movie_id}/lists", options),
            MovieListsResponse,
        )

    def get_movie_watch_providers(
        self,
        movie_id: int,
        options: Options | None = None,
    ) -> WatchProvidersResponse:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}{movie_id}/watch/providers", options),
            WatchProvidersResponse,
        )

    def get_movie_latest(self, options: Options | None = None) -> MovieDetails:
        """The most newly created movie; a live response that changes constantly."""
        return self._get(self._url(f"{TMDBPaths.MOVIE}latest", options), MovieDetails)

    def get_movie_now_playing(
        self,
        options: Options | None = None,
    ) -> DatedPagedResponse[MovieResult]:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}now_playing", options),
            DatedPagedResponse[MovieResult],
        )

    def get_movie_popular(self, options: Options | None = None) -> PagedResponse[MovieResult]:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}popular", options),
            PagedResponse[MovieResult],
        )

    def get_movie_top_rated(self, options: Options | None = None) -> PagedResponse[MovieResult]:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}top_rated", options),
            PagedResponse[MovieResult],
        )

    def get_movie_upcoming(
        self,
        options: Options | None = None,
    ) -> DatedPagedResponse[MovieResult]:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}upcoming", options),
            DatedPagedResponse[MovieResult],
        )

    def rate_movie(
        self,
        movie_id: int,
        value: float,
        options: Options | None = None,
    ) -> StatusResponse:
        """Rate a movie (0.5 to 10.0 in 0.5 steps).

        Requires ``session_id`` or ``guest_session_id`` in ``options``.
        """
        return self._post(
            self._url(f"{TMDBPaths.MOVIE}{movie_id}/rating", options),
            {"value": value},
            StatusResponse,
        )
