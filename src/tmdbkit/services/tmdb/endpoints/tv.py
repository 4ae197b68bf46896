"""TV show endpoints (``/tv``)."""

from __future__ import annotations

from tmdbkit.shared.constants import TMDBPaths

from ..executor import Options, RequestExecutor
from ..models import (
    AccountStates,
    AlternativeTitlesResponse,
    ChangesResponse,
    ContentRatingsResponse,
    CreditsResponse,
    EpisodeGroupsResponse,
    ExternalIDs,
    ImagesResponse,
    KeywordsResponse,
    PagedResponse,
    ReviewsResponse,
    ScreenedTheatricallyResponse,
    StatusResponse,
    TranslationsResponse,
    TVShowDetails,
    TVShowResult,
    VideosResponse,
    WatchProvidersResponse,
)


class TVMixin(RequestExecutor):
    """Endpoints of a single TV show and the curated TV lists."""

    def get_tv_details(self, tv_id: int, options: Options | None = None) -> TVShowDetails:
        """Get the primary information about a TV show."""
        return self._get(self._url(f"{TMDBPaths.TV}{tv_id}", options), TVShowDetails)

    def get_tv_account_states(self, tv_id: int, options: Options | None = None) -> AccountStates:
        """Requires ``session_id`` or ``guest_session_id`` in ``options``."""
        return self._get(
            self._url(f"{TMDBPaths.TV}{tv_id}/account_states", options),
            AccountStates,
        )

    def get_tv_alternative_titles(
        self,
        tv_id: int,
        options: Options | None = None,
    ) -> AlternativeTitlesResponse:
        return self._get(
            self._url(f"{TMDBPaths.TV}{tv_id}/alternative_titles", options),
            AlternativeTitlesResponse,
        )

    def get_tv_changes(self, tv_id: int, options: Options | None = None) -> ChangesResponse:
        return self._get(self._url(f"{TMDBPaths.TV}{tv_id}/changes", options), ChangesResponse)

    def get_tv_content_ratings(
        self,
        tv_id: int,
        options: Options | None = None,
    ) -> ContentRatingsResponse:
        return self._get(
            self._url(f"{TMDBPaths.TV}{tv_id}/content_ratings", options),
            ContentRatingsResponse,
        )

    def get_tv_credits(self, tv_id: int, options: Options | None = None) -> CreditsResponse:
        return self._get(self._url(f"{TMDBPaths.TV}{tv_id}/credits", options), CreditsResponse)

    def get_tv_episode_groups(
        self,
        tv_id: int,
        options: Options | None = None,
    ) -> EpisodeGroupsResponse:
        return self._get(
            self._url(f"{TMDBPaths.TV}{tv_id}/episode_groups", options),
            EpisodeGroupsResponse,
        )

    def get_tv_external_ids(self, tv_id: int, options: Options | None = None) -> ExternalIDs:
        return self._get(self._url(f"{TMDBPaths.TV}{tv_id}/external_ids", options), ExternalIDs)

    def get_tv_images(self, tv_id: int, options: Options | None = None) -> ImagesResponse:
        return self._get(self._url(f"{TMDBPaths.TV}{tv_id}/images", options), ImagesResponse)

    def get_tv_keywords(self, tv_id: int, options: Options | None = None) -> KeywordsResponse:
        return self._get(self._url(f"{TMDBPaths.TV}{tv_id}/keywords", options), KeywordsResponse)

    def get_tv_recommendations(
        self,
        tv_id: int,
        options: Options | None = None,
    ) -> PagedResponse[TVShowResult]:
        return self._get(
            self._url(f"{TMDBPaths.TV}{tv_id}/recommendations", options),
            PagedResponse[TVShowResult],
        )

    def get_tv_reviews(self, tv_id: int, options: Options | None = None) -> ReviewsResponse:
        return self._get(self._url(f"{TMDBPaths.TV}{tv_id}/reviews", options), ReviewsResponse)

    def get_tv_screened_theatrically(
        self,
        tv_id: int,
        options: Options | None = None,
    ) -> ScreenedTheatricallyResponse:
        """Episodes of the show that were screened theatrically."""
        return self._get(
            self._url(f"{TMDBPaths.TV}{tv_id}/screened_theatrically", options),
            ScreenedTheatricallyResponse,
        )

    def get_tv_similar(
        self,
        tv_id: int,
        options: Options | None = None,
    ) -> PagedResponse[TVShowResult]:
        return self._get(
            self._url(f"{TMDBPaths.TV}{tv_id}/similar", options),
            PagedResponse[TVShowResult],
        )

    def get_tv_translations(
        self,
        tv_id: int,
        options: Options | None = None,
    ) -> TranslationsResponse:
        return self._get(
            self._url(f"{TMDBPaths.TV}{tv_id}/translations", options),
            TranslationsResponse,
        )

    def get_tv_videos(self, tv_id: int, options: Options | None = None) -> VideosResponse:
        return self._get(self._url(f"{TMDBPaths.TV}{tv_id}/videos", options), VideosResponse)

    def get_tv_watch_providers(
        self,
        tv_id: int,
        options: Options | None = None,
    ) -> WatchProvidersResponse:
        return self._get(
            self._url(f"{TMDBPaths.TV}{tv_id}/watch/providers", options),
            WatchProvidersResponse,
        )

    def get_tv_latest(self, options: Options | None = None) -> TVShowDetails:
        return self._get(self._url(f"{TMDBPaths.TV}latest", options), TVShowDetails)

    def get_tv_airing_today(self, options: Options | None = None) -> PagedResponse[TVShowResult]:
        """Shows with an episode airing today (US Eastern time by default)."""
        return self._get(
            self._url(f"{TMDBPaths.TV}airing_today", options),
            PagedResponse[TVShowResult],
        )

    def get_tv_on_the_air(self, options: Options | None = None) -> PagedResponse[TVShowResult]:
        """Shows with an episode airing within the next 7 days."""
        return self._get(
            self._url(f"{TMDBPaths.TV}on_the_air", options),
            PagedResponse[TVShowResult],
        )

    def get_tv_popular(self, options: Options | None = None) -> PagedResponse[TVShowResult]:
        return self._get(self._url(f"{TMDBPaths.TV}popular", options), PagedResponse[TVShowResult])

    def get_tv_top_rated(self, options: Options | None = None) -> PagedResponse[TVShowResult]:
        return self._get(
            self._url(f"{TMDBPaths.TV}top_rated", options),
            PagedResponse[TVShowResult],
        )

    def rate_tv_show(
        self,
        tv_id: int,
        value: float,
        options: Options | None = None,
    ) -> StatusResponse:
        """Rate a TV show; requires a session in ``options``."""
        return self._post(
            self._url(f"{TMDBPaths.TV}{tv_id}/rating", options),
            {"value": value},
            StatusResponse,
        )
