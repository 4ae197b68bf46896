"""TV season, episode and episode group endpoints."""

from __future__ import annotations

from tmdbkit.shared.constants import TMDBPaths

from ..executor import Options, RequestExecutor
from ..models import (
    AccountStates,
    ChangesResponse,
    CreditsResponse,
    EpisodeGroupDetails,
    ExternalIDs,
    ImagesResponse,
    SeasonAccountStates,
    StatusResponse,
    TranslationsResponse,
    TVEpisodeDetails,
    TVSeasonDetails,
    VideosResponse,
)


class TVSeasonsMixin(RequestExecutor):
    """Endpoints under ``/tv/{tv_id}/season/{season_number}``."""

    def _season_path(self, tv_id: int, season_number: int) -> str:
        return f"{TMDBPaths.TV}{tv_id}{TMDBPaths.TV_SEASON}{season_number}"

    def get_tv_season_details(
        self,
        tv_id: int,
        season_number: int,
        options: Options | None = None,
    ) -> TVSeasonDetails:
        """Get the TV season details by id.

        Example:
            >>> client.get_tv_season_details(1399, 1, {"language": "pt-BR"}).name
            '1ª Temporada'
        """
        return self._get(
            self._url(self._season_path(tv_id, season_number), options),
            TVSeasonDetails,
        )

    def get_tv_season_changes(
        self,
        season_id: int,
        options: Options | None = None,
    ) -> ChangesResponse:
        """Changes of a season, addressed by the season's own id."""
        return self._get(
            self._url(f"{TMDBPaths.TV}season/{season_id}/changes", options),
            ChangesResponse,
        )

    def get_tv_season_account_states(
        self,
        tv_id: int,
        season_number: int,
        options: Options | None = None,
    ) -> SeasonAccountStates:
        return self._get(
            self._url(f"{self._season_path(tv_id, season_number)}/account_states", options),
            SeasonAccountStates,
        )

    def get_tv_season_credits(
        self,
        tv_id: int,
        season_number: int,
        options: Options | None = None,
    ) -> CreditsResponse:
        return self._get(
            self._url(f"{self._season_path(tv_id, season_number)}/credits", options),
            CreditsResponse,
        )

    def get_tv_season_external_ids(
        self,
        tv_id: int,
        season_number: int,
        options: Options | None = None,
    ) -> ExternalIDs:
        return self._get(
            self._url(f"{self._season_path(tv_id, season_number)}/external_ids", options),
            ExternalIDs,
        )

    def get_tv_season_images(
        self,
        tv_id: int,
        season_number: int,
        options: Options | None = None,
    ) -> ImagesResponse:
        return self._get(
            self._url(f"{self._season_path(tv_id, season_number)}/images", options),
            ImagesResponse,
        )

    def get_tv_season_videos(
        self,
        tv_id: int,
        season_number: int,
        options: Options | None = None,
    ) -> VideosResponse:
        return self._get(
            self._url(f"{self._season_path(tv_id, season_number)}/videos", options),
            VideosResponse,
        )


class TVEpisodesMixin(RequestExecutor):
    """Endpoints under ``/tv/{tv_id}/season/{season}/episode/{episode}``."""

    def _episode_path(self, tv_id: int, season_number: int, episode_number: int) -> str:
        return (
            f"{TMDBPaths.TV}{tv_id}{TMDBPaths.TV_SEASON}{season_number}"
            f"{TMDBPaths.TV_EPISODE}{episode_number}"
        )

    def get_tv_episode_details(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        options: Options | None = None,
    ) -> TVEpisodeDetails:
        return self._get(
            self._url(self._episode_path(tv_id, season_number, episode_number), options),
            TVEpisodeDetails,
        )

    def get_tv_episode_changes(
        self,
        episode_id: int,
        options: Options | None = None,
    ) -> ChangesResponse:
        """Changes of an episode, addressed by the episode's own id."""
        return self._get(
            self._url(f"{TMDBPaths.TV}episode/{episode_id}/changes", options),
            ChangesResponse,
        )

    def get_tv_episode_account_states(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        options: Options | None = None,
    ) -> AccountStates:
        path = self._episode_path(tv_id, season_number, episode_number)
        return self._get(self._url(f"{path}/account_states", options), AccountStates)

    def get_tv_episode_credits(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        options: Options | None = None,
    ) -> CreditsResponse:
        path = self._episode_path(tv_id, season_number, episode_number)
        return self._get(self._url(f"{path}/credits", options), CreditsResponse)

    def get_tv_episode_external_ids(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        options: Options | None = None,
    ) -> ExternalIDs:
        path = self._episode_path(tv_id, season_number, episode_number)
        return self._get(self._url(f"{path}/external_ids", options), ExternalIDs)

    def get_tv_episode_images(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        options: Options | None = None,
    ) -> ImagesResponse:
        path = self._episode_path(tv_id, season_number, episode_number)
        return self._get(self._url(f"{path}/images", options), ImagesResponse)

    def get_tv_episode_translations(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        options: Options | None = None,
    ) -> TranslationsResponse:
        path = self._episode_path(tv_id, season_number, episode_number)
        return self._get(self._url(f"{path}/translations", options), TranslationsResponse)

    def get_tv_episode_videos(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        options: Options | None = None,
    ) -> VideosResponse:
        path = self._episode_path(tv_id, season_number, episode_number)
        return self._get(self._url(f"{path}/videos", options), VideosResponse)

    def rate_tv_episode(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        value: float,
        options: Options | None = None,
    ) -> StatusResponse:
        path = self._episode_path(tv_id, season_number, episode_number)
        return self._post(self._url(f"{path}/rating", options), {"value": value}, StatusResponse)

    def get_tv_episode_group_details(
        self,
        group_id: str,
        options: Options | None = None,
    ) -> EpisodeGroupDetails:
        """Details of an episode group (alternative episode orderings)."""
        return self._get(
            self._url(f"{TMDBPaths.TV_EPISODE_GROUP}{group_id}", options),
            EpisodeGroupDetails,
        )
