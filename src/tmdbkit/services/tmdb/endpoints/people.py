"""Person endpoints (``/person``)."""

from __future__ import annotations

from tmdbkit.shared.constants import TMDBPaths

from ..executor import Options, RequestExecutor
from ..models import (
    ChangesResponse,
    ExternalIDs,
    ImagesResponse,
    PagedResponse,
    PersonCombinedCredits,
    PersonDetails,
    PersonMovieCredits,
    PersonResult,
    PersonTVCredits,
    TaggedImagesResponse,
    TranslationsResponse,
)


class PeopleMixin(RequestExecutor):
    def get_person_details(self, person_id: int, options: Options | None = None) -> PersonDetails:
        return self._get(self._url(f"{TMDBPaths.PERSON}{person_id}", options), PersonDetails)

    def get_person_changes(
        self,
        person_id: int,
        options: Options | None = None,
    ) -> ChangesResponse:
        return self._get(
            self._url(f"{TMDBPaths.PERSON}{person_id}/changes", options),
            ChangesResponse,
        )

    def get_person_movie_credits(
        self,
        person_id: int,
        options: Options | None = None,
    ) -> PersonMovieCredits:
        return self._get(
            self._url(f"{TMDBPaths.PERSON}{person_id}/movie_credits", options),
            PersonMovieCredits,
        )

    def get_person_tv_credits(
        self,
        person_id: int,
        options: Options | None = None,
    ) -> PersonTVCredits:
        return self._get(
            self._url(f"{TMDBPaths.PERSON}{person_id}/tv_credits", options),
            PersonTVCredits,
        )

    def get_person_combined_credits(
        self,
        person_id: int,
        options: Options | None = None,
    ) -> PersonCombinedCredits:
        """Movie and TV credits in a single response."""
        return self._get(
            self._url(f"{TMDBPaths.PERSON}{person_id}/combined_credits", options),
            PersonCombinedCredits,
        )

    def get_person_external_ids(
        self,
        person_id: int,
        options: Options | None = None,
    ) -> ExternalIDs:
        return self._get(
            self._url(f"{TMDBPaths.PERSON}{person_id}/external_ids", options),
            ExternalIDs,
        )

    def get_person_images(self, person_id: int, options: Options | None = None) -> ImagesResponse:
        return self._get(
            self._url(f"{TMDBPaths.PERSON}{person_id}/images", options),
            ImagesResponse,
        )

    def get_person_tagged_images(
        self,
        person_id: int,
        options: Options | None = None,
    ) -> TaggedImagesResponse:
        return self._get(
            self._url(f"{TMDBPaths.PERSON}{person_id}/tagged_images", options),
            TaggedImagesResponse,
        )

    def get_person_translations(
        self,
        person_id: int,
        options: Options | None = None,
    ) -> TranslationsResponse:
        return self._get(
            self._url(f"{TMDBPaths.PERSON}{person_id}/translations", options),
            TranslationsResponse,
        )

    def get_person_latest(self, options: Options | None = None) -> PersonDetails:
        return self._get(self._url(f"{TMDBPaths.PERSON}latest", options), PersonDetails)

    def get_person_popular(self, options: Options | None = None) -> PagedResponse[PersonResult]:
        return self._get(
            self._url(f"{TMDBPaths.PERSON}popular", options),
            PagedResponse[PersonResult],
        )
