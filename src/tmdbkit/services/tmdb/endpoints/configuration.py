"""Configuration, certification and change list endpoints."""

from __future__ import annotations

from tmdbkit.shared.constants import TMDBPaths

from ..executor import Options, RequestExecutor
from ..models import (
    APIConfiguration,
    CertificationsResponse,
    ChangedItem,
    Country,
    Department,
    Language,
    PagedResponse,
    Timezone,
)


class ConfigurationMixin(RequestExecutor):
    """System wide lookups; most of them answer with a bare JSON array."""

    def get_configuration_api(self, options: Options | None = None) -> APIConfiguration:
        """Image base URLs and sizes needed to build full image paths."""
        return self._get(
            self._url(TMDBPaths.CONFIGURATION.rstrip("/"), options),
            APIConfiguration,
        )

    def get_configuration_countries(self, options: Options | None = None) -> list[Country]:
        return self._get(self._url(f"{TMDBPaths.CONFIGURATION}countries", options), list[Country])

    def get_configuration_jobs(self, options: Options | None = None) -> list[Department]:
        return self._get(self._url(f"{TMDBPaths.CONFIGURATION}jobs", options), list[Department])

    def get_configuration_languages(self, options: Options | None = None) -> list[Language]:
        return self._get(self._url(f"{TMDBPaths.CONFIGURATION}languages", options), list[Language])

    def get_configuration_primary_translations(self, options: Options | None = None) -> list[str]:
        return self._get(
            self._url(f"{TMDBPaths.CONFIGURATION}primary_translations", options),
            list[str],
        )

    def get_configuration_timezones(self, options: Options | None = None) -> list[Timezone]:
        return self._get(self._url(f"{TMDBPaths.CONFIGURATION}timezones", options), list[Timezone])


class CertificationsMixin(RequestExecutor):
    def get_certification_movie(self, options: Options | None = None) -> CertificationsResponse:
        return self._get(
            self._url(f"{TMDBPaths.CERTIFICATION}movie/list", options),
            CertificationsResponse,
        )

    def get_certification_tv(self, options: Options | None = None) -> CertificationsResponse:
        return self._get(
            self._url(f"{TMDBPaths.CERTIFICATION}tv/list", options),
            CertificationsResponse,
        )


class ChangesMixin(RequestExecutor):
    """Ids of every object changed in a window (``start_date``/``end_date``, max 14 days)."""

    def get_changes_movie(self, options: Options | None = None) -> PagedResponse[ChangedItem]:
        return self._get(
            self._url(f"{TMDBPaths.MOVIE}changes", options),
            PagedResponse[ChangedItem],
        )

    def get_changes_tv(self, options: Options | None = None) -> PagedResponse[ChangedItem]:
        return self._get(self._url(f"{TMDBPaths.TV}changes", options), PagedResponse[ChangedItem])

    def get_changes_person(self, options: Options | None = None) -> PagedResponse[ChangedItem]:
        return self._get(
            self._url(f"{TMDBPaths.PERSON}changes", options),
            PagedResponse[ChangedItem],
        )
