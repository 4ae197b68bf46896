"""Collection, company, network, keyword, credit, find and search payloads."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import TMDBModel
from .common import ImagesResponse, TranslationsResponse
from .movies import MovieResult
from .people import PersonResult
from .tv import EpisodeSummary, SeasonSummary, TVShowResult


class CollectionResult(TMDBModel):
    id: int = 0
    name: str = ""
    original_name: str = ""
    original_language: str = ""
    overview: str = ""
    poster_path: str | None = None
    backdrop_path: str | None = None
    adult: bool = False


class CollectionDetails(CollectionResult):
    parts: list[MovieResult] = Field(default_factory=list)

    images: ImagesResponse | None = None
    translations: TranslationsResponse | None = None


class CompanyResult(TMDBModel):
    id: int = 0
    name: str = ""
    logo_path: str | None = None
    origin_country: str = ""


class ParentCompany(CompanyResult):
    pass


class CompanyDetails(CompanyResult):
    description: str = ""
    headquarters: str = ""
    homepage: str = ""
    parent_company: ParentCompany | None = None


class NetworkDetails(TMDBModel):
    id: int = 0
    name: str = ""
    headquarters: str = ""
    homepage: str = ""
    logo_path: str | None = None
    origin_country: str = ""


class KeywordDetails(TMDBModel):
    id: int = 0
    name: str = ""


class MultiResult(TMDBModel):
    """Result of multi search and trending lists.

    ``media_type`` is ``movie``, ``tv`` or ``person``; the fields of the
    other kinds keep their defaults.
    """

    id: int = 0
    media_type: str = ""
    title: str | None = None
    original_title: str | None = None
    name: str | None = None
    original_name: str | None = None
    overview: str | None = None
    release_date: str | None = None
    first_air_date: str | None = None
    original_language: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    profile_path: str | None = None
    genre_ids: list[int] = Field(default_factory=list)
    known_for: list[dict[str, Any]] = Field(default_factory=list)
    known_for_department: str | None = None
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0
    adult: bool = False

    @property
    def display_title(self) -> str:
        return self.title or self.name or ""


class CreditMedia(TMDBModel):
    id: int = 0
    name: str | None = None
    title: str | None = None
    original_name: str | None = None
    original_title: str | None = None
    character: str = ""
    episodes: list[EpisodeSummary] = Field(default_factory=list)
    seasons: list[SeasonSummary] = Field(default_factory=list)


class CreditPerson(TMDBModel):
    id: int = 0
    name: str = ""
    gender: int | None = None
    known_for_department: str = ""
    profile_path: str | None = None


class CreditDetails(TMDBModel):
    id: str = ""
    credit_type: str = ""
    department: str = ""
    job: str = ""
    media_type: str = ""
    media: CreditMedia = Field(default_factory=CreditMedia)
    person: CreditPerson = Field(default_factory=CreditPerson)


class FindResponse(TMDBModel):
    """Objects matching an external ID (IMDb, TVDB, ...)."""

    movie_results: list[MovieResult] = Field(default_factory=list)
    person_results: list[PersonResult] = Field(default_factory=list)
    tv_results: list[TVShowResult] = Field(default_factory=list)
    tv_episode_results: list[EpisodeSummary] = Field(default_factory=list)
    tv_season_results: list[SeasonSummary] = Field(default_factory=list)


class ChangedItem(TMDBModel):
    """Entry of the global change lists (``/movie/changes`` etc.)."""

    id: int = 0
    adult: bool | None = None
