"""Person payload models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import PagedResponse, TMDBModel
from .common import ExternalIDs, Image, ImagesResponse, TranslationsResponse
from .movies import MovieResult
from .tv import TVShowResult


class PersonResult(TMDBModel):
    """Person as it appears in searches and popularity lists."""

    id: int = 0
    name: str = ""
    original_name: str = ""
    gender: int | None = None
    known_for_department: str = ""
    profile_path: str | None = None
    popularity: float = 0.0
    adult: bool = False
    known_for: list[dict[str, Any]] = Field(default_factory=list)


class PersonDetails(TMDBModel):
    id: int = 0
    name: str = ""
    also_known_as: list[str] = Field(default_factory=list)
    biography: str = ""
    birthday: str | None = None
    deathday: str | None = None
    gender: int | None = None
    homepage: str | None = None
    imdb_id: str | None = None
    known_for_department: str = ""
    place_of_birth: str | None = None
    profile_path: str | None = None
    popularity: float = 0.0
    adult: bool = False

    external_ids: ExternalIDs | None = None
    images: ImagesResponse | None = None
    translations: TranslationsResponse | None = None


class MovieCastCredit(MovieResult):
    character: str = ""
    credit_id: str = ""
    order: int = 0


class MovieCrewCredit(MovieResult):
    credit_id: str = ""
    department: str = ""
    job: str = ""


class PersonMovieCredits(TMDBModel):
    id: int = 0
    cast: list[MovieCastCredit] = Field(default_factory=list)
    crew: list[MovieCrewCredit] = Field(default_factory=list)


class TVCastCredit(TVShowResult):
    character: str = ""
    credit_id: str = ""
    episode_count: int = 0


class TVCrewCredit(TVShowResult):
    credit_id: str = ""
    department: str = ""
    job: str = ""
    episode_count: int = 0


class PersonTVCredits(TMDBModel):
    id: int = 0
    cast: list[TVCastCredit] = Field(default_factory=list)
    crew: list[TVCrewCredit] = Field(default_factory=list)


class CombinedCredit(TMDBModel):
    """Movie or TV credit; ``media_type`` tells which title fields are set."""

    id: int = 0
    media_type: str = ""
    credit_id: str = ""
    title: str | None = None
    name: str | None = None
    character: str | None = None
    department: str | None = None
    job: str | None = None
    release_date: str | None = None
    first_air_date: str | None = None
    episode_count: int | None = None
    poster_path: str | None = None
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0


class PersonCombinedCredits(TMDBModel):
    id: int = 0
    cast: list[CombinedCredit] = Field(default_factory=list)
    crew: list[CombinedCredit] = Field(default_factory=list)


class TaggedImage(Image):
    id: str = ""
    image_type: str = ""
    media_type: str = ""
    media: dict[str, Any] = Field(default_factory=dict)


class TaggedImagesResponse(PagedResponse[TaggedImage]):
    id: int = 0
