"""Movie payload models."""

from __future__ import annotations

from pydantic import Field

from .base import PagedResponse, TMDBModel
from .common import (
    AlternativeTitlesResponse,
    CreditsResponse,
    ExternalIDs,
    Genre,
    ImagesResponse,
    KeywordsResponse,
    ProductionCompany,
    ProductionCountry,
    ReviewsResponse,
    SpokenLanguage,
    TranslationsResponse,
    VideosResponse,
)


class MovieResult(TMDBModel):
    """Movie as it appears in lists, searches and discover results."""

    id: int = 0
    title: str = ""
    original_title: str = ""
    original_language: str = ""
    overview: str = ""
    release_date: str = ""
    poster_path: str | None = None
    backdrop_path: str | None = None
    genre_ids: list[int] = Field(default_factory=list)
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0
    adult: bool = False
    video: bool = False


class BelongsToCollection(TMDBModel):
    id: int = 0
    name: str = ""
    poster_path: str | None = None
    backdrop_path: str | None = None


class MovieDetails(TMDBModel):
    """Primary information about a movie.

    Sub-resources requested with ``append_to_response`` (e.g. ``credits``)
    are typed when present.
    """

    id: int = 0
    imdb_id: str | None = None
    title: str = ""
    original_title: str = ""
    original_language: str = ""
    overview: str | None = None
    tagline: str | None = None
    status: str = ""
    release_date: str = ""
    runtime: int | None = None
    budget: int = 0
    revenue: int = 0
    homepage: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    adult: bool = False
    video: bool = False
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0
    belongs_to_collection: BelongsToCollection | None = None
    genres: list[Genre] = Field(default_factory=list)
    production_companies: list[ProductionCompany] = Field(default_factory=list)
    production_countries: list[ProductionCountry] = Field(default_factory=list)
    spoken_languages: list[SpokenLanguage] = Field(default_factory=list)
    origin_country: list[str] = Field(default_factory=list)

    alternative_titles: AlternativeTitlesResponse | None = None
    credits: CreditsResponse | None = None
    external_ids: ExternalIDs | None = None
    images: ImagesResponse | None = None
    keywords: KeywordsResponse | None = None
    reviews: ReviewsResponse | None = None
    translations: TranslationsResponse | None = None
    videos: VideosResponse | None = None


class ReleaseDate(TMDBModel):
    certification: str = ""
    iso_639_1: str = ""
    note: str = ""
    release_date: str = ""
    type: int = 0


class CountryReleaseDates(TMDBModel):
    iso_3166_1: str = ""
    release_dates: list[ReleaseDate] = Field(default_factory=list)


class MovieReleaseDates(TMDBModel):
    id: int = 0
    results: list[CountryReleaseDates] = Field(default_factory=list)


class MovieListSummary(TMDBModel):
    """A user list that contains a given movie."""

    id: int = 0
    name: str = ""
    description: str = ""
    favorite_count: int = 0
    item_count: int = 0
    iso_639_1: str = ""
    list_type: str = ""
    poster_path: str | None = None


class MovieListsResponse(PagedResponse[MovieListSummary]):
    id: int = 0
