"""Building blocks shared by several TMDB resources."""

from __future__ import annotations

from typing import Any, Union

from pydantic import Field

from .base import PagedResponse, TMDBModel


class Genre(TMDBModel):
    """Genre as embedded in detail payloads (name is localized)."""

    id: int = 0
    name: str = ""


class GenreList(TMDBModel):
    genres: list[Genre] = Field(default_factory=list)


class ProductionCompany(TMDBModel):
    id: int = 0
    name: str = ""
    logo_path: str | None = None
    origin_country: str = ""


class ProductionCountry(TMDBModel):
    iso_3166_1: str = ""
    name: str = ""


class SpokenLanguage(TMDBModel):
    iso_639_1: str = ""
    name: str = ""
    english_name: str = ""


class Image(TMDBModel):
    """One image entry of an ``/images`` response."""

    aspect_ratio: float = 0.0
    file_path: str = ""
    height: int = 0
    width: int = 0
    iso_639_1: str | None = None
    vote_average: float = 0.0
    vote_count: int = 0


class ImagesResponse(TMDBModel):
    """Images of a resource; which lists are filled depends on the resource."""

    id: int = 0
    backdrops: list[Image] = Field(default_factory=list)
    logos: list[Image] = Field(default_factory=list)
    posters: list[Image] = Field(default_factory=list)
    profiles: list[Image] = Field(default_factory=list)
    stills: list[Image] = Field(default_factory=list)


class Video(TMDBModel):
    id: str = ""
    iso_639_1: str = ""
    iso_3166_1: str = ""
    key: str = ""
    name: str = ""
    site: str = ""
    size: int = 0
    type: str = ""
    official: bool = False
    published_at: str | None = None


class VideosResponse(TMDBModel):
    id: int = 0
    results: list[Video] = Field(default_factory=list)


class CastMember(TMDBModel):
    id: int = 0
    name: str = ""
    original_name: str = ""
    character: str = ""
    credit_id: str = ""
    gender: int | None = None
    known_for_department: str = ""
    order: int = 0
    profile_path: str | None = None
    popularity: float = 0.0
    adult: bool = False


class CrewMember(TMDBModel):
    id: int = 0
    name: str = ""
    original_name: str = ""
    credit_id: str = ""
    department: str = ""
    job: str = ""
    gender: int | None = None
    known_for_department: str = ""
    profile_path: str | None = None
    popularity: float = 0.0
    adult: bool = False


class CreditsResponse(TMDBModel):
    id: int = 0
    cast: list[CastMember] = Field(default_factory=list)
    crew: list[CrewMember] = Field(default_factory=list)
    guest_stars: list[CastMember] = Field(default_factory=list)


class ExternalIDs(TMDBModel):
    id: int = 0
    imdb_id: str | None = None
    freebase_mid: str | None = None
    freebase_id: str | None = None
    tvdb_id: int | None = None
    tvrage_id: int | None = None
    wikidata_id: str | None = None
    facebook_id: str | None = None
    instagram_id: str | None = None
    twitter_id: str | None = None


class Keyword(TMDBModel):
    id: int = 0
    name: str = ""


class KeywordsResponse(TMDBModel):
    """Keywords of a movie (``keywords``) or a TV show (``results``)."""

    id: int = 0
    keywords: list[Keyword] = Field(default_factory=list)
    results: list[Keyword] = Field(default_factory=list)


class Translation(TMDBModel):
    iso_3166_1: str = ""
    iso_639_1: str = ""
    name: str = ""
    english_name: str = ""
    data: dict[str, Any] = Field(default_factory=dict)


class TranslationsResponse(TMDBModel):
    id: int = 0
    translations: list[Translation] = Field(default_factory=list)


class ChangeItem(TMDBModel):
    id: str = ""
    action: str = ""
    time: str = ""
    iso_639_1: str | None = None
    iso_3166_1: str | None = None
    value: Any = None
    original_value: Any = None


class Change(TMDBModel):
    key: str = ""
    items: list[ChangeItem] = Field(default_factory=list)


class ChangesResponse(TMDBModel):
    """Change log of a single resource."""

    changes: list[Change] = Field(default_factory=list)


class AlternativeTitle(TMDBModel):
    iso_3166_1: str = ""
    title: str = ""
    type: str = ""


class AlternativeTitlesResponse(TMDBModel):
    """Alternative titles; movies use ``titles``, TV shows ``results``."""

    id: int = 0
    titles: list[AlternativeTitle] = Field(default_factory=list)
    results: list[AlternativeTitle] = Field(default_factory=list)


class AlternativeName(TMDBModel):
    name: str = ""
    type: str = ""


class AlternativeNamesResponse(TMDBModel):
    id: int = 0
    results: list[AlternativeName] = Field(default_factory=list)


class RatedValue(TMDBModel):
    value: float = 0.0


class AccountStates(TMDBModel):
    """Rating/favorite/watchlist flags of a session for one item.

    TMDB sends ``rated`` as ``false`` when unrated and ``{"value": 8.0}``
    otherwise.
    """

    id: int = 0
    favorite: bool = False
    rated: Union[RatedValue, bool] = False
    watchlist: bool = False

    @property
    def rating(self) -> float | None:
        return self.rated.value if isinstance(self.rated, RatedValue) else None


class EpisodeAccountStates(TMDBModel):
    episode_number: int = 0
    id: int = 0
    rated: Union[RatedValue, bool] = False


class SeasonAccountStates(TMDBModel):
    id: int = 0
    results: list[EpisodeAccountStates] = Field(default_factory=list)


class WatchProvider(TMDBModel):
    provider_id: int = 0
    provider_name: str = ""
    logo_path: str | None = None
    display_priority: int = 0


class CountryWatchProviders(TMDBModel):
    link: str = ""
    flatrate: list[WatchProvider] = Field(default_factory=list)
    rent: list[WatchProvider] = Field(default_factory=list)
    buy: list[WatchProvider] = Field(default_factory=list)
    ads: list[WatchProvider] = Field(default_factory=list)
    free: list[WatchProvider] = Field(default_factory=list)


class WatchProvidersResponse(TMDBModel):
    """Watch providers keyed by ISO 3166-1 country code."""

    id: int = 0
    results: dict[str, CountryWatchProviders] = Field(default_factory=dict)


class AuthorDetails(TMDBModel):
    name: str = ""
    username: str = ""
    avatar_path: str | None = None
    rating: float | None = None


class Review(TMDBModel):
    id: str = ""
    author: str = ""
    author_details: AuthorDetails = Field(default_factory=AuthorDetails)
    content: str = ""
    created_at: str = ""
    updated_at: str = ""
    url: str = ""


class ReviewsResponse(PagedResponse[Review]):
    id: int = 0


class ReviewDetails(Review):
    """Full review as returned by ``/review/{id}``."""

    iso_639_1: str = ""
    media_id: int = 0
    media_title: str = ""
    media_type: str = ""
