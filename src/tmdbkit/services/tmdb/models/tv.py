"""TV show, season and episode payload models."""

from __future__ import annotations

from pydantic import Field

from .base import TMDBModel
from .common import (
    AlternativeTitlesResponse,
    CastMember,
    CreditsResponse,
    CrewMember,
    ExternalIDs,
    Genre,
    ImagesResponse,
    KeywordsResponse,
    ProductionCompany,
    ProductionCountry,
    SpokenLanguage,
    TranslationsResponse,
    VideosResponse,
)


class TVShowResult(TMDBModel):
    """TV show as it appears in lists, searches and discover results."""

    id: int = 0
    name: str = ""
    original_name: str = ""
    original_language: str = ""
    overview: str = ""
    first_air_date: str = ""
    origin_country: list[str] = Field(default_factory=list)
    poster_path: str | None = None
    backdrop_path: str | None = None
    genre_ids: list[int] = Field(default_factory=list)
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0


class Creator(TMDBModel):
    id: int = 0
    credit_id: str = ""
    name: str = ""
    gender: int | None = None
    profile_path: str | None = None


class NetworkSummary(TMDBModel):
    id: int = 0
    name: str = ""
    logo_path: str | None = None
    origin_country: str = ""


class EpisodeSummary(TMDBModel):
    id: int = 0
    name: str = ""
    overview: str = ""
    air_date: str | None = None
    episode_number: int = 0
    season_number: int = 0
    production_code: str = ""
    runtime: int | None = None
    show_id: int = 0
    still_path: str | None = None
    vote_average: float = 0.0
    vote_count: int = 0


class SeasonSummary(TMDBModel):
    id: int = 0
    name: str = ""
    overview: str = ""
    air_date: str | None = None
    episode_count: int = 0
    poster_path: str | None = None
    season_number: int = 0
    vote_average: float = 0.0


class TVShowDetails(TMDBModel):
    """Primary information about a TV show."""

    id: int = 0
    name: str = ""
    original_name: str = ""
    original_language: str = ""
    overview: str = ""
    tagline: str = ""
    status: str = ""
    type: str = ""
    homepage: str = ""
    first_air_date: str | None = None
    last_air_date: str | None = None
    in_production: bool = False
    number_of_episodes: int = 0
    number_of_seasons: int = 0
    episode_run_time: list[int] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    origin_country: list[str] = Field(default_factory=list)
    poster_path: str | None = None
    backdrop_path: str | None = None
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0
    adult: bool = False
    created_by: list[Creator] = Field(default_factory=list)
    genres: list[Genre] = Field(default_factory=list)
    networks: list[NetworkSummary] = Field(default_factory=list)
    production_companies: list[ProductionCompany] = Field(default_factory=list)
    production_countries: list[ProductionCountry] = Field(default_factory=list)
    spoken_languages: list[SpokenLanguage] = Field(default_factory=list)
    seasons: list[SeasonSummary] = Field(default_factory=list)
    last_episode_to_air: EpisodeSummary | None = None
    next_episode_to_air: EpisodeSummary | None = None

    alternative_titles: AlternativeTitlesResponse | None = None
    credits: CreditsResponse | None = None
    external_ids: ExternalIDs | None = None
    images: ImagesResponse | None = None
    keywords: KeywordsResponse | None = None
    translations: TranslationsResponse | None = None
    videos: VideosResponse | None = None


class ContentRating(TMDBModel):
    iso_3166_1: str = ""
    rating: str = ""
    descriptors: list[str] = Field(default_factory=list)


class ContentRatingsResponse(TMDBModel):
    id: int = 0
    results: list[ContentRating] = Field(default_factory=list)


class ScreenedEpisode(TMDBModel):
    id: int = 0
    episode_number: int = 0
    season_number: int = 0


class ScreenedTheatricallyResponse(TMDBModel):
    id: int = 0
    results: list[ScreenedEpisode] = Field(default_factory=list)


class EpisodeGroupSummary(TMDBModel):
    id: str = ""
    name: str = ""
    description: str = ""
    episode_count: int = 0
    group_count: int = 0
    type: int = 0
    network: NetworkSummary | None = None


class EpisodeGroupsResponse(TMDBModel):
    id: int = 0
    results: list[EpisodeGroupSummary] = Field(default_factory=list)


class GroupedEpisode(EpisodeSummary):
    order: int = 0


class EpisodeGroup(TMDBModel):
    id: str = ""
    name: str = ""
    order: int = 0
    locked: bool = False
    episodes: list[GroupedEpisode] = Field(default_factory=list)


class EpisodeGroupDetails(EpisodeGroupSummary):
    """Details of a TV episode group (``/tv/episode_group/{id}``)."""

    groups: list[EpisodeGroup] = Field(default_factory=list)


class TVEpisodeDetails(EpisodeSummary):
    """Primary information about a TV episode."""

    crew: list[CrewMember] = Field(default_factory=list)
    guest_stars: list[CastMember] = Field(default_factory=list)

    credits: CreditsResponse | None = None
    external_ids: ExternalIDs | None = None
    images: ImagesResponse | None = None
    translations: TranslationsResponse | None = None
    videos: VideosResponse | None = None


class TVSeasonDetails(TMDBModel):
    """Primary information about a TV season.

    ``season_id`` maps TMDB's ``_id`` field, the string identifier used by
    the change log endpoints.
    """

    season_id: str = Field(default="", alias="_id")
    id: int = 0
    name: str = ""
    overview: str = ""
    air_date: str | None = None
    poster_path: str | None = None
    season_number: int = 0
    vote_average: float = 0.0
    episodes: list[TVEpisodeDetails] = Field(default_factory=list)

    credits: CreditsResponse | None = None
    external_ids: ExternalIDs | None = None
    images: ImagesResponse | None = None
    videos: VideosResponse | None = None
