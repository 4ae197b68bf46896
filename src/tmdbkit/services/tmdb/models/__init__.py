"""TMDB API Response Models.

Pydantic models for the payloads returned by the TMDB v3 API. Unknown
fields are preserved as extras so newer API fields never break decoding.
"""

from .account import (
    GuestSession,
    ListCreated,
    ListDetails,
    ListItemStatus,
    RatedMovie,
    RatedTVEpisode,
    RatedTVShow,
    RequestToken,
    Session,
)
from .base import (
    DatedPagedResponse,
    ErrorResponse,
    PagedResponse,
    StatusResponse,
    TMDBModel,
)
from .catalog import (
    ChangedItem,
    CollectionDetails,
    CollectionResult,
    CompanyDetails,
    CompanyResult,
    CreditDetails,
    FindResponse,
    KeywordDetails,
    MultiResult,
    NetworkDetails,
)
from .common import (
    AccountStates,
    AlternativeNamesResponse,
    AlternativeTitlesResponse,
    ChangesResponse,
    CreditsResponse,
    ExternalIDs,
    Genre,
    GenreList,
    ImagesResponse,
    Keyword,
    KeywordsResponse,
    ReviewDetails,
    ReviewsResponse,
    SeasonAccountStates,
    TranslationsResponse,
    VideosResponse,
    WatchProvidersResponse,
)
from .configuration import (
    APIConfiguration,
    CertificationsResponse,
    Country,
    Department,
    Language,
    Timezone,
)
from .movies import MovieDetails, MovieListsResponse, MovieReleaseDates, MovieResult
from .people import (
    PersonCombinedCredits,
    PersonDetails,
    PersonMovieCredits,
    PersonResult,
    PersonTVCredits,
    TaggedImagesResponse,
)
from .tv import (
    ContentRatingsResponse,
    EpisodeGroupDetails,
    EpisodeGroupsResponse,
    ScreenedTheatricallyResponse,
    TVEpisodeDetails,
    TVSeasonDetails,
    TVShowDetails,
    TVShowResult,
)

__all__ = [
    "APIConfiguration",
    "AccountStates",
    "AlternativeNamesResponse",
    "AlternativeTitlesResponse",
    "CertificationsResponse",
    "ChangedItem",
    "ChangesResponse",
    "CollectionDetails",
    "CollectionResult",
    "CompanyDetails",
    "CompanyResult",
    "ContentRatingsResponse",
    "Country",
    "CreditDetails",
    "CreditsResponse",
    "DatedPagedResponse",
    "Department",
    "EpisodeGroupDetails",
    "EpisodeGroupsResponse",
    "ErrorResponse",
    "ExternalIDs",
    "FindResponse",
    "Genre",
    "GenreList",
    "GuestSession",
    "ImagesResponse",
    "Keyword",
    "KeywordDetails",
    "KeywordsResponse",
    "Language",
    "ListCreated",
    "ListDetails",
    "ListItemStatus",
    "MovieDetails",
    "MovieListsResponse",
    "MovieReleaseDates",
    "MovieResult",
    "MultiResult",
    "NetworkDetails",
    "PagedResponse",
    "PersonCombinedCredits",
    "PersonDetails",
    "PersonMovieCredits",
    "PersonResult",
    "PersonTVCredits",
    "RatedMovie",
    "RatedTVEpisode",
    "RatedTVShow",
    "RequestToken",
    "ReviewDetails",
    "ReviewsResponse",
    "ScreenedTheatricallyResponse",
    "SeasonAccountStates",
    "Session",
    "StatusResponse",
    "TMDBModel",
    "TVEpisodeDetails",
    "TVSeasonDetails",
    "TVShowDetails",
    "TVShowResult",
    "TaggedImagesResponse",
    "Timezone",
    "TranslationsResponse",
    "VideosResponse",
    "WatchProvidersResponse",
]
