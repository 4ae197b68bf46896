"""Authentication, guest session, list and rating payloads."""

from __future__ import annotations

from pydantic import Field

from .base import StatusResponse, TMDBModel
from .movies import MovieResult
from .tv import EpisodeSummary, TVShowResult


class RequestToken(TMDBModel):
    success: bool = False
    expires_at: str = ""
    request_token: str = ""


class GuestSession(TMDBModel):
    success: bool = False
    guest_session_id: str = ""
    expires_at: str = ""


class Session(TMDBModel):
    success: bool = False
    session_id: str = ""


class RatedMovie(MovieResult):
    rating: float = 0.0


class RatedTVShow(TVShowResult):
    rating: float = 0.0


class RatedTVEpisode(EpisodeSummary):
    rating: float = 0.0


class ListDetails(TMDBModel):
    """A user created list (``/list/{id}``)."""

    id: str = ""
    name: str = ""
    description: str = ""
    created_by: str = ""
    favorite_count: int = 0
    item_count: int = 0
    iso_639_1: str = ""
    poster_path: str | None = None
    items: list[MovieResult] = Field(default_factory=list)


class ListItemStatus(TMDBModel):
    id: str = ""
    item_present: bool = False


class ListCreated(StatusResponse):
    list_id: int = 0
