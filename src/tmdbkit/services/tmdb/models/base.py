"""Base models for TMDB API payloads.

Every response model derives from :class:`TMDBModel`. Fields that TMDB adds
after a model was written are kept as extra attributes instead of being
dropped, and every declared field has a default so that an empty payload
(e.g. a ``204 No Content`` answer) still yields a usable instance.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class TMDBModel(BaseModel):
    """Common base for all TMDB payload models."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ErrorResponse(TMDBModel):
    """Error envelope returned by TMDB for failed calls.

    Example:
        >>> ErrorResponse(status_code=34, status_message="Not found").status_code
        34
    """

    status_message: str = ""
    success: bool = False
    status_code: int = 0


class StatusResponse(TMDBModel):
    """Acknowledgement returned by write endpoints (ratings, list edits)."""

    status_code: int = 0
    status_message: str = ""
    success: bool = True


class PagedResponse(TMDBModel, Generic[T]):
    """Paginated result list.

    Attributes:
        page: Current page number (1-indexed)
        total_pages: Total number of pages available
        total_results: Total number of results across all pages
        results: Items on this page
    """

    page: int = 0
    total_pages: int = 0
    total_results: int = 0
    results: list[T] = Field(default_factory=list)


class DatedPagedResponse(PagedResponse[T], Generic[T]):
    """Paginated list with the release window of "now playing"/"upcoming" lists."""

    dates: dict[str, str] = Field(default_factory=dict)
