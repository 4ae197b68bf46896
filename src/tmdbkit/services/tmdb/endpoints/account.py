"""Authentication, guest session and list endpoints.

These are the only endpoints that write through ``POST``. Write calls need
a session: pass ``session_id`` (or ``guest_session_id`` where TMDB allows
it) in ``options``.
"""

from __future__ import annotations

from urllib.parse import quote_plus

from tmdbkit.shared.constants import TMDB, HTTPStatusCodes, TMDBPaths

from ..executor import Options, RequestExecutor
from ..models import (
    GuestSession,
    ListCreated,
    ListDetails,
    ListItemStatus,
    PagedResponse,
    RatedMovie,
    RatedTVEpisode,
    RatedTVShow,
    RequestToken,
    Session,
    StatusResponse,
)


class AuthenticationMixin(RequestExecutor):
    """Request token / session flow of TMDB user authentication."""

    def create_request_token(self, options: Options | None = None) -> RequestToken:
        """Create a temporary request token (valid for 60 minutes)."""
        return self._get(
            self._url(f"{TMDBPaths.AUTHENTICATION}token/new", options),
            RequestToken,
        )

    def create_guest_session(self, options: Options | None = None) -> GuestSession:
        return self._get(
            self._url(f"{TMDBPaths.AUTHENTICATION}guest_session/new", options),
            GuestSession,
        )

    @staticmethod
    def get_authentication_url(request_token: str, redirect_to: str | None = None) -> str:
        """URL where the user approves ``request_token``.

        No request is made; send the user to this page before calling
        :meth:`create_session`.
        """
        url = f"{TMDB.PERMISSION_URL}{request_token}"
        if redirect_to:
            url += f"?redirect_to={quote_plus(redirect_to)}"
        return url

    def create_session(
        self,
        request_token: str,
        options: Options | None = None,
    ) -> Session:
        """Exchange an approved request token for a session id."""
        return self._post(
            self._url(f"{TMDBPaths.AUTHENTICATION}session/new", options),
            {"request_token": request_token},
            Session,
            success_status=HTTPStatusCodes.OK,
        )

    def validate_request_token_with_login(
        self,
        username: str,
        password: str,
        request_token: str,
        options: Options | None = None,
    ) -> RequestToken:
        """Approve a request token with user credentials instead of the web flow."""
        return self._post(
            self._url(f"{TMDBPaths.AUTHENTICATION}token/validate_with_login", options),
            {"username": username, "password": password, "request_token": request_token},
            RequestToken,
            success_status=HTTPStatusCodes.OK,
        )

    def create_session_with_login(
        self,
        username: str,
        password: str,
        options: Options | None = None,
    ) -> Session:
        """Run the whole login flow: new token, validate with login, create session.

        ``options`` is sent with each of the three requests.
        """
        token = self.create_request_token(options)
        validated = self.validate_request_token_with_login(
            username,
            password,
            token.request_token,
            options,
        )
        return self.create_session(validated.request_token, options)


class GuestSessionsMixin(RequestExecutor):
    def get_guest_session_rated_movies(
        self,
        guest_session_id: str,
        options: Options | None = None,
    ) -> PagedResponse[RatedMovie]:
        return self._get(
            self._url(f"{TMDBPaths.GUEST_SESSION}{guest_session_id}/rated/movies", options),
            PagedResponse[RatedMovie],
        )

    def get_guest_session_rated_tv_shows(
        self,
        guest_session_id: str,
        options: Options | None = None,
    ) -> PagedResponse[RatedTVShow]:
        return self._get(
            self._url(f"{TMDBPaths.GUEST_SESSION}{guest_session_id}/rated/tv", options),
            PagedResponse[RatedTVShow],
        )

    def get_guest_session_rated_tv_episodes(
        self,
        guest_session_id: str,
        options: Options | None = None,
    ) -> PagedResponse[RatedTVEpisode]:
        return self._get(
            self._url(
                f"{TMDBPaths.GUEST_SESSION}{guest_session_id}/rated/tv/episodes",
                options,
            ),
            PagedResponse[RatedTVEpisode],
        )


class ListsMixin(RequestExecutor):
    def get_list_details(self, list_id: str, options: Options | None = None) -> ListDetails:
        return self._get(self._url(f"{TMDBPaths.LIST}{list_id}", options), ListDetails)

    def get_list_item_status(
        self,
        list_id: str,
        movie_id: int,
        options: Options | None = None,
    ) -> ListItemStatus:
        """Whether ``movie_id`` is already on the list."""
        return self._get(
            self._url(
                f"{TMDBPaths.LIST}{list_id}/item_status",
                {"movie_id": str(movie_id), **(options or {})},
            ),
            ListItemStatus,
        )

    def create_list(
        self,
        name: str,
        description: str = "",
        language: str = "en",
        options: Options | None = None,
    ) -> ListCreated:
        """Create a list; requires ``session_id`` in ``options``."""
        return self._post(
            self._url(TMDBPaths.LIST.rstrip("/"), options),
            {"name": name, "description": description, "language": language},
            ListCreated,
        )

    def add_movie(
        self,
        list_id: str,
        media_id: int,
        options: Options | None = None,
    ) -> StatusResponse:
        return self._post(
            self._url(f"{TMDBPaths.LIST}{list_id}/add_item", options),
            {"media_id": media_id},
            StatusResponse,
        )

    def remove_movie(
        self,
        list_id: str,
        media_id: int,
        options: Options | None = None,
    ) -> StatusResponse:
        return self._post(
            self._url(f"{TMDBPaths.LIST}{list_id}/remove_item", options),
            {"media_id": media_id},
            StatusResponse,
            success_status=HTTPStatusCodes.OK,
        )

    def clear_list(
        self,
        list_id: str,
        confirm: bool = True,
        options: Options | None = None,
    ) -> StatusResponse:
        """Remove every item of a list."""
        return self._post(
            self._url(
                f"{TMDBPaths.LIST}{list_id}/clear",
                {"confirm": str(confirm).lower(), **(options or {})},
            ),
            {},
            StatusResponse,
        )
