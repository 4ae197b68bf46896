"""Tests for the request executor shared by all TMDB endpoints."""

from __future__ import annotations

import pytest
import requests
from helpers import make_response, requested_url

from tmdbkit import TMDBClient, fmt_options, init
from tmdbkit.services.tmdb.models import Language, MovieDetails
from tmdbkit.shared.errors import (
    APIError,
    DomainError,
    ErrorCode,
    NetworkError,
    ParsingError,
    SecurityError,
)

NOT_FOUND = {
    "success": False,
    "status_code": 34,
    "status_message": "The resource you requested could not be found.",
}
INVALID_KEY = {
    "status_code": 7,
    "status_message": "Invalid API key: You must be granted a valid key.",
    "success": False,
}


class TestClientConstruction:
    def test_empty_api_key_is_rejected(self):
        with pytest.raises(SecurityError) as exc_info:
            TMDBClient("")

        assert exc_info.value.code == ErrorCode.API_KEY_MISSING
        assert exc_info.value.message == "APIKey is empty"

    def test_init_returns_client(self, api_key):
        client = init(api_key)

        assert isinstance(client, TMDBClient)
        assert client.api_key == api_key
        assert client.auto_retry is False

    def test_repr_masks_api_key(self, api_key):
        assert api_key not in repr(TMDBClient(api_key))

    def test_set_client_config_replaces_session_and_timeout(self, client):
        session = requests.Session()

        client.set_client_config(session=session, timeout=3)

        assert client.session is session
        assert client.timeout == 3

    def test_set_client_auto_retry(self, client):
        client.set_client_auto_retry()
        assert client.auto_retry is True

        client.set_client_auto_retry(False)
        assert client.auto_retry is False


class TestRequestBuilding:
    def test_default_timeout_is_ten_seconds(self, client, mock_request):
        client.get_movie_details(550)

        assert mock_request.call_args.kwargs["timeout"] == 10

    def test_configured_timeout_is_used(self, client, mock_request):
        client.set_client_config(timeout=2.5)

        client.get_movie_details(550)

        assert mock_request.call_args.kwargs["timeout"] == 2.5

    def test_json_content_type_header(self, client, mock_request):
        client.get_movie_details(550)

        headers = mock_request.call_args.kwargs["headers"]
        assert headers["Content-Type"] == "application/json;charset=utf-8"

    def test_url_contains_key_and_options(self, client, mock_request, api_key):
        client.get_movie_details(550, {"language": "pt-BR"})

        assert mock_request.call_args.args[0] == "GET"
        assert requested_url(mock_request) == (
            f"https://api.themoviedb.org/3/movie/550?api_key={api_key}&language=pt-BR"
        )

    def test_default_language_is_appended(self, api_key, mocker):
        client = TMDBClient(api_key, language="en-US")
        mock = mocker.patch.object(client.session, "request", return_value=make_response(200, {}))

        client.get_movie_details(550)

        assert requested_url(mock).endswith("?api_key=" + api_key + "&language=en-US")

    def test_call_language_overrides_default(self, api_key, mocker):
        client = TMDBClient(api_key, language="en-US")
        mock = mocker.patch.object(client.session, "request", return_value=make_response(200, {}))

        client.get_movie_details(550, {"language": "de"})

        url = requested_url(mock)
        assert url.count("language=") == 1
        assert url.endswith("&language=de")

    def test_custom_base_url(self, api_key, mocker):
        client = TMDBClient(api_key, base_url="http://localhost:8080/3/")
        mock = mocker.patch.object(client.session, "request", return_value=make_response(200, {}))

        client.get_genre_movie_list()

        assert requested_url(mock).startswith("http://localhost:8080/3/genre/movie/list?")


class TestGet:
    def test_empty_url_fails_before_sending(self, client, mock_request):
        with pytest.raises(DomainError) as exc_info:
            client._get("", MovieDetails)

        assert exc_info.value.message == "url field is empty"
        mock_request.assert_not_called()

    def test_decodes_payload(self, client, mock_request):
        mock_request.return_value = make_response(
            200,
            {"id": 550, "title": "Fight Club", "genres": [{"id": 18, "name": "Drama"}]},
        )

        movie = client.get_movie_details(550)

        assert movie.id == 550
        assert movie.title == "Fight Club"
        assert movie.genres[0].name == "Drama"

    def test_unknown_fields_are_kept(self, client, mock_request):
        mock_request.return_value = make_response(200, {"id": 1, "brand_new_field": "x"})

        movie = client.get_movie_details(1)

        assert movie.model_extra == {"brand_new_field": "x"}

    def test_no_content_returns_default_model(self, client, mock_request):
        mock_request.return_value = make_response(204)

        movie = client.get_movie_details(550)

        assert movie == MovieDetails()

    def test_no_content_returns_empty_list(self, client, mock_request):
        mock_request.return_value = make_response(204)

        assert client.get_configuration_languages() == []

    def test_list_payload(self, client, mock_request):
        mock_request.return_value = make_response(
            200,
            [{"iso_639_1": "pt", "english_name": "Portuguese", "name": "Português"}],
        )

        languages = client.get_configuration_languages()

        assert languages == [Language(iso_639_1="pt", english_name="Portuguese", name="Português")]

    def test_not_found_raises_api_error(self, client, mock_request):
        mock_request.return_value = make_response(404, NOT_FOUND)

        with pytest.raises(APIError) as exc_info:
            client.get_movie_details(0)

        error = exc_info.value
        assert error.message == "The resource you requested could not be found."
        assert error.status_message == error.message
        assert error.http_status == 404
        assert error.status_code == 34
        assert error.code == ErrorCode.TMDB_API_MEDIA_NOT_FOUND

    def test_invalid_key_raises_api_error(self, client, mock_request):
        mock_request.return_value = make_response(401, INVALID_KEY)

        with pytest.raises(APIError) as exc_info:
            client.get_genre_movie_list()

        assert exc_info.value.message == "Invalid API key: You must be granted a valid key."
        assert exc_info.value.code == ErrorCode.TMDB_API_AUTHENTICATION_ERROR

    def test_cleared_api_key_is_sent_empty_and_rejected(self, client, mock_request):
        client.api_key = ""
        mock_request.return_value = make_response(401, INVALID_KEY)

        with pytest.raises(APIError) as exc_info:
            client.get_tv_season_credits(1399, 1)

        assert requested_url(mock_request).endswith("/tv/1399/season/1/credits?api_key=")
        assert exc_info.value.message == "Invalid API key: You must be granted a valid key."
        assert exc_info.value.http_status == 401

    def test_non_200_success_status_is_an_error(self, client, mock_request):
        mock_request.return_value = make_response(201, {"status_code": 1, "status_message": "x"})

        with pytest.raises(APIError):
            client.get_movie_details(550)

    def test_invalid_json_raises_parsing_error(self, client, mock_request):
        mock_request.return_value = make_response(200, body=b"{not json")

        with pytest.raises(ParsingError) as exc_info:
            client.get_movie_details(550)

        assert exc_info.value.code == ErrorCode.TMDB_API_INVALID_RESPONSE

    def test_timeout_raises_network_error(self, client, mock_request):
        mock_request.side_effect = requests.Timeout("read timed out")

        with pytest.raises(NetworkError) as exc_info:
            client.get_movie_details(550)

        assert exc_info.value.code == ErrorCode.TMDB_API_TIMEOUT
        assert isinstance(exc_info.value.original_error, requests.Timeout)

    def test_connection_error_raises_network_error(self, client, mock_request, api_key):
        mock_request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(NetworkError) as exc_info:
            client.get_movie_details(550)

        assert exc_info.value.code == ErrorCode.TMDB_API_CONNECTION_ERROR
        assert api_key not in (exc_info.value.context.url or "")


class TestDecodeError:
    def test_empty_body(self, client):
        error = client.decode_error(make_response(500))

        assert isinstance(error, APIError)
        assert error.message == "[500]: empty body Internal Server Error"
        assert error.code == ErrorCode.TMDB_API_SERVER_ERROR

    def test_undecodable_body(self, client):
        error = client.decode_error(make_response(502, body=b"<html>oops</html>"))

        assert isinstance(error, ParsingError)
        assert error.message == "couldn't decode error: (17) [<html>oops</html>]"

    def test_error_context_masks_credentials(self, client):
        error = client.decode_error(make_response(404, NOT_FOUND))

        assert error.context.url == "https://api.themoviedb.org/3/test?api_key=****"
        assert error.context.additional_data == {"http_status": 404}


class TestPost:
    def test_post_sends_json_body(self, client, mock_request):
        mock_request.return_value = make_response(
            201,
            {"status_code": 1, "status_message": "Success."},
        )

        status = client.rate_movie(550, 8.5, {"guest_session_id": "abc"})

        assert status.status_code == 1
        assert mock_request.call_args.args[0] == "POST"
        assert mock_request.call_args.kwargs["json"] == {"value": 8.5}
        assert "/movie/550/rating?" in requested_url(mock_request)

    def test_post_expects_created(self, client, mock_request):
        mock_request.return_value = make_response(200, {"status_code": 1})

        with pytest.raises(APIError):
            client.rate_movie(550, 8.5)

    def test_post_with_ok_success_status(self, client, mock_request):
        mock_request.return_value = make_response(
            200,
            {"success": True, "session_id": "79191836ddaa0da3df76a5ffef6f07ad6ab0c641"},
        )

        session = client.create_session("token")

        assert session.session_id == "79191836ddaa0da3df76a5ffef6f07ad6ab0c641"
        assert mock_request.call_args.kwargs["json"] == {"request_token": "token"}

    def test_post_no_content_is_an_error(self, client, mock_request):
        mock_request.return_value = make_response(204)

        with pytest.raises(APIError) as exc_info:
            client.rate_movie(550, 8.5)

        assert exc_info.value.message == "[204]: empty body No Content"

    def test_post_decodes_error_envelope(self, client, mock_request):
        mock_request.return_value = make_response(401, INVALID_KEY)

        with pytest.raises(APIError) as exc_info:
            client.create_list("My list")

        assert exc_info.value.http_status == 401


class TestContextManager:
    def test_close_closes_owned_session(self, api_key, mocker):
        with TMDBClient(api_key) as client:
            close = mocker.patch.object(client.session, "close")

        close.assert_called_once_with()

    def test_injected_session_is_not_closed(self, api_key, mocker):
        session = requests.Session()
        close = mocker.patch.object(session, "close")

        with TMDBClient(api_key, session=session):
            pass

        close.assert_not_called()


class TestFmtOptions:
    @pytest.mark.parametrize(
        ("options", "expected"),
        [
            ({"language": "pt-BR"}, "&language=pt-BR"),
            ({}, ""),
            (None, ""),
            ({"query": "Fight Club", "page": "2"}, "&query=Fight+Club&page=2"),
            ({"with_genres": "28,12"}, "&with_genres=28%2C12"),
        ],
    )
    def test_format(self, options, expected):
        assert fmt_options(options) == expected

    def test_available_on_client(self, client):
        assert client.fmt_options({"language": "en"}) == "&language=en"
