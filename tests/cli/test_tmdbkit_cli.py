"""Tests for the tmdbkit command line interface."""

from __future__ import annotations

import json
import logging

import pytest
from helpers import make_response, requested_url
from pydantic import ValidationError
from typer.testing import CliRunner

from tmdbkit import __version__
from tmdbkit.cli.options import parse_request_options
from tmdbkit.cli.typer_app import app
from tmdbkit.shared.errors import DomainError

NOT_FOUND = {
    "success": False,
    "status_code": 34,
    "status_message": "The resource you requested could not be found.",
}


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def transport(mocker):
    """Patch every session created by the CLI."""
    return mocker.patch(
        "requests.Session.request",
        return_value=make_response(200, {"id": 550, "title": "Fight Club"}),
    )


@pytest.fixture(autouse=True)
def _api_key(monkeypatch):
    monkeypatch.setenv("TMDB_API_KEY", "env-key")


class TestParseRequestOptions:
    def test_pairs_and_language(self):
        assert parse_request_options(["page=2", "append_to_response=credits"], "pt-BR") == {
            "page": "2",
            "append_to_response": "credits",
            "language": "pt-BR",
        }

    def test_value_may_contain_equals(self):
        assert parse_request_options(["query=a=b"]) == {"query": "a=b"}

    @pytest.mark.parametrize("pair", ["page", "=2"])
    def test_malformed_pair(self, pair):
        with pytest.raises(DomainError):
            parse_request_options([pair])


class TestCommands:
    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_movie(self, runner, transport):
        result = runner.invoke(app, ["movie", "550"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["title"] == "Fight Club"
        assert "/3/movie/550?api_key=env-key" in requested_url(transport)

    def test_options_and_language(self, runner, transport):
        result = runner.invoke(
            app,
            ["movie", "550", "--option", "append_to_response=credits", "--language", "pt-BR"],
        )

        assert result.exit_code == 0, result.output
        assert requested_url(transport).endswith("&append_to_response=credits&language=pt-BR")

    def test_api_key_option_wins(self, runner, transport):
        result = runner.invoke(app, ["--api-key", "cli-key", "tv", "1399"])

        assert result.exit_code == 0, result.output
        assert "/3/tv/1399?api_key=cli-key" in requested_url(transport)

    def test_season(self, runner, transport):
        transport.return_value = make_response(200, {"name": "1ª Temporada", "season_number": 1})

        result = runner.invoke(app, ["season", "1399", "1", "-l", "pt-BR"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["name"] == "1ª Temporada"
        assert "/3/tv/1399/season/1?" in requested_url(transport)

    def test_episode(self, runner, transport):
        result = runner.invoke(app, ["episode", "1399", "1", "2"])

        assert result.exit_code == 0, result.output
        assert "/3/tv/1399/season/1/episode/2?" in requested_url(transport)

    def test_person(self, runner, transport):
        result = runner.invoke(app, ["person", "287"])

        assert result.exit_code == 0, result.output
        assert "/3/person/287?" in requested_url(transport)

    def test_search(self, runner, transport):
        transport.return_value = make_response(200, {"page": 1, "results": [{"id": 1399}]})

        result = runner.invoke(app, ["search", "game of thrones", "--type", "tv"])

        assert result.exit_code == 0, result.output
        url = requested_url(transport)
        assert "/3/search/tv?" in url
        assert "&query=game+of+thrones" in url
        assert json.loads(result.stdout)["results"][0]["id"] == 1399

    def test_genres(self, runner, transport):
        transport.return_value = make_response(200, {"genres": [{"id": 10765, "name": "Sci-Fi & Fantasy"}]})

        result = runner.invoke(app, ["genres", "--type", "tv"])

        assert result.exit_code == 0, result.output
        assert "/3/genre/tv/list?" in requested_url(transport)
        assert json.loads(result.stdout)["genres"][0]["name"] == "Sci-Fi & Fantasy"

    def test_auto_retry(self, runner, transport, monkeypatch):
        monkeypatch.setenv("TMDB_RETRY_DELAY", "0")
        transport.side_effect = [
            make_response(429, {"status_code": 25, "status_message": "limit"}),
            make_response(200, {"id": 550}),
        ]

        result = runner.invoke(app, ["--auto-retry", "movie", "550"])

        assert result.exit_code == 0, result.output
        assert transport.call_count == 2


class TestErrors:
    def test_api_error_exits_with_one(self, runner, transport):
        transport.return_value = make_response(404, NOT_FOUND)

        result = runner.invoke(app, ["movie", "0"])

        assert result.exit_code == 1
        assert "The resource you requested could not be found." in result.output

    def test_missing_api_key(self, runner, transport, monkeypatch):
        monkeypatch.delenv("TMDB_API_KEY")

        result = runner.invoke(app, ["movie", "550"])

        assert result.exit_code == 1
        assert "APIKey is empty" in result.output
        transport.assert_not_called()

    def test_malformed_option(self, runner, transport):
        result = runner.invoke(app, ["movie", "550", "--option", "page"])

        assert result.exit_code == 1
        assert "expected KEY=VALUE" in result.output
        transport.assert_not_called()

    def test_json_errors(self, runner, transport):
        transport.return_value = make_response(404, NOT_FOUND)

        result = runner.invoke(app, ["--log-level", "CRITICAL", "--json-errors", "movie", "0"])

        assert result.exit_code == 1
        document = json.loads(result.stdout)
        assert document["success"] is False
        assert document["command"] == "movie"
        assert document["errors"] == ["The resource you requested could not be found."]
        assert document["data"]["context"]["error_code"] == "TMDB_API_MEDIA_NOT_FOUND"
        assert document["data"]["context"]["http_status"] == 404


class TestLoggingConfiguration:
    def test_level_from_environment(self, runner, transport, monkeypatch):
        monkeypatch.setenv("TMDBKIT_LOG_LEVEL", "debug")

        result = runner.invoke(app, ["movie", "550"])

        assert result.exit_code == 0, result.output
        assert logging.getLogger("tmdbkit").level == logging.DEBUG

    def test_level_option_beats_environment(self, runner, transport, monkeypatch):
        monkeypatch.setenv("TMDBKIT_LOG_LEVEL", "DEBUG")

        result = runner.invoke(app, ["--log-level", "ERROR", "movie", "550"])

        assert result.exit_code == 0, result.output
        assert logging.getLogger("tmdbkit").level == logging.ERROR

    def test_default_level_is_warning(self, runner, transport):
        result = runner.invoke(app, ["movie", "550"])

        assert result.exit_code == 0, result.output
        assert logging.getLogger("tmdbkit").level == logging.WARNING

    @pytest.mark.parametrize(
        ("variable", "value", "field"),
        [
            ("TMDBKIT_LOG_RICH_CONSOLE", "maybe", "rich_console"),
            ("TMDBKIT_LOG_LEVEL", "verbose", "level"),
        ],
    )
    def test_invalid_setting_is_a_config_error(
        self,
        runner,
        transport,
        monkeypatch,
        variable,
        value,
        field,
    ):
        monkeypatch.setenv(variable, value)

        result = runner.invoke(app, ["movie", "550"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, ValidationError)
        assert f"Invalid configuration: {field}" in result.output
        transport.assert_not_called()

    def test_unwritable_log_file_is_a_config_error(self, runner, transport, monkeypatch, tmp_path):
        log_file = tmp_path / "missing" / "tmdbkit.log"
        monkeypatch.setenv("TMDBKIT_LOG_FILE", str(log_file))

        result = runner.invoke(app, ["movie", "550"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, OSError)
        assert f"Cannot open log file {log_file}" in result.output
        transport.assert_not_called()

    def test_config_error_as_json(self, runner, transport, monkeypatch):
        monkeypatch.setenv("TMDBKIT_LOG_RICH_CONSOLE", "maybe")

        result = runner.invoke(app, ["--json-errors", "movie", "550"])

        assert result.exit_code == 1
        # Log records of the failed setup may precede the document on a shared stream.
        document = json.loads(result.stdout[result.stdout.index('{\n  "success"') :])
        assert document["success"] is False
        assert document["data"]["error_code"] == "CONFIG_INVALID"
