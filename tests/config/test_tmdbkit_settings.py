"""Tests for environment driven settings."""

from __future__ import annotations

import pytest

from tmdbkit import TMDBClient
from tmdbkit.config import LoggingSettings, TMDBSettings, load_logging_settings, load_settings
from tmdbkit.shared.errors import ApplicationError, ErrorCode


class TestTMDBSettings:
    def test_defaults(self):
        settings = TMDBSettings()

        assert settings.api_key == ""
        assert settings.base_url == "https://api.themoviedb.org/3"
        assert settings.timeout == 10
        assert settings.language is None
        assert settings.auto_retry is False
        assert settings.max_retries == 5
        assert settings.retry_delay == 5.0
        assert settings.max_retry_delay == 60.0

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("TMDB_API_KEY", "env-key")
        monkeypatch.setenv("TMDB_LANGUAGE", "pt-BR")
        monkeypatch.setenv("TMDB_AUTO_RETRY", "true")
        monkeypatch.setenv("TMDB_MAX_RETRIES", "2")

        settings = TMDBSettings()

        assert settings.api_key == "env-key"
        assert settings.language == "pt-BR"
        assert settings.auto_retry is True
        assert settings.max_retries == 2

    def test_repr_masks_api_key(self):
        settings = TMDBSettings(api_key="super-secret")

        assert "super-secret" not in repr(settings)
        assert "api_key=****" in repr(settings)


class TestLoggingSettings:
    def test_defaults_and_environment(self, monkeypatch):
        assert LoggingSettings().level == "WARNING"

        monkeypatch.setenv("TMDBKIT_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("TMDBKIT_LOG_RICH_CONSOLE", "false")

        settings = LoggingSettings()
        assert settings.level == "DEBUG"
        assert settings.rich_console is False

    def test_level_is_normalized(self):
        assert LoggingSettings(level=" info ").level == "INFO"

    def test_unknown_level_is_rejected(self, monkeypatch):
        monkeypatch.setenv("TMDBKIT_LOG_LEVEL", "verbose")

        with pytest.raises(ApplicationError) as exc_info:
            load_logging_settings()

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID
        assert exc_info.value.message == "Invalid configuration: level"
        assert exc_info.value.context.operation == "load_logging_settings"

    def test_invalid_flag_raises_config_error(self, monkeypatch):
        monkeypatch.setenv("TMDBKIT_LOG_RICH_CONSOLE", "maybe")

        with pytest.raises(ApplicationError) as exc_info:
            load_logging_settings()

        assert "rich_console" in exc_info.value.message


class TestLoadSettings:
    def test_overrides_win_over_environment(self, monkeypatch):
        monkeypatch.setenv("TMDB_API_KEY", "env-key")

        settings = load_settings(api_key="cli-key")

        assert settings.tmdb.api_key == "cli-key"

    def test_none_overrides_fall_back_to_environment(self, monkeypatch):
        monkeypatch.setenv("TMDB_API_KEY", "env-key")

        settings = load_settings(api_key=None, auto_retry=None)

        assert settings.tmdb.api_key == "env-key"
        assert settings.tmdb.auto_retry is False

    def test_invalid_value_raises_config_error(self, monkeypatch):
        monkeypatch.setenv("TMDB_TIMEOUT", "soon")

        with pytest.raises(ApplicationError) as exc_info:
            load_settings()

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID
        assert "timeout" in exc_info.value.message


class TestClientFromSettings:
    def test_builds_configured_client(self):
        settings = TMDBSettings(
            api_key="k",
            base_url="http://localhost/3",
            timeout=4,
            language="de",
            auto_retry=True,
            max_retries=1,
            retry_delay=0.5,
            max_retry_delay=2,
        )

        client = TMDBClient.from_settings(settings)

        assert client.base_url == "http://localhost/3"
        assert client.timeout == 4
        assert client.language == "de"
        assert client.auto_retry is True
        assert client.retry_policy.max_retries == 1
        assert client.retry_policy.default_delay == 0.5
        assert client.retry_policy.max_delay == 2
