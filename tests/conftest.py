"""
Pytest configuration and shared fixtures for tmdbkit tests.

HTTP traffic is never sent: tests patch ``session.request`` of the client
and hand back real ``requests.Response`` objects built by
:func:`helpers.make_response`.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from unittest.mock import Mock

import pytest
from helpers import make_response

from tmdbkit import TMDBClient

TEST_API_KEY = "test_api_key_for_ci_testing_only"  # pragma: allowlist secret


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer TMDB_* variables out of the tests."""
    for name in (
        "TMDB_API_KEY",
        "TMDB_BASE_URL",
        "TMDB_TIMEOUT",
        "TMDB_LANGUAGE",
        "TMDB_AUTO_RETRY",
        "TMDB_MAX_RETRIES",
        "TMDB_RETRY_DELAY",
        "TMDB_MAX_RETRY_DELAY",
        "TMDBKIT_LOG_LEVEL",
        "TMDBKIT_LOG_FILE",
        "TMDBKIT_LOG_RICH_CONSOLE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture
def client(api_key: str) -> Generator[TMDBClient, None, None]:
    """Client with a real session whose ``request`` is patched by tests."""
    tmdb = TMDBClient(api_key)
    yield tmdb
    tmdb.close()


@pytest.fixture
def mock_request(client: TMDBClient, mocker) -> Mock:
    """Patch the client transport; answers 200 with an empty object by default."""
    return mocker.patch.object(
        client.session,
        "request",
        return_value=make_response(200, {}),
    )


@pytest.fixture(autouse=True)
def _reset_tmdbkit_logger() -> Generator[None, None, None]:
    """Undo handlers installed by the CLI's logging setup."""
    yield
    logger = logging.getLogger("tmdbkit")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
