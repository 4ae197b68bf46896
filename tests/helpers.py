"""Helpers for building fake TMDB responses in tests."""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any
from unittest.mock import Mock

import requests


def make_response(
    status_code: int = 200,
    json_data: Any = None,
    *,
    body: bytes | None = None,
    headers: dict[str, str] | None = None,
    url: str = "https://api.themoviedb.org/3/test?api_key=secret",
) -> requests.Response:
    """Build a ``requests.Response`` as the transport would return it."""
    response = requests.Response()
    response.status_code = status_code
    if body is None and json_data is not None:
        body = json.dumps(json_data).encode("utf-8")
    response._content = body or b""
    response.headers.update(headers or {})
    response.url = url
    try:
        response.reason = HTTPStatus(status_code).phrase
    except ValueError:
        response.reason = ""
    response.encoding = "utf-8"
    return response


def requested_url(mock: Mock, call_index: int = -1) -> str:
    """Return the URL passed to a patched ``session.request``."""
    return mock.call_args_list[call_index].args[1]
