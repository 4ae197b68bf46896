"""Test automatic recovery from TMDB rate limiting (HTTP 429)."""

from __future__ import annotations

from unittest.mock import Mock, call

import pytest
from helpers import make_response

from tmdbkit.services.tmdb.retry import RetryPolicy, is_rate_limited, parse_retry_after
from tmdbkit.shared.errors import APIError, ErrorCode, RateLimitExceededError

RATE_LIMITED = {
    "status_code": 25,
    "status_message": "Your request count (41) is over the allowed limit of 40.",
    "success": False,
}


def rate_limited(retry_after: str | None = None):
    headers = {"Retry-After": retry_after} if retry_after is not None else None
    return make_response(429, RATE_LIMITED, headers=headers)


class TestParseRetryAfter:
    def test_seconds(self):
        assert parse_retry_after(rate_limited("3"), default=5.0) == 3.0

    def test_missing_header_uses_default(self):
        assert parse_retry_after(rate_limited(), default=5.0) == 5.0

    def test_http_date_uses_default(self):
        response = rate_limited("Wed, 21 Oct 2015 07:28:00 GMT")

        assert parse_retry_after(response, default=5.0) == 5.0

    def test_garbage_uses_default(self):
        assert parse_retry_after(rate_limited("soon"), default=1.5) == 1.5

    def test_negative_is_clamped(self):
        assert parse_retry_after(rate_limited("-4"), default=5.0) == 0.0

    def test_is_rate_limited(self):
        assert is_rate_limited(rate_limited())
        assert not is_rate_limited(make_response(200, {}))


class TestRetryPolicy:
    def test_defaults(self):
        policy = RetryPolicy()

        assert policy.max_retries == 5
        assert policy.default_delay == 5.0
        assert policy.max_delay == 60.0

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"max_retries": -1}, "max_retries"),
            ({"default_delay": -1.0}, "delays"),
            ({"max_delay": -0.5}, "delays"),
        ],
    )
    def test_rejects_negative_values(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            RetryPolicy(**kwargs)

    def test_first_retry_waits_retry_after(self):
        policy = RetryPolicy(default_delay=5.0)

        assert policy.delay_for(1, rate_limited("2")) == 2.0

    def test_delay_grows_exponentially(self):
        policy = RetryPolicy(default_delay=1.0, multiplier=2.0, max_delay=60.0)

        delays = [policy.delay_for(attempt, rate_limited()) for attempt in (1, 2, 3, 4)]

        assert delays == [1.0, 2.0, 4.0, 8.0]

    def test_delay_is_capped(self):
        policy = RetryPolicy(max_delay=3.0)

        assert policy.delay_for(1, rate_limited("10")) == 3.0
        assert policy.delay_for(6, rate_limited("1")) == 3.0


class TestClientAutoRetry:
    @pytest.fixture
    def sleep(self) -> Mock:
        return Mock()

    @pytest.fixture
    def retrying_client(self, client, sleep):
        client.set_client_auto_retry(
            policy=RetryPolicy(max_retries=3, default_delay=1.0, max_delay=10.0, sleep=sleep),
        )
        return client

    def test_retry_after_header_is_honored(self, retrying_client, mock_request, sleep):
        mock_request.side_effect = [rate_limited("2"), make_response(200, {"id": 550})]

        movie = retrying_client.get_movie_details(550)

        assert movie.id == 550
        assert mock_request.call_count == 2
        sleep.assert_called_once_with(2.0)

    def test_default_delay_without_header(self, client, mock_request):
        sleep = Mock()
        client.set_client_auto_retry(policy=RetryPolicy(sleep=sleep))
        mock_request.side_effect = [rate_limited(), make_response(200, {})]

        client.get_movie_details(550)

        sleep.assert_called_once_with(5.0)

    def test_consecutive_429_back_off_exponentially(self, retrying_client, mock_request, sleep):
        mock_request.side_effect = [
            rate_limited(),
            rate_limited(),
            rate_limited(),
            make_response(200, {"id": 1}),
        ]

        retrying_client.get_movie_details(1)

        assert sleep.call_args_list == [call(1.0), call(2.0), call(4.0)]

    def test_budget_exhaustion_raises(self, retrying_client, mock_request, sleep):
        mock_request.return_value = rate_limited("1")

        with pytest.raises(RateLimitExceededError) as exc_info:
            retrying_client.get_movie_details(550)

        error = exc_info.value
        assert error.attempts == 4
        assert error.code == ErrorCode.TMDB_API_RATE_LIMIT_EXCEEDED
        assert "retry budget exhausted after 4 attempts" in error.message
        assert "api_key=****" in (error.context.url or "")
        assert mock_request.call_count == 4
        assert sleep.call_count == 3

    def test_zero_retries_fails_on_first_429(self, client, mock_request):
        sleep = Mock()
        client.set_client_auto_retry(policy=RetryPolicy(max_retries=0, sleep=sleep))
        mock_request.return_value = rate_limited()

        with pytest.raises(RateLimitExceededError) as exc_info:
            client.get_movie_details(550)

        assert exc_info.value.attempts == 1
        sleep.assert_not_called()

    def test_other_errors_are_not_retried(self, retrying_client, mock_request, sleep):
        mock_request.return_value = make_response(
            404,
            {"status_code": 34, "status_message": "The resource you requested could not be found."},
        )

        with pytest.raises(APIError):
            retrying_client.get_movie_details(0)

        assert mock_request.call_count == 1
        sleep.assert_not_called()

    def test_disabled_retry_surfaces_429(self, client, mock_request):
        mock_request.return_value = rate_limited("1")

        with pytest.raises(APIError) as exc_info:
            client.get_movie_details(550)

        assert exc_info.value.http_status == 429
        assert exc_info.value.code == ErrorCode.TMDB_API_RATE_LIMIT_EXCEEDED
        assert mock_request.call_count == 1

    def test_post_is_never_retried(self, retrying_client, mock_request, sleep):
        mock_request.return_value = rate_limited("1")

        with pytest.raises(APIError) as exc_info:
            retrying_client.rate_movie(550, 7.0)

        assert exc_info.value.http_status == 429
        assert mock_request.call_count == 1
        sleep.assert_not_called()
