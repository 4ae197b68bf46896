"""Retry policy for rate-limited (HTTP 429) TMDB requests.

TMDB signals rate limiting with status 429 and usually a ``Retry-After``
header carrying the number of seconds to wait. The policy honours that
header, grows the delay exponentially on consecutive 429 answers and caps
both the single delay and the number of re-issued requests.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, NoReturn

import requests
from tenacity import RetryCallState, Retrying, retry_if_result, stop_after_attempt

from tmdbkit.shared.constants import HTTPHeaders, HTTPStatusCodes, NetworkConfig

logger = logging.getLogger(__name__)


def parse_retry_after(response: requests.Response, default: float) -> float:
    """Return the ``Retry-After`` delay of ``response`` in seconds.

    Only the delta-seconds form is understood; a missing header or any
    other value (HTTP dates included) falls back to ``default``.
    """
    retry_after = response.headers.get(HTTPHeaders.RETRY_AFTER)
    if not retry_after:
        return default
    try:
        return float(max(0, int(retry_after.strip())))
    except ValueError:
        logger.debug("Unparseable Retry-After header %r, using %.1fs", retry_after, default)
        return default


def is_rate_limited(response: requests.Response) -> bool:
    return response.status_code == HTTPStatusCodes.TOO_MANY_REQUESTS


class RetryPolicy:
    """Bounded retry policy with capped exponential backoff.

    Args:
        max_retries: Maximum number of re-issued requests after the first 429
        default_delay: Base delay when ``Retry-After`` is absent or unparseable
        max_delay: Upper bound for a single sleep
        multiplier: Growth factor applied per consecutive 429
        sleep: Sleep function, replaceable in tests
    """

    def __init__(
        self,
        max_retries: int = NetworkConfig.DEFAULT_RETRIES,
        default_delay: float = NetworkConfig.RETRY_DELAY,
        max_delay: float = NetworkConfig.MAX_RETRY_DELAY,
        multiplier: float = NetworkConfig.BACKOFF_MULTIPLIER,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got: {max_retries}")
        if default_delay < 0 or max_delay < 0:
            raise ValueError("retry delays must be >= 0")
        self.max_retries = max_retries
        self.default_delay = default_delay
        self.max_delay = max_delay
        self.multiplier = multiplier
        self.sleep = sleep

    def __repr__(self) -> str:
        return (
            f"RetryPolicy(max_retries={self.max_retries}, "
            f"default_delay={self.default_delay}, max_delay={self.max_delay})"
        )

    def delay_for(self, attempt: int, response: requests.Response) -> float:
        """Delay before re-issuing a request after the ``attempt``-th 429.

        ``attempt`` starts at 1: the first retry waits exactly the
        ``Retry-After`` value, later ones grow by ``multiplier``.
        """
        base = parse_retry_after(response, self.default_delay)
        delay = base * (self.multiplier ** max(0, attempt - 1))
        return min(delay, self.max_delay)

    def _wait(self, retry_state: RetryCallState) -> float:
        response = retry_state.outcome.result()
        return self.delay_for(retry_state.attempt_number, response)

    def _before_sleep(self, retry_state: RetryCallState) -> None:
        logger.info(
            "TMDB API rate limit hit, retrying in %.1fs (attempt %d/%d)",
            retry_state.next_action.sleep if retry_state.next_action else 0.0,
            retry_state.attempt_number,
            self.max_retries,
        )

    def retrying(self, on_exhausted: Callable[[int], NoReturn]) -> Retrying:
        """Build a tenacity controller re-issuing calls that answer 429.

        Exceptions raised by the wrapped call are never retried.
        ``on_exhausted`` receives the number of attempts made and must raise.
        """
        return Retrying(
            stop=stop_after_attempt(self.max_retries + 1),
            wait=self._wait,
            retry=retry_if_result(is_rate_limited),
            sleep=self.sleep,
            before_sleep=self._before_sleep,
            retry_error_callback=lambda state: on_exhausted(state.attempt_number),
        )
