"""Request executor shared by every TMDB endpoint.

Each public endpoint method builds a URL and hands it to :meth:`_get` or
:meth:`_post` together with the type the JSON payload decodes into. This
module owns everything those two calls need: transport configuration,
the 429 retry loop, payload decoding and mapping of TMDB error envelopes
to :class:`~tmdbkit.shared.errors.APIError`.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Mapping
from functools import lru_cache, partial
from http import HTTPStatus
from typing import Any, NoReturn, TypeVar
from urllib.parse import quote_plus

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from tmdbkit.shared.constants import (
    TMDB,
    ContentTypes,
    HTTPHeaders,
    HTTPStatusCodes,
    NetworkConfig,
    TMDBErrorMessages,
    TMDBOperationNames,
)
from tmdbkit.shared.errors import (
    APIError,
    ErrorCode,
    ErrorContext,
    RateLimitExceededError,
    SecurityError,
    TMDBKitError,
    create_network_error,
    create_parsing_error,
    create_validation_error,
)
from tmdbkit.shared.logging import log_api_call, mask_credentials

from .models.base import ErrorResponse
from .retry import RetryPolicy

logger = logging.getLogger(__name__)

T = TypeVar("T")

Options = Mapping[str, str]


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _empty_value(response_type: Any) -> Any:
    """Default value of ``response_type`` for bodiless (204) answers."""
    if isinstance(response_type, type) and issubclass(response_type, BaseModel):
        return response_type()
    return _adapter(response_type).validate_python([])


def _status_text(response: requests.Response) -> str:
    try:
        return HTTPStatus(response.status_code).phrase
    except ValueError:
        return response.reason or ""


def fmt_options(options: Options | None) -> str:
    """Serialize call options into a query-string suffix.

    Every pair becomes ``&key=value``; values are URL-escaped, keys are
    passed through verbatim and never validated.

    Example:
        >>> fmt_options({"language": "pt-BR"})
        '&language=pt-BR'
        >>> fmt_options({})
        ''
    """
    if not options:
        return ""
    return "".join(f"&{key}={quote_plus(str(value))}" for key, value in options.items())


class RequestExecutor:
    """HTTP plumbing of the TMDB client.

    Args:
        api_key: TMDB v3 API key; must not be empty
        base_url: API root, without trailing slash
        session: ``requests.Session`` used as transport
        timeout: Request timeout in seconds; ``None`` means 10 seconds
        auto_retry: Retry automatically when TMDB answers 429
        retry_policy: Bounds of the automatic retry loop
        language: Default ``language`` option for calls that set none

    Raises:
        SecurityError: If ``api_key`` is empty
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = TMDB.API_BASE_URL,
        session: requests.Session | None = None,
        timeout: float | None = None,
        auto_retry: bool = False,
        retry_policy: RetryPolicy | None = None,
        language: str | None = None,
    ) -> None:
        if not api_key:
            raise SecurityError(
                ErrorCode.API_KEY_MISSING,
                TMDBErrorMessages.API_KEY_EMPTY,
                ErrorContext(operation=TMDBOperationNames.CLIENT_INIT),
            )

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.language = language

        self._lock = threading.Lock()
        self._owns_session = session is None
        self._session = session or self._default_session()
        self._timeout = timeout
        self._auto_retry = auto_retry
        self._retry_policy = retry_policy or RetryPolicy()

    @staticmethod
    def _default_session() -> requests.Session:
        session = requests.Session()
        session.headers[HTTPHeaders.ACCEPT] = "application/json"
        session.headers["User-Agent"] = NetworkConfig.USER_AGENT
        return session

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(api_key=****, base_url={self.base_url}, "
            f"auto_retry={self._auto_retry})"
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def session(self) -> requests.Session:
        return self._session

    @property
    def timeout(self) -> float | None:
        return self._timeout

    @property
    def auto_retry(self) -> bool:
        return self._auto_retry

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._retry_policy

    def set_client_config(
        self,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        """Replace the HTTP transport and/or its timeout.

        Must not be called while requests are in flight on this client.
        """
        with self._lock:
            if session is not None:
                if self._owns_session and session is not self._session:
                    self._session.close()
                self._session = session
                self._owns_session = False
            if timeout is not None:
                self._timeout = timeout

    def set_client_auto_retry(
        self,
        enabled: bool = True,
        policy: RetryPolicy | None = None,
    ) -> None:
        """Enable (or disable) automatic retries of rate-limited GET requests."""
        with self._lock:
            self._auto_retry = enabled
            if policy is not None:
                self._retry_policy = policy

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # URL building
    # ------------------------------------------------------------------

    fmt_options = staticmethod(fmt_options)

    def _url(self, path: str, options: Options | None = None) -> str:
        """Build the authenticated URL of ``path`` with ``options`` appended."""
        if self.language and not (options and "language" in options):
            options = {**(options or {}), "language": self.language}
        return (
            f"{self.base_url}{path}?{TMDB.API_KEY_PARAM}={self.api_key}"
            f"{fmt_options(options)}"
        )

    # ------------------------------------------------------------------
    # Request execution
    # ------------------------------------------------------------------

    def _send(
        self,
        method: str,
        url: str,
        payload: Any | None = None,
    ) -> requests.Response:
        with self._lock:
            session = self._session
            timeout = self._timeout or NetworkConfig.DEFAULT_TIMEOUT

        started = time.perf_counter()
        try:
            response = session.request(
                method,
                url,
                headers={HTTPHeaders.CONTENT_TYPE: ContentTypes.JSON},
                json=payload,
                timeout=timeout,
            )
        except requests.Timeout as e:
            raise create_network_error(
                TMDBErrorMessages.TIMEOUT.format(error=e),
                url=mask_credentials(url),
                operation=method.lower(),
                original_error=e,
                timeout=True,
            ) from e
        except requests.RequestException as e:
            raise create_network_error(
                TMDBErrorMessages.CONNECTION_FAILED.format(error=e),
                url=mask_credentials(url),
                operation=method.lower(),
                original_error=e,
            ) from e

        log_api_call(
            logger,
            url,
            method=method,
            status_code=response.status_code,
            duration_ms=(time.perf_counter() - started) * 1000,
        )
        return response

    def _retry_exhausted(self, url: str, attempts: int) -> NoReturn:
        raise RateLimitExceededError(
            TMDBErrorMessages.RETRY_BUDGET_EXHAUSTED.format(attempts=attempts),
            attempts=attempts,
            context=ErrorContext(
                operation=TMDBOperationNames.GET,
                url=mask_credentials(url),
                additional_data={"attempts": attempts},
            ),
        )

    def _get(self, url: str, response_type: type[T]) -> T:
        """Issue a GET request and decode the payload into ``response_type``.

        A ``204 No Content`` answer yields the default value of
        ``response_type``. When auto-retry is enabled, 429 answers are
        re-issued according to the retry policy.
        """
        if not url:
            raise create_validation_error(
                TMDBErrorMessages.URL_EMPTY,
                field="url",
                operation=TMDBOperationNames.GET,
            )

        send = partial(self._send, "GET", url)
        with self._lock:
            auto_retry = self._auto_retry
            policy = self._retry_policy

        if auto_retry:
            response = policy.retrying(partial(self._retry_exhausted, url))(send)
        else:
            response = send()

        if response.status_code == HTTPStatusCodes.NO_CONTENT:
            return _empty_value(response_type)
        if response.status_code != HTTPStatusCodes.OK:
            raise self.decode_error(response)
        return self._decode(response, response_type, TMDBOperationNames.GET)

    def _post(
        self,
        url: str,
        payload: Mapping[str, Any],
        response_type: type[T],
        success_status: int = HTTPStatusCodes.CREATED,
    ) -> T:
        """Issue a POST request with a JSON body.

        Rate-limited POST requests are never retried.
        """
        if not url:
            raise create_validation_error(
                TMDBErrorMessages.URL_EMPTY,
                field="url",
                operation=TMDBOperationNames.POST,
            )

        response = self._send("POST", url, dict(payload))
        if response.status_code != success_status:
            raise self.decode_error(response)
        return self._decode(response, response_type, TMDBOperationNames.POST)

    def _decode(
        self,
        response: requests.Response,
        response_type: type[T],
        operation: str,
    ) -> T:
        try:
            return _adapter(response_type).validate_json(response.content)
        except ValidationError as e:
            raise create_parsing_error(
                TMDBErrorMessages.DECODE_FAILED.format(error=e),
                url=mask_credentials(response.url or ""),
                operation=operation,
                original_error=e,
            ) from e

    def decode_error(self, response: requests.Response) -> TMDBKitError:
        """Map a non-success response to the error it represents.

        Returns:
            ``APIError`` for empty bodies and TMDB error envelopes,
            ``ParsingError`` for bodies that are not an error envelope
        """
        body = response.content or b""
        context = ErrorContext(
            operation=TMDBOperationNames.DECODE_ERROR,
            url=mask_credentials(response.url or ""),
            additional_data={"http_status": response.status_code},
        )

        if not body:
            return APIError(
                TMDBErrorMessages.EMPTY_ERROR_BODY.format(
                    status_code=response.status_code,
                    reason=_status_text(response),
                ),
                response.status_code,
                context=context,
            )

        try:
            envelope = ErrorResponse.model_validate_json(body)
        except ValidationError as e:
            return create_parsing_error(
                TMDBErrorMessages.UNDECODABLE_ERROR.format(
                    length=len(body),
                    body=body.decode("utf-8", errors="replace"),
                ),
                url=context.url,
                operation=TMDBOperationNames.DECODE_ERROR,
                original_error=e,
            )

        return APIError.from_response(envelope, response.status_code, context)
