"""Thin HTTP client for the TMDB API.

This module is the only place that performs network I/O. It resolves the
request URL, applies the auth scheme implied by the base URL, encodes query
parameters, sends the request, and turns the response into a typed model or
a `TmdbError`.

Auth modes:
- v3 base URL (default): ``api_key`` is added to every query string.
- v4 base URL (path starts with ``/4``): bearer token only, never api_key.
The bearer token header is sent whenever a token is configured, since some
v3 endpoints accept it as well.
"""

import logging
import time
from typing import Any, TypeVar
from urllib.parse import urlparse

import requests
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from tmdbkit.client.errors import (
    APIError,
    ConfigurationError,
    DecodingError,
    RequestTimeoutError,
    TransportError,
)
from tmdbkit.client.params import to_query_string
from tmdbkit.config.tmdb_settings import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    TmdbSettings,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class _ErrorBody(BaseModel):
    status_code: int = 0
    status_message: str = ""


class TmdbClient:
    """Client for executing requests against the TMDB API.

    The client is immutable after construction and can be shared by any
    number of builders.

    Attributes:
        session (requests.Session): Session used for every request.
        base_url (str): The root URL for the TMDB service.
        timeout (float): Per-request timeout in seconds.
        user_agent (str): User-Agent header value.
        is_v4 (bool): Whether base_url points at the v4 API.
    """

    def __init__(
        self,
        api_key: str,
        bearer_token: str = "",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: requests.Session | None = None,
    ):
        """Initializes the TmdbClient.

        Args:
            api_key: TMDB v3 API key.
            bearer_token: TMDB read access token. Required for v4 base URLs.
            base_url: The base URL for the API.
            timeout: Request timeout in seconds.
            user_agent: Value of the User-Agent header.
            session: Optional pre-configured requests session.

        Raises:
            ConfigurationError: If the key is missing, the base URL is not
                absolute, or a v4 base URL is used without a bearer token.
        """

        if not api_key:
            raise ConfigurationError("tmdb: api_key is required")

        parsed = urlparse(base_url or DEFAULT_BASE_URL)
        if not parsed.scheme or not parsed.netloc:
            raise ConfigurationError(f"tmdb: invalid base URL {base_url!r}")

        self.is_v4 = parsed.path.startswith("/4")
        if self.is_v4 and not bearer_token:
            raise ConfigurationError(
                "tmdb: bearer_token is required for v4 API base URL"
            )

        self._api_key = api_key
        self._bearer_token = bearer_token
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout or DEFAULT_TIMEOUT
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.session = session or requests.Session()

        logger.info(
            "TMDB_CLIENT_INIT base_url=%s v4=%s timeout=%s",
            self.base_url,
            self.is_v4,
            self.timeout,
        )

    @classmethod
    def from_settings(cls, settings: TmdbSettings | None = None) -> "TmdbClient":
        """Builds a client from `TmdbSettings` (environment / .env)."""
        settings = settings or TmdbSettings()
        return cls(
            api_key=settings.api_key,
            bearer_token=settings.bearer_token,
            base_url=settings.base_url,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "TmdbClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _headers(self, has_body: bool) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        if self._bearer_token:
            headers["Authorization"] = f"Bearer {self._bearer_token}"
        return headers

    def build_url(self, path: str, params: dict[str, str] | None = None) -> str:
        """Resolves the absolute request URL, auth query parameter included.

        Args:
            path: The API path (e.g., '/movie/550').
            params: Encoded query parameters.

        Returns:
            str: The full URL with its query string.
        """

        query = dict(params or {})
        if not self.is_v4:
            query["api_key"] = self._api_key

        url = f"{self.base_url}{path}"
        if query:
            url = f"{url}?{to_query_string(query)}"
        return url

    @staticmethod
    def _api_error(response: requests.Response) -> APIError:
        try:
            decoded = _ErrorBody.model_validate_json(response.text)
        except PydanticValidationError:
            decoded = None

        if decoded is not None and decoded.status_message:
            return APIError(
                response.status_code,
                decoded.status_message,
                tmdb_status_code=decoded.status_code,
            )

        return APIError(
            response.status_code,
            f"unexpected status code {response.status_code} with body: {response.text}",
        )

    def execute(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        body: BaseModel | dict | None = None,
        response_model: type[M] | None = None,
    ) -> M | None:
        """Performs one request and decodes the response.

        Args:
            method: HTTP method (e.g., 'GET', 'POST', 'DELETE').
            path: API path, resource IDs already substituted.
            params: Encoded query parameters.
            body: Request payload, sent as JSON when not None.
            response_model: Model the 2xx body is decoded into. When None
                the body is ignored.

        Returns:
            The decoded model, or None when no response_model was given.

        Raises:
            RequestTimeoutError: If the request timed out.
            TransportError: If the request failed before a response arrived.
            APIError: If TMDB answered with a non-2xx status.
            DecodingError: If a 2xx body does not fit response_model.
        """

        url = self.build_url(path, params)

        payload = None
        if body is not None:
            if isinstance(body, BaseModel):
                payload = body.model_dump(mode="json", by_alias=True)
            else:
                payload = body

        start_ts = time.perf_counter()

        try:
            logger.debug(
                "TMDB_REQUEST_START method=%s path=%s params=%s",
                method,
                path,
                params,
            )
            response = self.session.request(
                method,
                url,
                json=payload,
                headers=self._headers(payload is not None),
                timeout=self.timeout,
            )

        except requests.exceptions.Timeout as e:
            duration = (time.perf_counter() - start_ts) * 1000
            logger.error(
                "TMDB_REQUEST_FAILED method=%s path=%s latency_ms=%.2f error=timeout",
                method,
                path,
                duration,
            )
            raise RequestTimeoutError(f"tmdb: request timed out: {e}", cause=e) from e

        except requests.exceptions.RequestException as e:
            duration = (time.perf_counter() - start_ts) * 1000
            logger.error(
                "TMDB_REQUEST_FAILED method=%s path=%s latency_ms=%.2f error=%s",
                method,
                path,
                duration,
                str(e),
            )
            raise TransportError(f"tmdb: request failed: {e}", cause=e) from e

        duration = (time.perf_counter() - start_ts) * 1000

        if not 200 <= response.status_code < 300:
            error = self._api_error(response)
            logger.warning(
                "TMDB_API_ERROR method=%s path=%s status=%s latency_ms=%.2f message=%s",
                method,
                path,
                response.status_code,
                duration,
                error.message,
            )
            raise error

        logger.info(
            "TMDB_REQUEST_SUCCESS method=%s path=%s status=%s latency_ms=%.2f",
            method,
            path,
            response.status_code,
            duration,
        )

        if response_model is None:
            return None

        try:
            return response_model.model_validate_json(response.text)
        except PydanticValidationError as e:
            raise DecodingError(response_model.__name__, response.text, cause=e) from e
