"""Exceptions raised by the TMDB client.

Every failure reaches the caller as a `TmdbError` subclass. Nothing here is
retried or swallowed; each failed call is independent and leaves the shared
client untouched.
"""

from __future__ import annotations


class TmdbError(Exception):
    """Base class for all tmdbkit errors."""


class ConfigurationError(TmdbError):
    """The client was constructed with unusable settings."""


class ValidationError(TmdbError):
    """A builder precondition failed before any request was made."""


class EncodingError(TmdbError):
    """An option record could not be turned into query parameters."""


class TransportError(TmdbError):
    """The HTTP exchange itself failed (DNS, refused connection, ...).

    Attributes:
        cause: The underlying requests exception.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class RequestTimeoutError(TransportError):
    """The request did not complete within the configured timeout."""


class APIError(TmdbError):
    """TMDB answered with a non-2xx status.

    Attributes:
        status_code: The HTTP status code of the response.
        message: TMDB's status_message, or a raw-body fallback.
        tmdb_status_code: TMDB's own numeric error code, when decoded.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        tmdb_status_code: int | None = None,
    ):
        super().__init__(f"tmdb: API error (HTTP {status_code}): {message}")
        self.status_code = status_code
        self.message = message
        self.tmdb_status_code = tmdb_status_code

    def is_status(self, status_code: int) -> bool:
        return self.status_code == status_code


class DecodingError(TmdbError):
    """A 2xx body did not match the expected response model.

    Attributes:
        target: Name of the model the body was decoded into.
        body: The raw response text.
    """

    def __init__(self, target: str, body: str, cause: BaseException | None = None):
        super().__init__(
            f"tmdb: failed to decode response body into {target}: {cause}\nBody: {body}"
        )
        self.target = target
        self.body = body
        self.cause = cause
