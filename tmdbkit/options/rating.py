"""Builder for account-state and rating endpoints.

Without `for_guest()` TMDB authorizes these calls with the client's bearer
token. With it, the call must carry a `session_id` or a `guest_session_id`
and the builder refuses to run without one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from pydantic import BaseModel, Field

from tmdbkit.client.errors import ValidationError
from tmdbkit.client.params import OptionRecord
from tmdbkit.options.base import RequestBuilder, T

if TYPE_CHECKING:
    from tmdbkit.client.client import TmdbClient


class SessionOptions(OptionRecord):
    for_guest: bool = Field(default=False, exclude=True)
    session_id: str | None = None
    guest_session_id: str | None = None


class StateSessionBuilder(RequestBuilder[T]):
    options: SessionOptions

    def __init__(
        self,
        client: "TmdbClient",
        path: str,
        method: str,
        response_model: type[T],
        body: BaseModel | dict[str, Any] | None = None,
    ):
        super().__init__(
            client, method, path, response_model, body=body, options=SessionOptions()
        )

    def for_guest(self) -> Self:
        """Authorizes with a session id instead of the bearer token."""
        self.options.for_guest = True
        return self

    def session_id(self, session_id: str) -> Self:
        self.options.session_id = session_id
        return self

    def guest_session_id(self, guest_session_id: str) -> Self:
        self.options.guest_session_id = guest_session_id
        return self

    def _validate(self) -> None:
        opts = self.options
        if opts.for_guest and opts.session_id is None and opts.guest_session_id is None:
            raise ValidationError(
                f"either session_id or guest_session_id is required for {self.method} {self.path}"
            )
