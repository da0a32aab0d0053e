"""Authentication endpoints.

Sequencing is left to the caller: create a request token, have the user
approve it (or call validate_with_login), then exchange it for a session.
"""

from __future__ import annotations

from dataclasses import dataclass

from tmdbkit.client.client import TmdbClient
from tmdbkit.models.auth import (
    ConvertV4TokenRequest,
    CreateSessionRequest,
    DeleteSessionRequest,
    GuestSessionResponse,
    RequestTokenResponse,
    SessionResponse,
    ValidateWithLoginRequest,
)
from tmdbkit.models.common import StatusResponse
from tmdbkit.options.auth import AuthBuilder


@dataclass(frozen=True)
class Auth:
    client: TmdbClient

    def create_request_token(self) -> AuthBuilder[RequestTokenResponse]:
        return AuthBuilder(
            self.client, "/authentication/token/new", "GET", RequestTokenResponse
        )

    def create_guest_session(self) -> AuthBuilder[GuestSessionResponse]:
        return AuthBuilder(
            self.client,
            "/authentication/guest_session/new",
            "GET",
            GuestSessionResponse,
        )

    def create_session(
        self, body: CreateSessionRequest
    ) -> AuthBuilder[SessionResponse]:
        return AuthBuilder(
            self.client,
            "/authentication/session/new",
            "POST",
            SessionResponse,
            body=body,
        )

    def validate_with_login(
        self, body: ValidateWithLoginRequest
    ) -> AuthBuilder[RequestTokenResponse]:
        return AuthBuilder(
            self.client,
            "/authentication/token/validate_with_login",
            "POST",
            RequestTokenResponse,
            body=body,
        )

    def create_session_from_v4(
        self, body: ConvertV4TokenRequest
    ) -> AuthBuilder[SessionResponse]:
        return AuthBuilder(
            self.client,
            "/authentication/session/convert/4",
            "POST",
            SessionResponse,
            body=body,
        )

    def delete_session(self, body: DeleteSessionRequest) -> AuthBuilder[StatusResponse]:
        return AuthBuilder(
            self.client,
            "/authentication/session",
            "DELETE",
            StatusResponse,
            body=body,
        )
