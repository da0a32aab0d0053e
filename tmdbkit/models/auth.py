"""
Authentication request/response schemas.

Flow (caller-driven): request token -> user approval / validate_with_login
-> session. Guest sessions skip the user step.
"""

from __future__ import annotations

from tmdbkit.models.common import TmdbModel


class RequestTokenResponse(TmdbModel):
    success: bool = False
    expires_at: str = ""  # e.g. "2024-01-01 12:00:00 UTC"
    request_token: str = ""


class GuestSessionResponse(TmdbModel):
    success: bool = False
    guest_session_id: str = ""
    expires_at: str = ""


class SessionResponse(TmdbModel):
    success: bool = False
    session_id: str = ""


class CreateSessionRequest(TmdbModel):
    request_token: str


class ValidateWithLoginRequest(TmdbModel):
    username: str
    password: str
    request_token: str


class ConvertV4TokenRequest(TmdbModel):
    access_token: str


class DeleteSessionRequest(TmdbModel):
    session_id: str
