from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from tmdbkit.options.base import RequestBuilder, T

if TYPE_CHECKING:
    from tmdbkit.client.client import TmdbClient


class AuthBuilder(RequestBuilder[T]):
    """For /authentication endpoints. They take a JSON body, no parameters.

    A body given for a GET endpoint is dropped.
    """

    def __init__(
        self,
        client: "TmdbClient",
        path: str,
        method: str,
        response_model: type[T],
        body: BaseModel | dict[str, Any] | None = None,
    ):
        if method == "GET":
            body = None
        super().__init__(client, method, path, response_model, body=body)
