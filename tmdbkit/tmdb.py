"""Entry point bundling the endpoint groups around one shared client.

    tmdb = Tmdb.from_settings()
    page = tmdb.movies.popular().language("en-US").page(2).execute()
"""

from __future__ import annotations

from typing import Any

from tmdbkit.client.client import TmdbClient
from tmdbkit.config.tmdb_settings import TmdbSettings
from tmdbkit.endpoints.auth import Auth
from tmdbkit.endpoints.discover import Discover
from tmdbkit.endpoints.movies import Movies
from tmdbkit.endpoints.search import Search
from tmdbkit.endpoints.tv import TV


class Tmdb:
    def __init__(self, client: TmdbClient):
        self.client = client
        self.movies = Movies(client)
        self.tv = TV(client)
        self.search = Search(client)
        self.discover = Discover(client)
        self.auth = Auth(client)

    @classmethod
    def from_settings(cls, settings: TmdbSettings | None = None) -> "Tmdb":
        return cls(TmdbClient.from_settings(settings))

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "Tmdb":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
