from __future__ import annotations

from dataclasses import dataclass

from tmdbkit.client.client import TmdbClient
from tmdbkit.options.discover import DiscoverMoviesBuilder, DiscoverTVBuilder


@dataclass(frozen=True)
class Discover:
    client: TmdbClient

    def movies(self) -> DiscoverMoviesBuilder:
        return DiscoverMoviesBuilder(self.client)

    def tv(self) -> DiscoverTVBuilder:
        return DiscoverTVBuilder(self.client)
