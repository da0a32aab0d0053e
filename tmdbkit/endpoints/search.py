from __future__ import annotations

from dataclasses import dataclass

from tmdbkit.client.client import TmdbClient
from tmdbkit.options.search import (
    SearchCollectionsBuilder,
    SearchCompaniesBuilder,
    SearchKeywordsBuilder,
    SearchMoviesBuilder,
    SearchMultiBuilder,
    SearchPeopleBuilder,
    SearchTVBuilder,
)


@dataclass(frozen=True)
class Search:
    client: TmdbClient

    def movies(self, query: str) -> SearchMoviesBuilder:
        return SearchMoviesBuilder(self.client, query)

    def tv(self, query: str) -> SearchTVBuilder:
        return SearchTVBuilder(self.client, query)

    def multi(self, query: str) -> SearchMultiBuilder:
        return SearchMultiBuilder(self.client, query)

    def companies(self, query: str) -> SearchCompaniesBuilder:
        return SearchCompaniesBuilder(self.client, query)

    def collections(self, query: str) -> SearchCollectionsBuilder:
        return SearchCollectionsBuilder(self.client, query)

    def keywords(self, query: str) -> SearchKeywordsBuilder:
        return SearchKeywordsBuilder(self.client, query)

    def people(self, query: str) -> SearchPeopleBuilder:
        return SearchPeopleBuilder(self.client, query)
