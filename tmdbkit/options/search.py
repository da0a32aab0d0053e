"""Builders for the /search endpoints.

Every search carries a required `query`; it is always sent, even when empty,
so TMDB reports the missing query instead of the client guessing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated, Self

from tmdbkit.client.params import OptionRecord, Required
from tmdbkit.models.movies import MoviePaginatedResults
from tmdbkit.models.search import (
    CollectionSearchResponse,
    CompanySearchResponse,
    KeywordSearchResponse,
    PersonPaginatedResults,
    SearchMultiResponse,
)
from tmdbkit.models.tv import TVShowPaginatedResults
from tmdbkit.options.base import RequestBuilder, T

if TYPE_CHECKING:
    from tmdbkit.client.client import TmdbClient

logger = logging.getLogger(__name__)


class SearchOptions(OptionRecord):
    query: Annotated[str, Required()]
    page: int | None = None


class LocalizedSearchOptions(SearchOptions):
    include_adult: bool | None = None
    language: str | None = None


class SearchMoviesOptions(LocalizedSearchOptions):
    primary_release_year: int | None = None
    region: str | None = None
    year: int | None = None


class SearchTVOptions(LocalizedSearchOptions):
    first_air_date_year: int | None = None
    year: int | None = None


class SearchMultiOptions(LocalizedSearchOptions):
    include_people: bool | None = None


class SearchBuilder(RequestBuilder[T]):
    """Base for all search builders: GET on a fixed path with a query."""

    path: str = ""
    options_type: type[SearchOptions] = SearchOptions

    def __init__(self, client: "TmdbClient", query: str, response_model: type[T]):
        super().__init__(
            client,
            "GET",
            self.path,
            response_model,
            options=self.options_type(query=query),
        )

    def page(self, page: int) -> Self:
        self.options.page = page
        return self


class LocalizedSearchBuilder(SearchBuilder[T]):
    options_type = LocalizedSearchOptions

    def language(self, lang: str) -> Self:
        self.options.language = lang
        return self

    def include_adult(self, include: bool) -> Self:
        self.options.include_adult = include
        return self


class SearchMoviesBuilder(LocalizedSearchBuilder[MoviePaginatedResults]):
    path = "/search/movie"
    options_type = SearchMoviesOptions

    def __init__(self, client: "TmdbClient", query: str):
        super().__init__(client, query, MoviePaginatedResults)

    def primary_release_year(self, year: int) -> Self:
        self.options.primary_release_year = year
        return self

    def region(self, region: str) -> Self:
        self.options.region = region
        return self

    def year(self, year: int) -> Self:
        self.options.year = year
        return self


class SearchTVBuilder(LocalizedSearchBuilder[TVShowPaginatedResults]):
    path = "/search/tv"
    options_type = SearchTVOptions

    def __init__(self, client: "TmdbClient", query: str):
        super().__init__(client, query, TVShowPaginatedResults)

    def first_air_date_year(self, year: int) -> Self:
        self.options.first_air_date_year = year
        return self

    def year(self, year: int) -> Self:
        """Deprecated by TMDB; prefer first_air_date_year."""
        self.options.year = year
        return self


class SearchMultiBuilder(LocalizedSearchBuilder[SearchMultiResponse]):
    """Searches movies, TV shows and people at once.

    Person results are removed from the response unless
    `include_people(True)` was called.
    """

    path = "/search/multi"
    options_type = SearchMultiOptions

    def __init__(self, client: "TmdbClient", query: str):
        super().__init__(client, query, SearchMultiResponse)

    def include_people(self, include: bool) -> Self:
        self.options.include_people = include
        return self

    def _finalize(self, result: SearchMultiResponse) -> SearchMultiResponse:
        if self.options.include_people:
            return result

        kept = [r for r in result.results if r.media_type != "person"]
        removed = len(result.results) - len(kept)
        result.results = kept
        logger.info("TMDB_SEARCH_MULTI removed_person_results=%s", removed)
        return result


class SearchCompaniesBuilder(SearchBuilder[CompanySearchResponse]):
    path = "/search/company"

    def __init__(self, client: "TmdbClient", query: str):
        super().__init__(client, query, CompanySearchResponse)


class SearchCollectionsBuilder(LocalizedSearchBuilder[CollectionSearchResponse]):
    path = "/search/collection"

    def __init__(self, client: "TmdbClient", query: str):
        super().__init__(client, query, CollectionSearchResponse)


class SearchKeywordsBuilder(SearchBuilder[KeywordSearchResponse]):
    path = "/search/keyword"

    def __init__(self, client: "TmdbClient", query: str):
        super().__init__(client, query, KeywordSearchResponse)


class SearchPeopleBuilder(LocalizedSearchBuilder[PersonPaginatedResults]):
    path = "/search/person"

    def __init__(self, client: "TmdbClient", query: str):
        super().__init__(client, query, PersonPaginatedResults)
