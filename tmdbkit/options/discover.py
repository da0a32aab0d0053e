"""Builders for /discover/movie and /discover/tv.

Both builders embed a shared `DiscoverOptions` record next to their own
resource-specific record. On execute each record is encoded separately and
the two maps are merged; the records declare disjoint wire keys, and a
collision raises `EncodingError` instead of silently overwriting.

List joins follow TMDB: genres and monetization types are comma-joined (AND
for genres), while keywords, companies, people, networks and watch
providers are pipe-joined (OR).
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Annotated, Self

from pydantic import Field

from tmdbkit.client.params import OptionRecord, Piped, encode_params, merge_params
from tmdbkit.models.movies import MoviePaginatedResults
from tmdbkit.models.tv import TVShowPaginatedResults
from tmdbkit.options.base import RequestBuilder, T
from tmdbkit.options.common import format_date

if TYPE_CHECKING:
    from tmdbkit.client.client import TmdbClient

logger = logging.getLogger(__name__)


class DiscoverOptions(OptionRecord):
    language: str | None = None
    region: str | None = None
    page: int | None = None
    sort_by: str | None = None
    with_origin_country: str | None = None
    with_original_language: str | None = None
    with_genres: list[str] = Field(default_factory=list)
    without_genres: list[str] = Field(default_factory=list)
    with_keywords: Annotated[list[str], Piped()] = Field(default_factory=list)
    without_keywords: Annotated[list[str], Piped()] = Field(default_factory=list)
    with_watch_providers: Annotated[list[str], Piped()] = Field(default_factory=list)
    without_watch_providers: Annotated[list[str], Piped()] = Field(
        default_factory=list
    )
    with_companies: Annotated[list[str], Piped()] = Field(default_factory=list)
    watch_region: str | None = None
    with_watch_monetization_types: list[str] = Field(default_factory=list)
    timezone: str | None = None
    include_adult: bool | None = None


class DiscoverMoviesOptions(OptionRecord):
    year: int | None = None
    release_date_gte: str | None = Field(default=None, alias="release_date.gte")
    release_date_lte: str | None = Field(default=None, alias="release_date.lte")
    primary_release_year: int | None = None
    primary_release_date_gte: str | None = Field(
        default=None, alias="primary_release_date.gte"
    )
    primary_release_date_lte: str | None = Field(
        default=None, alias="primary_release_date.lte"
    )
    certification: str | None = None
    certification_gte: str | None = Field(default=None, alias="certification.gte")
    certification_lte: str | None = Field(default=None, alias="certification.lte")
    certification_country: str | None = None
    include_video: bool | None = None
    without_companies: Annotated[list[str], Piped()] = Field(default_factory=list)
    with_cast: Annotated[list[str], Piped()] = Field(default_factory=list)
    with_crew: Annotated[list[str], Piped()] = Field(default_factory=list)
    with_people: Annotated[list[str], Piped()] = Field(default_factory=list)
    with_release_type: int | None = None
    vote_average_gte: float | None = Field(default=None, alias="vote_average.gte")
    vote_average_lte: float | None = Field(default=None, alias="vote_average.lte")
    vote_count_gte: int | None = Field(default=None, alias="vote_count.gte")
    vote_count_lte: int | None = Field(default=None, alias="vote_count.lte")
    with_runtime_gte: int | None = Field(default=None, alias="with_runtime.gte")
    with_runtime_lte: int | None = Field(default=None, alias="with_runtime.lte")


class DiscoverTVOptions(OptionRecord):
    first_air_date_year: int | None = None
    first_air_date_gte: str | None = Field(default=None, alias="first_air_date.gte")
    first_air_date_lte: str | None = Field(default=None, alias="first_air_date.lte")
    air_date_gte: str | None = Field(default=None, alias="air_date.gte")
    air_date_lte: str | None = Field(default=None, alias="air_date.lte")
    include_null_first_air_dates: bool | None = None
    with_networks: Annotated[list[str], Piped()] = Field(default_factory=list)
    with_status: str | None = None
    with_type: str | None = None
    vote_average_gte: float | None = Field(default=None, alias="vote_average.gte")
    vote_count_gte: int | None = Field(default=None, alias="vote_count.gte")
    with_runtime_gte: int | None = Field(default=None, alias="with_runtime.gte")
    with_runtime_lte: int | None = Field(default=None, alias="with_runtime.lte")


class DiscoverBuilder(RequestBuilder[T]):
    """Shared discover setters; subclasses add their own `options` record."""

    def __init__(
        self,
        client: "TmdbClient",
        path: str,
        response_model: type[T],
        options: OptionRecord,
    ):
        super().__init__(client, "GET", path, response_model, options=options)
        self.base_options = DiscoverOptions()

    def _params(self) -> dict[str, str]:
        params = merge_params(
            encode_params(self.base_options),
            encode_params(self.options),
        )
        logger.debug("TMDB_DISCOVER_PARAMS path=%s params=%s", self.path, params)
        return params

    def language(self, lang: str) -> Self:
        """Sets the language, e.g. "en-US" (TMDB default)."""
        self.base_options.language = lang
        return self

    def region(self, region: str) -> Self:
        self.base_options.region = region
        return self

    def page(self, page: int) -> Self:
        self.base_options.page = page
        return self

    def sort_by(self, sort: str) -> Self:
        """Sets the sort order, e.g. "popularity.desc", "vote_average.asc"."""
        self.base_options.sort_by = sort
        return self

    def with_origin_country(self, country: str) -> Self:
        self.base_options.with_origin_country = country
        return self

    def with_original_language(self, lang: str) -> Self:
        self.base_options.with_original_language = lang
        return self

    def with_genres(self, *ids: str | int) -> Self:
        self.base_options.with_genres.extend(str(v) for v in ids)
        return self

    def without_genres(self, *ids: str | int) -> Self:
        self.base_options.without_genres.extend(str(v) for v in ids)
        return self

    def with_keywords(self, *ids: str | int) -> Self:
        self.base_options.with_keywords.extend(str(v) for v in ids)
        return self

    def without_keywords(self, *ids: str | int) -> Self:
        self.base_options.without_keywords.extend(str(v) for v in ids)
        return self

    def with_watch_providers(self, *ids: str | int) -> Self:
        """Use together with watch_region."""
        self.base_options.with_watch_providers.extend(str(v) for v in ids)
        return self

    def without_watch_providers(self, *ids: str | int) -> Self:
        self.base_options.without_watch_providers.extend(str(v) for v in ids)
        return self

    def with_companies(self, *ids: str | int) -> Self:
        self.base_options.with_companies.extend(str(v) for v in ids)
        return self

    def watch_region(self, region: str) -> Self:
        self.base_options.watch_region = region
        return self

    def with_watch_monetization_types(self, *types: str) -> Self:
        """Any of flatrate, free, ads, rent, buy. Use with watch_region."""
        self.base_options.with_watch_monetization_types.extend(str(v) for v in types)
        return self

    def timezone(self, tz: str) -> Self:
        self.base_options.timezone = tz
        return self

    def include_adult(self, include: bool) -> Self:
        self.base_options.include_adult = include
        return self


class DiscoverMoviesBuilder(DiscoverBuilder[MoviePaginatedResults]):
    options: DiscoverMoviesOptions

    def __init__(self, client: "TmdbClient"):
        super().__init__(
            client, "/discover/movie", MoviePaginatedResults, DiscoverMoviesOptions()
        )

    def year(self, year: int) -> Self:
        self.options.year = year
        return self

    def primary_release_year(self, year: int) -> Self:
        self.options.primary_release_year = year
        return self

    def primary_release_date_gte(self, day: date) -> Self:
        self.options.primary_release_date_gte = format_date(day)
        return self

    def primary_release_date_lte(self, day: date) -> Self:
        self.options.primary_release_date_lte = format_date(day)
        return self

    def release_date_gte(self, day: date) -> Self:
        self.options.release_date_gte = format_date(day)
        return self

    def release_date_lte(self, day: date) -> Self:
        self.options.release_date_lte = format_date(day)
        return self

    def certification(self, cert: str) -> Self:
        """Sets e.g. "R" or "PG-13"; use with region."""
        self.options.certification = cert
        return self

    def certification_gte(self, cert: str) -> Self:
        self.options.certification_gte = cert
        return self

    def certification_lte(self, cert: str) -> Self:
        self.options.certification_lte = cert
        return self

    def certification_country(self, country: str) -> Self:
        self.options.certification_country = country
        return self

    def include_video(self, include: bool) -> Self:
        self.options.include_video = include
        return self

    def without_companies(self, *ids: str | int) -> Self:
        self.options.without_companies.extend(str(v) for v in ids)
        return self

    def with_cast(self, *ids: str | int) -> Self:
        self.options.with_cast.extend(str(v) for v in ids)
        return self

    def with_crew(self, *ids: str | int) -> Self:
        self.options.with_crew.extend(str(v) for v in ids)
        return self

    def with_people(self, *ids: str | int) -> Self:
        self.options.with_people.extend(str(v) for v in ids)
        return self

    def with_release_type(self, release_type: int) -> Self:
        self.options.with_release_type = release_type
        return self

    def vote_average_gte(self, value: float) -> Self:
        self.options.vote_average_gte = value
        return self

    def vote_average_lte(self, value: float) -> Self:
        self.options.vote_average_lte = value
        return self

    def vote_count_gte(self, value: int) -> Self:
        self.options.vote_count_gte = value
        return self

    def vote_count_lte(self, value: int) -> Self:
        self.options.vote_count_lte = value
        return self

    def with_runtime_gte(self, minutes: int) -> Self:
        self.options.with_runtime_gte = minutes
        return self

    def with_runtime_lte(self, minutes: int) -> Self:
        self.options.with_runtime_lte = minutes
        return self


class DiscoverTVBuilder(DiscoverBuilder[TVShowPaginatedResults]):
    options: DiscoverTVOptions

    def __init__(self, client: "TmdbClient"):
        super().__init__(
            client, "/discover/tv", TVShowPaginatedResults, DiscoverTVOptions()
        )

    def first_air_date_year(self, year: int) -> Self:
        self.options.first_air_date_year = year
        return self

    def first_air_date_gte(self, day: date) -> Self:
        self.options.first_air_date_gte = format_date(day)
        return self

    def first_air_date_lte(self, day: date) -> Self:
        self.options.first_air_date_lte = format_date(day)
        return self

    def air_date_gte(self, day: date) -> Self:
        self.options.air_date_gte = format_date(day)
        return self

    def air_date_lte(self, day: date) -> Self:
        self.options.air_date_lte = format_date(day)
        return self

    def include_null_first_air_dates(self, include: bool) -> Self:
        self.options.include_null_first_air_dates = include
        return self

    def with_networks(self, *ids: str | int) -> Self:
        self.options.with_networks.extend(str(v) for v in ids)
        return self

    def with_status(self, status: str) -> Self:
        self.options.with_status = status
        return self

    def with_type(self, tv_type: str) -> Self:
        self.options.with_type = tv_type
        return self

    def vote_average_gte(self, value: float) -> Self:
        self.options.vote_average_gte = value
        return self

    def vote_count_gte(self, value: int) -> Self:
        self.options.vote_count_gte = value
        return self

    def with_runtime_gte(self, minutes: int) -> Self:
        self.options.with_runtime_gte = minutes
        return self

    def with_runtime_lte(self, minutes: int) -> Self:
        self.options.with_runtime_lte = minutes
        return self
