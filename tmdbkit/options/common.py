"""Builders shared by many movie and TV endpoints."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Self

from pydantic import Field

from tmdbkit.client.params import OptionRecord
from tmdbkit.models.common import ItemChangesResponse
from tmdbkit.options.base import RequestBuilder, T

if TYPE_CHECKING:
    from tmdbkit.client.client import TmdbClient


def format_date(value: date) -> str:
    """Formats a date (or datetime) as TMDB's YYYY-MM-DD."""
    return value.strftime("%Y-%m-%d")


class NoOptsBuilder(RequestBuilder[T]):
    """For GET endpoints without query parameters."""

    def __init__(self, client: "TmdbClient", path: str, response_model: type[T]):
        super().__init__(client, "GET", path, response_model)


class LangOptions(OptionRecord):
    include_image_language: list[str] = Field(default_factory=list)
    language: str | None = None


class LangBuilder(RequestBuilder[T]):
    """For endpoints supporting `language` (and, for media, image languages)."""

    options: LangOptions

    def __init__(self, client: "TmdbClient", path: str, response_model: type[T]):
        super().__init__(client, "GET", path, response_model, options=LangOptions())

    def language(self, lang: str) -> Self:
        """Sets the language, e.g. "en-US", "fr-FR"."""
        self.options.language = lang
        return self

    def include_image_language(self, *langs: str | int) -> Self:
        """Adds ISO 639-1 codes (or "null") for /images, /credits, /videos."""
        self.options.include_image_language.extend(str(v) for v in langs)
        return self


class PagedOptions(OptionRecord):
    language: str | None = None
    page: int | None = None
    region: str | None = None
    # Only honoured by /tv/airing_today and /tv/on_the_air.
    timezone: str | None = None


class PagedBuilder(RequestBuilder[T]):
    """For list endpoints supporting `page`, `language` and `region`."""

    options: PagedOptions

    def __init__(self, client: "TmdbClient", path: str, response_model: type[T]):
        super().__init__(client, "GET", path, response_model, options=PagedOptions())

    def language(self, lang: str) -> Self:
        self.options.language = lang
        return self

    def page(self, page: int) -> Self:
        self.options.page = page
        return self

    def region(self, region: str) -> Self:
        """Sets an ISO 3166-1 region, e.g. "US"."""
        self.options.region = region
        return self

    def timezone(self, tz: str) -> Self:
        """Sets the timezone, e.g. "America/New_York"."""
        self.options.timezone = tz
        return self


class AppendToResponseOptions(OptionRecord):
    language: str | None = None
    append_to_response: list[str] = Field(default_factory=list)


class AppendToResponseBuilder(RequestBuilder[T]):
    """For details endpoints that can embed sub-resources in one call."""

    options: AppendToResponseOptions

    def __init__(self, client: "TmdbClient", path: str, response_model: type[T]):
        super().__init__(
            client, "GET", path, response_model, options=AppendToResponseOptions()
        )

    def language(self, lang: str) -> Self:
        self.options.language = lang
        return self

    def append_to_response(self, *parts: str | int) -> Self:
        """Adds sub-resources, e.g. "credits", "images", "videos"."""
        self.options.append_to_response.extend(str(v) for v in parts)
        return self


class CountryOptions(OptionRecord):
    country: str | None = None


class CountryBuilder(RequestBuilder[T]):
    options: CountryOptions

    def __init__(self, client: "TmdbClient", path: str, response_model: type[T]):
        super().__init__(client, "GET", path, response_model, options=CountryOptions())

    def country(self, country: str) -> Self:
        """Filters by ISO 3166-1 country code."""
        self.options.country = country
        return self


class ChangesOptions(OptionRecord):
    start_date: str | None = None
    end_date: str | None = None
    page: int | None = None


class ChangesBuilder(RequestBuilder[ItemChangesResponse]):
    """For /{movie,tv}/{id}/changes. TMDB caps the range at 14 days."""

    options: ChangesOptions

    def __init__(self, client: "TmdbClient", path: str):
        super().__init__(
            client, "GET", path, ItemChangesResponse, options=ChangesOptions()
        )

    def date_range(self, start: date, end: date) -> Self:
        self.options.start_date = format_date(start)
        self.options.end_date = format_date(end)
        return self

    def page(self, page: int) -> Self:
        self.options.page = page
        return self
