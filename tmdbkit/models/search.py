from __future__ import annotations

from pydantic import Field

from tmdbkit.models.common import Keyword, Paginated, TmdbModel


class KnownForItem(TmdbModel):
    """
    A movie or TV credit attached to a person result; movie-only fields are
    None on TV items and vice versa.
    """

    id: int
    media_type: str = ""
    adult: bool = False
    backdrop_path: str | None = None
    title: str | None = None
    name: str | None = None
    original_language: str = ""
    original_title: str | None = None
    original_name: str | None = None
    overview: str = ""
    poster_path: str | None = None
    release_date: str | None = None
    first_air_date: str | None = None
    video: bool | None = None
    vote_average: float = 0.0
    vote_count: int = 0
    origin_country: list[str] = Field(default_factory=list)
    genre_ids: list[int] = Field(default_factory=list)
    popularity: float = 0.0


class PersonListResult(TmdbModel):
    id: int
    adult: bool = False
    gender: int = 0
    known_for_department: str = ""
    known_for: list[KnownForItem] = Field(default_factory=list)
    name: str = ""
    original_name: str = ""
    popularity: float = 0.0
    profile_path: str | None = None


class PersonPaginatedResults(Paginated):
    results: list[PersonListResult] = Field(default_factory=list)


class SearchMultiResult(TmdbModel):
    """
    media_type is "movie", "tv" or "person"; only the fields of that kind
    are populated.
    """

    id: int
    media_type: str
    adult: bool | None = None
    backdrop_path: str | None = None
    title: str | None = None
    original_language: str | None = None
    original_title: str | None = None
    overview: str | None = None
    poster_path: str | None = None
    genre_ids: list[int] = Field(default_factory=list)
    popularity: float = 0.0
    release_date: str | None = None
    video: bool | None = None
    vote_average: float | None = None
    vote_count: int | None = None
    name: str | None = None
    original_name: str | None = None
    first_air_date: str | None = None
    origin_country: list[str] = Field(default_factory=list)
    gender: int | None = None
    known_for_department: str | None = None
    profile_path: str | None = None
    known_for: list[KnownForItem] = Field(default_factory=list)


class SearchMultiResponse(Paginated):
    results: list[SearchMultiResult] = Field(default_factory=list)


class CompanySearchResult(TmdbModel):
    id: int
    logo_path: str | None = None
    name: str = ""
    origin_country: str = ""


class CompanySearchResponse(Paginated):
    results: list[CompanySearchResult] = Field(default_factory=list)


class CollectionSearchResult(TmdbModel):
    id: int
    adult: bool = False
    backdrop_path: str | None = None
    name: str = ""
    original_language: str = ""
    original_name: str = ""
    overview: str = ""
    poster_path: str | None = None


class CollectionSearchResponse(Paginated):
    results: list[CollectionSearchResult] = Field(default_factory=list)


class KeywordSearchResponse(Paginated):
    results: list[Keyword] = Field(default_factory=list)
