"""
TMDB response schemas shared across resources.

Design notes:
- Models mirror TMDB's JSON; field names are the wire names.
- Unknown fields are ignored so new TMDB fields never break decoding.
- Nullable values are `T | None`; most fields default so partial bodies decode.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TmdbModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Paginated(TmdbModel):
    page: int = 0
    total_pages: int = 0
    total_results: int = 0


class Genre(TmdbModel):
    id: int
    name: str = ""


class ProductionCompany(TmdbModel):
    id: int
    logo_path: str | None = None
    name: str = ""
    origin_country: str = ""


class ProductionCountry(TmdbModel):
    iso_3166_1: str = ""
    name: str = ""


class SpokenLanguage(TmdbModel):
    english_name: str = ""
    iso_639_1: str = ""
    name: str = ""


class Video(TmdbModel):
    id: str
    iso_639_1: str = ""
    iso_3166_1: str = ""
    name: str = ""
    key: str = ""  # platform key, e.g. the YouTube id
    site: str = ""
    size: int = 0
    type: str = ""
    official: bool = False
    published_at: str = ""


class VideoList(TmdbModel):
    id: int = 0
    results: list[Video] = Field(default_factory=list)


class Image(TmdbModel):
    aspect_ratio: float = 0.0
    height: int = 0
    iso_639_1: str | None = None
    file_path: str = ""
    vote_average: float = 0.0
    vote_count: int = 0
    width: int = 0


class ImageList(TmdbModel):
    id: int = 0
    backdrops: list[Image] = Field(default_factory=list)
    logos: list[Image] = Field(default_factory=list)
    posters: list[Image] = Field(default_factory=list)


class CastMember(TmdbModel):
    """
    gender: 0 not set, 1 female, 2 male, 3 non-binary.
    """

    id: int
    adult: bool = False
    gender: int = 0
    known_for_department: str = ""
    name: str = ""
    original_name: str = ""
    popularity: float = 0.0
    profile_path: str | None = None
    cast_id: int | None = None
    character: str = ""
    credit_id: str = ""
    order: int = 0


class CrewMember(TmdbModel):
    id: int
    adult: bool = False
    gender: int = 0
    known_for_department: str = ""
    name: str = ""
    original_name: str = ""
    popularity: float = 0.0
    profile_path: str | None = None
    credit_id: str = ""
    department: str = ""
    job: str = ""


class Credits(TmdbModel):
    id: int = 0
    cast: list[CastMember] = Field(default_factory=list)
    crew: list[CrewMember] = Field(default_factory=list)


class ExternalIDs(TmdbModel):
    id: int = 0
    imdb_id: str | None = None
    wikidata_id: str | None = None
    facebook_id: str | None = None
    instagram_id: str | None = None
    twitter_id: str | None = None
    tvdb_id: int | None = None
    tvrage_id: int | None = None
    freebase_mid: str | None = None
    freebase_id: str | None = None


class Keyword(TmdbModel):
    id: int
    name: str = ""


class KeywordsResponse(TmdbModel):
    """
    Movies return `keywords`, TV returns `results`.
    """

    id: int = 0
    keywords: list[Keyword] = Field(default_factory=list)
    results: list[Keyword] = Field(default_factory=list)


class AuthorDetails(TmdbModel):
    name: str = ""
    username: str = ""
    avatar_path: str | None = None
    rating: float | None = None


class Review(TmdbModel):
    id: str
    author: str = ""
    author_details: AuthorDetails = Field(default_factory=AuthorDetails)
    content: str = ""
    created_at: str = ""
    updated_at: str = ""
    url: str = ""


class ReviewPaginatedResults(Paginated):
    id: int = 0
    results: list[Review] = Field(default_factory=list)


class TranslationData(TmdbModel):
    title: str = ""
    overview: str = ""
    homepage: str = ""
    tagline: str = ""
    name: str = ""
    biography: str = ""


class Translation(TmdbModel):
    iso_3166_1: str = ""
    iso_639_1: str = ""
    name: str = ""
    english_name: str = ""
    data: TranslationData = Field(default_factory=TranslationData)


class TranslationsResponse(TmdbModel):
    id: int = 0
    translations: list[Translation] = Field(default_factory=list)


class RatedInfo(TmdbModel):
    value: float


class AccountState(TmdbModel):
    """
    `rated` is False when unrated, otherwise an object carrying the value.
    """

    id: int = 0
    favorite: bool = False
    rated: RatedInfo | bool = False
    watchlist: bool = False


class StatusResponse(TmdbModel):
    status_code: int = 0
    status_message: str = ""
    success: bool | None = None


class RatingRequest(TmdbModel):
    value: float = Field(ge=0.5, le=10.0)


class AlternativeTitle(TmdbModel):
    iso_3166_1: str = ""
    title: str = ""
    type: str = ""


class AlternativeTitlesResponse(TmdbModel):
    """
    Movies return `titles`, TV returns `results`.
    """

    id: int = 0
    titles: list[AlternativeTitle] = Field(default_factory=list)
    results: list[AlternativeTitle] = Field(default_factory=list)


class WatchProvider(TmdbModel):
    logo_path: str = ""
    provider_id: int = 0
    provider_name: str = ""
    display_priority: int = 0


class CountryWatchProviders(TmdbModel):
    link: str = ""
    flatrate: list[WatchProvider] = Field(default_factory=list)
    rent: list[WatchProvider] = Field(default_factory=list)
    buy: list[WatchProvider] = Field(default_factory=list)
    free: list[WatchProvider] = Field(default_factory=list)
    ads: list[WatchProvider] = Field(default_factory=list)


class WatchProviderResponse(TmdbModel):
    """
    results is keyed by ISO 3166-1 country code.
    """

    id: int = 0
    results: dict[str, CountryWatchProviders] = Field(default_factory=dict)


class ListSummary(TmdbModel):
    id: int
    description: str = ""
    favorite_count: int = 0
    item_count: int = 0
    iso_639_1: str = ""
    list_type: str = ""
    name: str = ""
    poster_path: str | None = None


class ListPaginatedResults(Paginated):
    id: int | None = None
    results: list[ListSummary] = Field(default_factory=list)


class ChangeItemDetail(TmdbModel):
    id: str
    action: str = ""
    time: str = ""
    iso_639_1: str | None = None
    iso_3166_1: str | None = None
    # Shape depends on the changed key.
    value: Any = None
    original_value: Any = None


class ChangeGroup(TmdbModel):
    key: str
    items: list[ChangeItemDetail] = Field(default_factory=list)


class ItemChangesResponse(TmdbModel):
    changes: list[ChangeGroup] = Field(default_factory=list)
