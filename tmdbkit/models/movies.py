from __future__ import annotations

from pydantic import Field

from tmdbkit.models.common import (
    AccountState,
    AlternativeTitlesResponse,
    Credits,
    ExternalIDs,
    Genre,
    ImageList,
    ItemChangesResponse,
    KeywordsResponse,
    ListPaginatedResults,
    Paginated,
    ProductionCompany,
    ProductionCountry,
    ReviewPaginatedResults,
    SpokenLanguage,
    TmdbModel,
    TranslationsResponse,
    VideoList,
    WatchProviderResponse,
)


class BelongsToCollection(TmdbModel):
    id: int
    name: str = ""
    poster_path: str | None = None
    backdrop_path: str | None = None


class MovieListResult(TmdbModel):
    id: int
    adult: bool = False
    backdrop_path: str | None = None
    genre_ids: list[int] = Field(default_factory=list)
    original_language: str = ""
    original_title: str = ""
    overview: str = ""
    popularity: float = 0.0
    poster_path: str | None = None
    release_date: str = ""  # YYYY-MM-DD, may be empty
    title: str = ""
    video: bool = False
    vote_average: float = 0.0
    vote_count: int = 0


class MoviePaginatedResults(Paginated):
    results: list[MovieListResult] = Field(default_factory=list)


class ReleaseDateInfo(TmdbModel):
    """
    type: 1 premiere, 2 theatrical (limited), 3 theatrical, 4 digital,
    5 physical, 6 TV.
    """

    certification: str = ""
    descriptors: list[str] = Field(default_factory=list)
    iso_639_1: str | None = None
    note: str | None = None
    release_date: str = ""
    type: int = 0


class CountryReleaseDates(TmdbModel):
    iso_3166_1: str = ""
    release_dates: list[ReleaseDateInfo] = Field(default_factory=list)


class ReleaseDatesResponse(TmdbModel):
    id: int = 0
    results: list[CountryReleaseDates] = Field(default_factory=list)


class DateRange(TmdbModel):
    maximum: str = ""
    minimum: str = ""


class NowPlayingResponse(MoviePaginatedResults):
    dates: DateRange = Field(default_factory=DateRange)


class UpcomingResponse(MoviePaginatedResults):
    dates: DateRange = Field(default_factory=DateRange)


class MovieDetails(TmdbModel):
    """
    The trailing optional blocks are only present when requested through
    append_to_response.
    """

    id: int
    adult: bool = False
    backdrop_path: str | None = None
    belongs_to_collection: BelongsToCollection | None = None
    budget: int = 0
    genres: list[Genre] = Field(default_factory=list)
    homepage: str | None = None
    imdb_id: str | None = None
    origin_country: list[str] = Field(default_factory=list)
    original_language: str = ""
    original_title: str = ""
    overview: str = ""
    popularity: float = 0.0
    poster_path: str | None = None
    production_companies: list[ProductionCompany] = Field(default_factory=list)
    production_countries: list[ProductionCountry] = Field(default_factory=list)
    release_date: str = ""
    revenue: int = 0
    runtime: int | None = None
    spoken_languages: list[SpokenLanguage] = Field(default_factory=list)
    status: str = ""
    tagline: str | None = None
    title: str = ""
    video: bool = False
    vote_average: float = 0.0
    vote_count: int = 0

    account_states: AccountState | None = None
    alternative_titles: AlternativeTitlesResponse | None = None
    changes: ItemChangesResponse | None = None
    credits: Credits | None = None
    external_ids: ExternalIDs | None = None
    images: ImageList | None = None
    keywords: KeywordsResponse | None = None
    lists: ListPaginatedResults | None = None
    recommendations: MoviePaginatedResults | None = None
    release_dates: ReleaseDatesResponse | None = None
    reviews: ReviewPaginatedResults | None = None
    similar: MoviePaginatedResults | None = None
    translations: TranslationsResponse | None = None
    videos: VideoList | None = None
    watch_providers: WatchProviderResponse | None = Field(
        default=None, alias="watch/providers"
    )
