from __future__ import annotations

from pydantic import Field

from tmdbkit.models.common import (
    AccountState,
    AlternativeTitlesResponse,
    Credits,
    Genre,
    Image,
    ItemChangesResponse,
    KeywordsResponse,
    Paginated,
    ProductionCompany,
    ProductionCountry,
    ReviewPaginatedResults,
    SpokenLanguage,
    TmdbModel,
    VideoList,
    WatchProviderResponse,
)


class Network(TmdbModel):
    id: int
    headquarters: str = ""
    homepage: str = ""
    logo_path: str | None = None
    name: str = ""
    origin_country: str = ""


class Creator(TmdbModel):
    id: int
    credit_id: str = ""
    name: str = ""
    gender: int = 0
    profile_path: str | None = None


class EpisodeToAir(TmdbModel):
    id: int
    name: str = ""
    overview: str = ""
    vote_average: float = 0.0
    vote_count: int = 0
    air_date: str | None = None
    episode_number: int = 0
    production_code: str = ""
    runtime: int | None = None
    season_number: int = 0
    show_id: int = 0
    still_path: str | None = None


class TVSeason(TmdbModel):
    id: int
    air_date: str | None = None
    episode_count: int = 0
    name: str = ""
    overview: str = ""
    poster_path: str | None = None
    season_number: int = 0
    vote_average: float = 0.0


class TVListResult(TmdbModel):
    id: int
    adult: bool = False
    backdrop_path: str | None = None
    genre_ids: list[int] = Field(default_factory=list)
    origin_country: list[str] = Field(default_factory=list)
    original_language: str = ""
    original_name: str = ""
    overview: str = ""
    popularity: float = 0.0
    poster_path: str | None = None
    first_air_date: str = ""
    name: str = ""
    vote_average: float = 0.0
    vote_count: int = 0


class TVShowPaginatedResults(Paginated):
    results: list[TVListResult] = Field(default_factory=list)


class Role(TmdbModel):
    credit_id: str = ""
    character: str = ""
    episode_count: int = 0


class AggregateCastMember(TmdbModel):
    id: int
    adult: bool = False
    gender: int = 0
    known_for_department: str = ""
    name: str = ""
    original_name: str = ""
    popularity: float = 0.0
    profile_path: str | None = None
    roles: list[Role] = Field(default_factory=list)
    total_episode_count: int = 0
    order: int = 0


class Job(TmdbModel):
    credit_id: str = ""
    job: str = ""
    episode_count: int = 0


class AggregateCrewMember(TmdbModel):
    id: int
    adult: bool = False
    gender: int = 0
    known_for_department: str = ""
    name: str = ""
    original_name: str = ""
    popularity: float = 0.0
    profile_path: str | None = None
    jobs: list[Job] = Field(default_factory=list)
    department: str = ""
    total_episode_count: int = 0


class AggregateCreditsResponse(TmdbModel):
    id: int = 0
    cast: list[AggregateCastMember] = Field(default_factory=list)
    crew: list[AggregateCrewMember] = Field(default_factory=list)


class ContentRating(TmdbModel):
    descriptors: list[str] = Field(default_factory=list)
    iso_3166_1: str = ""
    rating: str = ""


class ContentRatingsResponse(TmdbModel):
    id: int = 0
    results: list[ContentRating] = Field(default_factory=list)


class EpisodeGroup(TmdbModel):
    id: str
    description: str = ""
    episode_count: int = 0
    group_count: int = 0
    name: str = ""
    network: Network | None = None
    type: int = 0


class EpisodeGroupsResponse(TmdbModel):
    """
    Not paginated even though it carries total_results.
    """

    id: int = 0
    results: list[EpisodeGroup] = Field(default_factory=list)
    total_results: int = 0


class TVExternalIDs(TmdbModel):
    id: int = 0
    imdb_id: str | None = None
    wikidata_id: str | None = None
    facebook_id: str | None = None
    instagram_id: str | None = None
    twitter_id: str | None = None
    freebase_mid: str | None = None
    freebase_id: str | None = None
    tvdb_id: int | None = None
    tvrage_id: int | None = None


class TVImagesResponse(TmdbModel):
    id: int = 0
    backdrops: list[Image] = Field(default_factory=list)
    logos: list[Image] = Field(default_factory=list)
    posters: list[Image] = Field(default_factory=list)


class ScreeningInfo(TmdbModel):
    id: int | None = None
    episode_number: int = 0
    season_number: int = 0


class ScreenedTheatricallyResponse(TmdbModel):
    id: int = 0
    results: list[ScreeningInfo] = Field(default_factory=list)


class TVTranslationData(TmdbModel):
    name: str = ""
    overview: str = ""
    homepage: str = ""
    tagline: str = ""


class TVTranslation(TmdbModel):
    iso_3166_1: str = ""
    iso_639_1: str = ""
    name: str = ""
    english_name: str = ""
    data: TVTranslationData = Field(default_factory=TVTranslationData)


class TVTranslationsResponse(TmdbModel):
    id: int = 0
    translations: list[TVTranslation] = Field(default_factory=list)


class TVDetails(TmdbModel):
    """
    The trailing optional blocks are only present when requested through
    append_to_response.
    """

    id: int
    adult: bool = False
    backdrop_path: str | None = None
    created_by: list[Creator] = Field(default_factory=list)
    episode_run_time: list[int] = Field(default_factory=list)
    first_air_date: str = ""
    genres: list[Genre] = Field(default_factory=list)
    homepage: str | None = None
    in_production: bool = False
    languages: list[str] = Field(default_factory=list)
    last_air_date: str | None = None
    last_episode_to_air: EpisodeToAir | None = None
    name: str = ""
    next_episode_to_air: EpisodeToAir | None = None
    networks: list[Network] = Field(default_factory=list)
    number_of_episodes: int = 0
    number_of_seasons: int = 0
    origin_country: list[str] = Field(default_factory=list)
    original_language: str = ""
    original_name: str = ""
    overview: str = ""
    popularity: float = 0.0
    poster_path: str | None = None
    production_companies: list[ProductionCompany] = Field(default_factory=list)
    production_countries: list[ProductionCountry] = Field(default_factory=list)
    seasons: list[TVSeason] = Field(default_factory=list)
    spoken_languages: list[SpokenLanguage] = Field(default_factory=list)
    status: str = ""  # "Returning Series", "Ended", "Canceled", ...
    tagline: str | None = None
    type: str = ""
    vote_average: float = 0.0
    vote_count: int = 0

    account_states: AccountState | None = None
    aggregate_credits: AggregateCreditsResponse | None = None
    alternative_titles: AlternativeTitlesResponse | None = None
    changes: ItemChangesResponse | None = None
    content_ratings: ContentRatingsResponse | None = None
    credits: Credits | None = None
    episode_groups: EpisodeGroupsResponse | None = None
    external_ids: TVExternalIDs | None = None
    images: TVImagesResponse | None = None
    keywords: KeywordsResponse | None = None
    recommendations: TVShowPaginatedResults | None = None
    reviews: ReviewPaginatedResults | None = None
    screened_theatrically: ScreenedTheatricallyResponse | None = None
    similar: TVShowPaginatedResults | None = None
    translations: TVTranslationsResponse | None = None
    videos: VideoList | None = None
    watch_providers: WatchProviderResponse | None = Field(
        default=None, alias="watch/providers"
    )
