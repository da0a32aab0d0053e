from __future__ import annotations

from dataclasses import dataclass

from tmdbkit.client.client import TmdbClient
from tmdbkit.models.common import (
    AccountState,
    AlternativeTitlesResponse,
    Credits,
    ExternalIDs,
    ImageList,
    KeywordsResponse,
    ListPaginatedResults,
    RatingRequest,
    ReviewPaginatedResults,
    StatusResponse,
    TranslationsResponse,
    VideoList,
    WatchProviderResponse,
)
from tmdbkit.models.movies import (
    MovieDetails,
    MoviePaginatedResults,
    NowPlayingResponse,
    ReleaseDatesResponse,
    UpcomingResponse,
)
from tmdbkit.options.common import (
    AppendToResponseBuilder,
    ChangesBuilder,
    CountryBuilder,
    LangBuilder,
    NoOptsBuilder,
    PagedBuilder,
)
from tmdbkit.options.rating import StateSessionBuilder


@dataclass(frozen=True)
class Movies:
    """Builders for the /movie endpoints."""

    client: TmdbClient

    def details(self, movie_id: int) -> AppendToResponseBuilder[MovieDetails]:
        return AppendToResponseBuilder(self.client, f"/movie/{movie_id}", MovieDetails)

    def account_states(self, movie_id: int) -> StateSessionBuilder[AccountState]:
        return StateSessionBuilder(
            self.client, f"/movie/{movie_id}/account_states", "GET", AccountState
        )

    def alternative_titles(
        self, movie_id: int
    ) -> CountryBuilder[AlternativeTitlesResponse]:
        return CountryBuilder(
            self.client,
            f"/movie/{movie_id}/alternative_titles",
            AlternativeTitlesResponse,
        )

    def changes(self, movie_id: int) -> ChangesBuilder:
        return ChangesBuilder(self.client, f"/movie/{movie_id}/changes")

    def credits(self, movie_id: int) -> LangBuilder[Credits]:
        return LangBuilder(self.client, f"/movie/{movie_id}/credits", Credits)

    def external_ids(self, movie_id: int) -> NoOptsBuilder[ExternalIDs]:
        return NoOptsBuilder(self.client, f"/movie/{movie_id}/external_ids", ExternalIDs)

    def images(self, movie_id: int) -> LangBuilder[ImageList]:
        return LangBuilder(self.client, f"/movie/{movie_id}/images", ImageList)

    def keywords(self, movie_id: int) -> NoOptsBuilder[KeywordsResponse]:
        return NoOptsBuilder(
            self.client, f"/movie/{movie_id}/keywords", KeywordsResponse
        )

    def lists(self, movie_id: int) -> PagedBuilder[ListPaginatedResults]:
        return PagedBuilder(self.client, f"/movie/{movie_id}/lists", ListPaginatedResults)

    def recommendations(self, movie_id: int) -> PagedBuilder[MoviePaginatedResults]:
        return PagedBuilder(
            self.client, f"/movie/{movie_id}/recommendations", MoviePaginatedResults
        )

    def release_dates(self, movie_id: int) -> NoOptsBuilder[ReleaseDatesResponse]:
        return NoOptsBuilder(
            self.client, f"/movie/{movie_id}/release_dates", ReleaseDatesResponse
        )

    def reviews(self, movie_id: int) -> PagedBuilder[ReviewPaginatedResults]:
        return PagedBuilder(
            self.client, f"/movie/{movie_id}/reviews", ReviewPaginatedResults
        )

    def similar(self, movie_id: int) -> PagedBuilder[MoviePaginatedResults]:
        return PagedBuilder(
            self.client, f"/movie/{movie_id}/similar", MoviePaginatedResults
        )

    def translations(self, movie_id: int) -> NoOptsBuilder[TranslationsResponse]:
        return NoOptsBuilder(
            self.client, f"/movie/{movie_id}/translations", TranslationsResponse
        )

    def videos(self, movie_id: int) -> LangBuilder[VideoList]:
        return LangBuilder(self.client, f"/movie/{movie_id}/videos", VideoList)

    def watch_providers(self, movie_id: int) -> NoOptsBuilder[WatchProviderResponse]:
        return NoOptsBuilder(
            self.client, f"/movie/{movie_id}/watch/providers", WatchProviderResponse
        )

    def rate(
        self, movie_id: int, rating: RatingRequest
    ) -> StateSessionBuilder[StatusResponse]:
        return StateSessionBuilder(
            self.client,
            f"/movie/{movie_id}/rating",
            "POST",
            StatusResponse,
            body=rating,
        )

    def delete_rating(self, movie_id: int) -> StateSessionBuilder[StatusResponse]:
        return StateSessionBuilder(
            self.client, f"/movie/{movie_id}/rating", "DELETE", StatusResponse
        )

    def latest(self) -> NoOptsBuilder[MovieDetails]:
        return NoOptsBuilder(self.client, "/movie/latest", MovieDetails)

    def now_playing(self) -> PagedBuilder[NowPlayingResponse]:
        return PagedBuilder(self.client, "/movie/now_playing", NowPlayingResponse)

    def popular(self) -> PagedBuilder[MoviePaginatedResults]:
        return PagedBuilder(self.client, "/movie/popular", MoviePaginatedResults)

    def top_rated(self) -> PagedBuilder[MoviePaginatedResults]:
        return PagedBuilder(self.client, "/movie/top_rated", MoviePaginatedResults)

    def upcoming(self) -> PagedBuilder[UpcomingResponse]:
        return PagedBuilder(self.client, "/movie/upcoming", UpcomingResponse)
