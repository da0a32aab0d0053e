from __future__ import annotations

from dataclasses import dataclass

from tmdbkit.client.client import TmdbClient
from tmdbkit.models.common import (
    AccountState,
    AlternativeTitlesResponse,
    Credits,
    KeywordsResponse,
    RatingRequest,
    ReviewPaginatedResults,
    StatusResponse,
    VideoList,
    WatchProviderResponse,
)
from tmdbkit.models.tv import (
    AggregateCreditsResponse,
    ContentRatingsResponse,
    EpisodeGroupsResponse,
    ScreenedTheatricallyResponse,
    TVDetails,
    TVExternalIDs,
    TVImagesResponse,
    TVShowPaginatedResults,
    TVTranslationsResponse,
)
from tmdbkit.options.common import (
    AppendToResponseBuilder,
    ChangesBuilder,
    LangBuilder,
    NoOptsBuilder,
    PagedBuilder,
)
from tmdbkit.options.rating import StateSessionBuilder


@dataclass(frozen=True)
class TV:
    """Builders for the /tv endpoints."""

    client: TmdbClient

    def details(self, series_id: int) -> AppendToResponseBuilder[TVDetails]:
        return AppendToResponseBuilder(self.client, f"/tv/{series_id}", TVDetails)

    def recommendations(self, series_id: int) -> PagedBuilder[TVShowPaginatedResults]:
        return PagedBuilder(
            self.client, f"/tv/{series_id}/recommendations", TVShowPaginatedResults
        )

    def similar(self, series_id: int) -> PagedBuilder[TVShowPaginatedResults]:
        return PagedBuilder(
            self.client, f"/tv/{series_id}/similar", TVShowPaginatedResults
        )

    def popular(self) -> PagedBuilder[TVShowPaginatedResults]:
        return PagedBuilder(self.client, "/tv/popular", TVShowPaginatedResults)

    def on_the_air(self) -> PagedBuilder[TVShowPaginatedResults]:
        return PagedBuilder(self.client, "/tv/on_the_air", TVShowPaginatedResults)

    def airing_today(self) -> PagedBuilder[TVShowPaginatedResults]:
        return PagedBuilder(self.client, "/tv/airing_today", TVShowPaginatedResults)

    def top_rated(self) -> PagedBuilder[TVShowPaginatedResults]:
        return PagedBuilder(self.client, "/tv/top_rated", TVShowPaginatedResults)

    def reviews(self, series_id: int) -> PagedBuilder[ReviewPaginatedResults]:
        return PagedBuilder(
            self.client, f"/tv/{series_id}/reviews", ReviewPaginatedResults
        )

    def account_states(self, series_id: int) -> StateSessionBuilder[AccountState]:
        return StateSessionBuilder(
            self.client, f"/tv/{series_id}/account_states", "GET", AccountState
        )

    def rate(
        self, series_id: int, rating: RatingRequest
    ) -> StateSessionBuilder[StatusResponse]:
        return StateSessionBuilder(
            self.client,
            f"/tv/{series_id}/rating",
            "POST",
            StatusResponse,
            body=rating,
        )

    def delete_rating(self, series_id: int) -> StateSessionBuilder[StatusResponse]:
        return StateSessionBuilder(
            self.client, f"/tv/{series_id}/rating", "DELETE", StatusResponse
        )

    def aggregate_credits(
        self, series_id: int
    ) -> LangBuilder[AggregateCreditsResponse]:
        return LangBuilder(
            self.client,
            f"/tv/{series_id}/aggregate_credits",
            AggregateCreditsResponse,
        )

    def alternative_titles(
        self, series_id: int
    ) -> LangBuilder[AlternativeTitlesResponse]:
        return LangBuilder(
            self.client,
            f"/tv/{series_id}/alternative_titles",
            AlternativeTitlesResponse,
        )

    def content_ratings(self, series_id: int) -> LangBuilder[ContentRatingsResponse]:
        return LangBuilder(
            self.client, f"/tv/{series_id}/content_ratings", ContentRatingsResponse
        )

    def credits(self, series_id: int) -> LangBuilder[Credits]:
        return LangBuilder(self.client, f"/tv/{series_id}/credits", Credits)

    def episode_groups(self, series_id: int) -> LangBuilder[EpisodeGroupsResponse]:
        return LangBuilder(
            self.client, f"/tv/{series_id}/episode_groups", EpisodeGroupsResponse
        )

    def external_ids(self, series_id: int) -> LangBuilder[TVExternalIDs]:
        return LangBuilder(self.client, f"/tv/{series_id}/external_ids", TVExternalIDs)

    def keywords(self, series_id: int) -> LangBuilder[KeywordsResponse]:
        return LangBuilder(self.client, f"/tv/{series_id}/keywords", KeywordsResponse)

    def images(self, series_id: int) -> LangBuilder[TVImagesResponse]:
        return LangBuilder(self.client, f"/tv/{series_id}/images", TVImagesResponse)

    def videos(self, series_id: int) -> LangBuilder[VideoList]:
        return LangBuilder(self.client, f"/tv/{series_id}/videos", VideoList)

    def screened_theatrically(
        self, series_id: int
    ) -> NoOptsBuilder[ScreenedTheatricallyResponse]:
        return NoOptsBuilder(
            self.client,
            f"/tv/{series_id}/screened_theatrically",
            ScreenedTheatricallyResponse,
        )

    def translations(self, series_id: int) -> NoOptsBuilder[TVTranslationsResponse]:
        return NoOptsBuilder(
            self.client, f"/tv/{series_id}/translations", TVTranslationsResponse
        )

    def watch_providers(self, series_id: int) -> NoOptsBuilder[WatchProviderResponse]:
        return NoOptsBuilder(
            self.client, f"/tv/{series_id}/watch/providers", WatchProviderResponse
        )

    def changes(self, series_id: int) -> ChangesBuilder:
        return ChangesBuilder(self.client, f"/tv/{series_id}/changes")
