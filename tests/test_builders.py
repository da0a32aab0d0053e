import json
import logging
from datetime import date
from urllib.parse import parse_qs, urlparse

import pytest
import pydantic
import responses

from tmdbkit.client.client import TmdbClient
from tmdbkit.client.errors import ValidationError
from tmdbkit.models.auth import CreateSessionRequest, RequestTokenResponse
from tmdbkit.models.common import RatingRequest
from tmdbkit.options.auth import AuthBuilder
from tmdbkit.tmdb import Tmdb

BASE = "https://api.test.com/3"


# --- FIXTURES ---
# Logic: One facade over a v3 client; every test mocks only what it calls.
@pytest.fixture
def tmdb():
    return Tmdb(TmdbClient(api_key="test_key", base_url=BASE))


def query_of(call):
    return parse_qs(urlparse(call.request.url).query, keep_blank_values=True)


PAGE = {"page": 1, "results": [], "total_pages": 0, "total_results": 0}


# --- 1. POSITIVE TESTING (The Contract) ---
@responses.activate
def test_paged_builder_sends_only_what_was_set(tmdb):
    responses.add(responses.GET, f"{BASE}/movie/popular", json=PAGE, status=200)

    tmdb.movies.popular().language("en-US").page(2).region("US").execute()

    assert query_of(responses.calls[0]) == {
        "language": ["en-US"],
        "page": ["2"],
        "region": ["US"],
        "api_key": ["test_key"],
    }


@responses.activate
def test_details_with_append_to_response(tmdb):
    # Logic: Sub-resources are comma-joined and decoded into the details model.
    responses.add(
        responses.GET,
        f"{BASE}/movie/550",
        json={"id": 550, "title": "Fight Club", "credits": {"id": 550, "cast": [], "crew": []}},
        status=200,
    )

    movie = tmdb.movies.details(550).append_to_response("credits", "images").execute()

    assert "append_to_response=credits,images" in responses.calls[0].request.url
    assert movie.id == 550
    assert movie.credits is not None


@responses.activate
def test_lang_builder_joins_image_languages(tmdb):
    responses.add(responses.GET, f"{BASE}/tv/1399/images", json={"id": 1399}, status=200)

    tmdb.tv.images(1399).include_image_language("en", "null").language("de").execute()

    assert query_of(responses.calls[0])["include_image_language"] == ["en,null"]
    assert query_of(responses.calls[0])["language"] == ["de"]


@responses.activate
def test_changes_builder_formats_dates(tmdb):
    responses.add(responses.GET, f"{BASE}/movie/550/changes", json={"changes": []}, status=200)

    tmdb.movies.changes(550).date_range(date(2024, 1, 1), date(2024, 1, 14)).execute()

    query = query_of(responses.calls[0])
    assert query["start_date"] == ["2024-01-01"]
    assert query["end_date"] == ["2024-01-14"]


@responses.activate
def test_builder_can_be_executed_twice(tmdb):
    # Logic: Builders are reusable; each execute is an independent request.
    responses.add(responses.GET, f"{BASE}/tv/popular", json=PAGE, status=200)

    builder = tmdb.tv.popular().page(3)
    builder.execute()
    builder.execute()

    assert len(responses.calls) == 2
    assert query_of(responses.calls[0]) == query_of(responses.calls[1])


@responses.activate
def test_rating_with_guest_session(tmdb):
    responses.add(
        responses.POST,
        f"{BASE}/movie/550/rating",
        json={"status_code": 1, "status_message": "Success."},
        status=201,
    )

    status = (
        tmdb.movies.rate(550, RatingRequest(value=7.5))
        .for_guest()
        .guest_session_id("guest-1")
        .execute()
    )

    call = responses.calls[0]
    assert status.status_code == 1
    assert query_of(call) == {"guest_session_id": ["guest-1"], "api_key": ["test_key"]}
    assert "for_guest" not in call.request.url
    assert json.loads(call.request.body) == {"value": 7.5}


@responses.activate
def test_account_states_without_guest_mode_needs_no_session(tmdb):
    # Logic: Bearer-authorized calls skip the session check.
    responses.add(
        responses.GET,
        f"{BASE}/tv/1399/account_states",
        json={"id": 1399, "favorite": False, "rated": {"value": 8.0}, "watchlist": True},
        status=200,
    )

    state = tmdb.tv.account_states(1399).execute()

    assert state.watchlist is True
    assert state.rated.value == 8.0


@responses.activate
def test_search_multi_drops_people_by_default(tmdb, caplog):
    responses.add(
        responses.GET,
        f"{BASE}/search/multi",
        json={
            "page": 1,
            "results": [
                {"id": 1, "media_type": "movie", "title": "Heat"},
                {"id": 2, "media_type": "person", "name": "Al Pacino"},
                {"id": 3, "media_type": "tv", "name": "Heat Wave"},
            ],
        },
        status=200,
    )

    with caplog.at_level(logging.INFO, logger="tmdbkit.options.search"):
        page = tmdb.search.multi("heat").execute()

    assert [r.media_type for r in page.results] == ["movie", "tv"]
    assert "removed_person_results=1" in caplog.text


@responses.activate
def test_search_multi_keeps_people_when_asked(tmdb):
    responses.add(
        responses.GET,
        f"{BASE}/search/multi",
        json={"results": [{"id": 2, "media_type": "person", "name": "Al Pacino"}]},
        status=200,
    )

    page = tmdb.search.multi("pacino").include_people(True).execute()

    assert len(page.results) == 1
    assert query_of(responses.calls[0])["include_people"] == ["true"]


@responses.activate
def test_search_always_sends_query(tmdb):
    # Logic: The query is required; even an empty one reaches TMDB.
    responses.add(responses.GET, f"{BASE}/search/movie", json=PAGE, status=200)

    tmdb.search.movies("").execute()

    assert query_of(responses.calls[0])["query"] == [""]
    assert responses.calls[0].request.url.split("?", 1)[1].startswith("query=&")


@responses.activate
def test_auth_post_sends_body(tmdb):
    responses.add(
        responses.POST,
        f"{BASE}/authentication/session/new",
        json={"success": True, "session_id": "sess-1"},
        status=200,
    )

    session = tmdb.auth.create_session(CreateSessionRequest(request_token="tok")).execute()

    assert session.session_id == "sess-1"
    assert json.loads(responses.calls[0].request.body) == {"request_token": "tok"}


# --- 2. NEGATIVE TESTING (The Fragility) ---
@responses.activate
def test_guest_mode_without_session_fails_before_any_request(tmdb):
    # Logic: Validation errors must never cost a network round trip.
    with pytest.raises(ValidationError, match="session_id or guest_session_id"):
        tmdb.movies.account_states(550).for_guest().execute()

    assert len(responses.calls) == 0


@responses.activate
def test_guest_mode_accepts_either_session_kind(tmdb):
    responses.add(
        responses.GET,
        f"{BASE}/movie/550/account_states",
        json={"id": 550, "rated": False},
        status=200,
    )

    tmdb.movies.account_states(550).for_guest().session_id("s").execute()
    tmdb.movies.account_states(550).for_guest().guest_session_id("g").execute()

    assert len(responses.calls) == 2


def test_rating_value_is_bounded():
    with pytest.raises(pydantic.ValidationError):
        RatingRequest(value=11)


# --- 3. CONSTRAINTS (The Limits) ---
@responses.activate
def test_auth_get_drops_body(tmdb):
    responses.add(
        responses.GET,
        f"{BASE}/authentication/token/new",
        json={"success": True, "request_token": "tok"},
        status=200,
    )

    builder = AuthBuilder(
        tmdb.client,
        "/authentication/token/new",
        "GET",
        RequestTokenResponse,
        body={"ignored": True},
    )
    token = builder.execute()

    assert builder.body is None
    assert responses.calls[0].request.body is None
    assert token.request_token == "tok"


def test_context_manager_closes_client(tmdb):
    closed = []
    tmdb.client.session.close = lambda: closed.append(True)

    with tmdb as entered:
        assert entered is tmdb

    assert closed == [True]
