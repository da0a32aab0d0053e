import json
from urllib.parse import parse_qs, urlparse

import pytest
import requests
import responses

from tmdbkit.client.client import TmdbClient
from tmdbkit.client.errors import (
    APIError,
    ConfigurationError,
    DecodingError,
    RequestTimeoutError,
    TransportError,
)
from tmdbkit.models.common import RatingRequest, StatusResponse
from tmdbkit.models.movies import MoviePaginatedResults

V3 = "https://api.test.com/3"
V4 = "https://api.test.com/4"


# --- FIXTURES ---
# Logic: Avoids repeating setup code in every test.
@pytest.fixture
def client():
    return TmdbClient(api_key="test_key", base_url=V3)


@pytest.fixture
def v4_client():
    return TmdbClient(api_key="test_key", bearer_token="test_token", base_url=V4)


def query_of(call):
    return parse_qs(urlparse(call.request.url).query, keep_blank_values=True)


# --- 1. POSITIVE TESTING (The Contract) ---
@responses.activate
def test_execute_decodes_success_into_model(client):
    # Logic: Prove the client parses a standard successful JSON response.
    responses.add(
        responses.GET,
        f"{V3}/movie/popular",
        json={"page": 1, "results": [{"id": 550, "title": "Fight Club"}], "total_pages": 1},
        status=200,
    )

    result = client.execute(
        "GET", "/movie/popular", params={"page": "1"}, response_model=MoviePaginatedResults
    )

    assert isinstance(result, MoviePaginatedResults)
    assert result.results[0].title == "Fight Club"
    assert query_of(responses.calls[0]) == {"page": ["1"], "api_key": ["test_key"]}
    assert responses.calls[0].request.headers["Accept"] == "application/json"
    assert responses.calls[0].request.headers["User-Agent"].startswith("tmdbkit/")


@responses.activate
def test_v4_uses_bearer_token_and_never_api_key(v4_client):
    # Logic: The base URL path decides the auth scheme.
    responses.add(responses.GET, f"{V4}/list/1", json={}, status=200)

    v4_client.execute("GET", "/list/1")

    request = responses.calls[0].request
    assert "api_key" not in query_of(responses.calls[0])
    assert request.headers["Authorization"] == "Bearer test_token"


@responses.activate
def test_v3_sends_bearer_header_when_configured():
    client = TmdbClient(api_key="test_key", bearer_token="test_token", base_url=V3)
    responses.add(responses.GET, f"{V3}/configuration", json={}, status=200)

    client.execute("GET", "/configuration")

    assert query_of(responses.calls[0]) == {"api_key": ["test_key"]}
    assert responses.calls[0].request.headers["Authorization"] == "Bearer test_token"


@responses.activate
def test_body_is_sent_as_json(client):
    # Logic: Models are dumped by alias; Content-Type is set only with a body.
    responses.add(
        responses.POST,
        f"{V3}/movie/550/rating",
        json={"status_code": 1, "status_message": "Success."},
        status=201,
    )

    result = client.execute(
        "POST",
        "/movie/550/rating",
        body=RatingRequest(value=8.5),
        response_model=StatusResponse,
    )

    request = responses.calls[0].request
    assert json.loads(request.body) == {"value": 8.5}
    assert request.headers["Content-Type"] == "application/json"
    assert result.status_code == 1


@responses.activate
def test_execute_without_response_model_returns_none(client):
    responses.add(responses.DELETE, f"{V3}/movie/550/rating", body="", status=200)

    assert client.execute("DELETE", "/movie/550/rating") is None
    assert "Content-Type" not in responses.calls[0].request.headers


def test_build_url_appends_encoded_query(client):
    url = client.build_url("/discover/movie", {"with_genres": "28,12"})

    assert url == f"{V3}/discover/movie?with_genres=28,12&api_key=test_key"


def test_trailing_slash_is_trimmed_from_base_url():
    client = TmdbClient(api_key="k", base_url=f"{V3}/")

    assert client.base_url == V3


def test_context_manager_closes_session():
    session = requests.Session()
    closed = []
    session.close = lambda: closed.append(True)

    with TmdbClient(api_key="k", session=session) as client:
        assert client.session is session

    assert closed == [True]


# --- 2. NEGATIVE TESTING (The Fragility) ---
@responses.activate
def test_api_error_decodes_tmdb_status(client):
    # Logic: TMDB's own error body becomes a typed APIError.
    responses.add(
        responses.GET,
        f"{V3}/movie/1",
        json={"status_code": 34, "status_message": "The resource could not be found.", "success": False},
        status=404,
    )

    with pytest.raises(APIError) as exc_info:
        client.execute("GET", "/movie/1")

    error = exc_info.value
    assert error.is_status(404)
    assert error.tmdb_status_code == 34
    assert error.message == "The resource could not be found."
    assert "HTTP 404" in str(error)
    assert len(responses.calls) == 1


@responses.activate
def test_api_error_falls_back_to_raw_body(client):
    # Logic: Non-JSON error bodies still surface their text.
    responses.add(responses.GET, f"{V3}/movie/1", body="upstream exploded", status=502)

    with pytest.raises(APIError) as exc_info:
        client.execute("GET", "/movie/1")

    assert exc_info.value.status_code == 502
    assert exc_info.value.tmdb_status_code is None
    assert "upstream exploded" in exc_info.value.message


@responses.activate
def test_undecodable_success_body_raises_decoding_error(client):
    responses.add(responses.GET, f"{V3}/movie/popular", body="<html>", status=200)

    with pytest.raises(DecodingError) as exc_info:
        client.execute("GET", "/movie/popular", response_model=MoviePaginatedResults)

    assert exc_info.value.target == "MoviePaginatedResults"
    assert exc_info.value.body == "<html>"


@responses.activate
def test_timeout_is_distinguished_from_other_transport_errors(client):
    responses.add(
        responses.GET,
        f"{V3}/movie/popular",
        body=requests.exceptions.ConnectTimeout("too slow"),
    )

    with pytest.raises(RequestTimeoutError) as exc_info:
        client.execute("GET", "/movie/popular")

    assert isinstance(exc_info.value.cause, requests.exceptions.Timeout)


@responses.activate
def test_connection_failure_raises_transport_error(client):
    responses.add(
        responses.GET,
        f"{V3}/movie/popular",
        body=requests.exceptions.ConnectionError("refused"),
    )

    with pytest.raises(TransportError) as exc_info:
        client.execute("GET", "/movie/popular")

    assert not isinstance(exc_info.value, RequestTimeoutError)
    assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)


@responses.activate
def test_api_error_with_invalid_key_message(client):
    responses.add(
        responses.GET,
        f"{V3}/movie/550",
        json={"status_code": 7, "status_message": "Invalid API key"},
        status=401,
    )

    with pytest.raises(APIError) as exc_info:
        client.execute("GET", "/movie/550")

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Invalid API key"
    assert exc_info.value.tmdb_status_code == 7


@responses.activate
def test_api_error_without_status_message_falls_back_to_raw_body(client):
    # Logic: A JSON error body with no message is reported verbatim.
    responses.add(responses.GET, f"{V3}/movie/550", body='{"status_code": 7}', status=401)

    with pytest.raises(APIError) as exc_info:
        client.execute("GET", "/movie/550")

    error = exc_info.value
    assert error.status_code == 401
    assert error.tmdb_status_code is None
    assert error.message == 'unexpected status code 401 with body: {"status_code": 7}'


# --- 3. CONSTRAINTS (The Limits) ---
def test_missing_api_key_is_rejected():
    with pytest.raises(ConfigurationError):
        TmdbClient(api_key="")


def test_relative_base_url_is_rejected():
    with pytest.raises(ConfigurationError):
        TmdbClient(api_key="k", base_url="api.test.com/3")


def test_v4_base_url_requires_bearer_token():
    with pytest.raises(ConfigurationError):
        TmdbClient(api_key="k", base_url=V4)
