import pytest

from tmdbkit.client.client import TmdbClient
from tmdbkit.client.errors import ConfigurationError
from tmdbkit.config.tmdb_settings import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, TmdbSettings
from tmdbkit.tmdb import Tmdb

ENV_VARS = (
    "TMDB_API_KEY",
    "TMDB_BEARER_TOKEN",
    "TMDB_BASE_URL",
    "TMDB_TIMEOUT",
    "TMDB_USER_AGENT",
)


# --- FIXTURES ---
# Logic: Start every test from a clean environment and ignore any local .env.
@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("TMDB_API_KEY", "env_key")
    monkeypatch.setenv("TMDB_BEARER_TOKEN", "env_token")
    monkeypatch.setenv("TMDB_BASE_URL", "https://api.test.com/4")
    monkeypatch.setenv("TMDB_TIMEOUT", "2.5")

    settings = TmdbSettings(_env_file=None)

    assert settings.api_key == "env_key"
    assert settings.bearer_token == "env_token"
    assert settings.timeout == 2.5

    client = TmdbClient.from_settings(settings)
    assert client.is_v4 is True
    assert client.timeout == 2.5


def test_settings_defaults():
    settings = TmdbSettings(_env_file=None)

    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.api_key == ""


def test_facade_from_settings(monkeypatch):
    monkeypatch.setenv("TMDB_API_KEY", "env_key")

    tmdb = Tmdb.from_settings(TmdbSettings(_env_file=None))

    assert tmdb.client.base_url == DEFAULT_BASE_URL
    assert tmdb.movies.client is tmdb.client


def test_missing_key_in_environment_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        TmdbClient.from_settings(TmdbSettings(_env_file=None))
