from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.themoviedb.org/3"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "tmdbkit/0.1.0"


class TmdbSettings(BaseSettings):
    """
    Loads TMDB credentials and transport options from the environment / .env.

    The API key authenticates v3 calls; the bearer token (read access token)
    is required when base_url points at the v4 API.
    """

    api_key: str = Field(default="", alias="TMDB_API_KEY")
    bearer_token: str = Field(default="", alias="TMDB_BEARER_TOKEN")
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="TMDB_BASE_URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT, alias="TMDB_TIMEOUT")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, alias="TMDB_USER_AGENT")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )
