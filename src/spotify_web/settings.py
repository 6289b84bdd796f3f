"""Client configuration loaded from environment variables."""

import functools

from pydantic_settings import BaseSettings

from spotify_web.constants import (
    DEFAULT_REFRESH_GRANT_TYPE,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_RESPONSE_TYPE,
    DEFAULT_STATE_LENGTH,
    GrantType,
)


class SpotifyWebSettings(BaseSettings):
    """Spotify Web client configuration."""

    # Spotify app credentials
    SPOTIFY_CLIENT_ID: str = ""
    SPOTIFY_CLIENT_SECRET: str = ""
    SPOTIFY_REDIRECT_URI: str = "http://localhost:8000/callback"

    # Authorization request
    SPOTIFY_RESPONSE_TYPE: str = DEFAULT_RESPONSE_TYPE
    SPOTIFY_SCOPES: str = ""  # space-separated
    SPOTIFY_STATE_LENGTH: int = DEFAULT_STATE_LENGTH
    SPOTIFY_REFRESH_GRANT_TYPE: GrantType = DEFAULT_REFRESH_GRANT_TYPE

    # Transport
    SPOTIFY_REQUEST_TIMEOUT: float = DEFAULT_REQUEST_TIMEOUT

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # "json" or "text"

    model_config = {"env_prefix": ""}

    def scope_list(self) -> list[str]:
        """Configured scopes in order, split on whitespace."""
        return self.SPOTIFY_SCOPES.split()


@functools.lru_cache(maxsize=1)
def get_settings() -> SpotifyWebSettings:
    """Return cached settings singleton."""
    return SpotifyWebSettings()
