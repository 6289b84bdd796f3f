"""Spotify Web API URLs, wire-level enums and client defaults."""

import enum

# Spotify Web API base (resource server)
SPOTIFY_API_BASE = "https://api.spotify.com/v1/"

# Spotify Accounts service (authorization server)
SPOTIFY_ACCOUNTS_BASE = "https://accounts.spotify.com/"
AUTHORIZE_PATH = "authorize"
TOKEN_PATH = "api/token"


class Method(enum.StrEnum):
    """HTTP methods used by the Web API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class ContentType(enum.StrEnum):
    """Request body encodings."""

    JSON = "application/json"
    FORM = "application/x-www-form-urlencoded"


class AuthorizationType(enum.StrEnum):
    """Authorization header schemes."""

    BASIC = "Basic"
    BEARER = "Bearer"


class GrantType(enum.StrEnum):
    """OAuth 2.0 grant types accepted by the token endpoint."""

    AUTHORIZATION_CODE = "authorization_code"
    CLIENT_CREDENTIALS = "client_credentials"
    REFRESH_TOKEN = "refresh_token"


# Form fields posted to the token endpoint, in wire order
AUTHORIZATION_CODE_FIELDS = ("code", "grant_type", "redirect_uri")
REFRESH_TOKEN_FIELDS = ("client_id", "grant_type", "refresh_token")
CLIENT_CREDENTIALS_FIELDS = ("grant_type", "redirect_uri")

# The token refresh call has always sent the authorization-code grant type.
DEFAULT_REFRESH_GRANT_TYPE = GrantType.AUTHORIZATION_CODE

# Client defaults
DEFAULT_RESPONSE_TYPE = "code"
DEFAULT_STATE_LENGTH = 16
DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds
STATE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"

# Pre-flight validation
PREFLIGHT_STATUS = "400"
