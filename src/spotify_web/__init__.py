"""Spotify Web API request construction and OAuth client."""

from spotify_web.auth import (
    AuthorizationContext,
    build_login_uri,
    exchange_authorization_code,
    generate_state,
    refresh_access_token,
    request_client_credentials_token,
)
from spotify_web.client import SpotifyClient
from spotify_web.constants import AuthorizationType, ContentType, GrantType, Method
from spotify_web.endpoints import ENDPOINTS, Endpoint, ParameterCarrier, PreflightFailure, get_endpoint
from spotify_web.exceptions import (
    AccessTokenMissingError,
    MissingPathArgumentError,
    SpotifyWebError,
    UnknownEndpointError,
)
from spotify_web.request import (
    PreparedRequest,
    RequestDescriptor,
    accounts_request,
    basic,
    bearer,
    sanitize_parameters,
    web_request,
)
from spotify_web.settings import SpotifyWebSettings, get_settings
from spotify_web.transport import execute

__all__ = [
    "ENDPOINTS",
    "AccessTokenMissingError",
    "AuthorizationContext",
    "AuthorizationType",
    "ContentType",
    "Endpoint",
    "GrantType",
    "Method",
    "MissingPathArgumentError",
    "ParameterCarrier",
    "PreflightFailure",
    "PreparedRequest",
    "RequestDescriptor",
    "SpotifyClient",
    "SpotifyWebError",
    "SpotifyWebSettings",
    "UnknownEndpointError",
    "accounts_request",
    "basic",
    "bearer",
    "build_login_uri",
    "exchange_authorization_code",
    "execute",
    "generate_state",
    "get_endpoint",
    "get_settings",
    "refresh_access_token",
    "request_client_credentials_token",
    "sanitize_parameters",
    "web_request",
]
