"""OAuth 2.0 authorization: client context, CSRF state and token exchanges."""

from spotify_web.auth.context import AuthorizationContext
from spotify_web.auth.flow import (
    authorization_code_request,
    build_login_uri,
    client_credentials_request,
    exchange_authorization_code,
    refresh_access_token,
    refresh_token_request,
    request_client_credentials_token,
)
from spotify_web.auth.state import generate_state

__all__ = [
    "AuthorizationContext",
    "authorization_code_request",
    "build_login_uri",
    "client_credentials_request",
    "exchange_authorization_code",
    "generate_state",
    "refresh_access_token",
    "refresh_token_request",
    "request_client_credentials_token",
]
