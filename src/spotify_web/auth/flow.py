"""OAuth 2.0 authorization flow against the Spotify Accounts service.

Every function takes the client configuration explicitly and builds its
request through :func:`spotify_web.request.accounts_request`. Responses are
returned decoded but otherwise uninterpreted: an error payload from the
token endpoint comes back to the caller just like a successful one.
"""

import logging
import random
from typing import Any

import httpx

from spotify_web.auth.context import AuthorizationContext
from spotify_web.auth.state import generate_state
from spotify_web.constants import (
    AUTHORIZATION_CODE_FIELDS,
    AUTHORIZE_PATH,
    CLIENT_CREDENTIALS_FIELDS,
    DEFAULT_REFRESH_GRANT_TYPE,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_STATE_LENGTH,
    REFRESH_TOKEN_FIELDS,
    TOKEN_PATH,
    ContentType,
    GrantType,
    Method,
)
from spotify_web.request.descriptor import RequestDescriptor, accounts_request, basic
from spotify_web.transport import execute

logger = logging.getLogger(__name__)


def build_login_uri(
    context: AuthorizationContext,
    *,
    state: str | None = None,
    state_length: int = DEFAULT_STATE_LENGTH,
    random_source: random.Random | None = None,
) -> str:
    """Return the authorize URL to redirect a user-agent to.

    A fresh state token is generated unless *state* is given. The request is
    only built, never sent.
    """
    if state is None:
        state = generate_state(state_length, random_source)
    descriptor = (
        accounts_request()
        .with_path(AUTHORIZE_PATH)
        .with_method(Method.GET)
        .with_query_parameters(
            {
                "response_type": context.response_type,
                "client_id": context.client_id,
                "scope": context.scope,
                "redirect_uri": context.redirect_uri,
                "state": state,
            }
        )
    )
    return descriptor.full_uri()


def _token_request(authorization: str | None = None) -> RequestDescriptor:
    descriptor = (
        accounts_request()
        .with_path(TOKEN_PATH)
        .with_method(Method.POST)
        .with_content_type(ContentType.FORM)
    )
    if authorization is not None:
        descriptor = descriptor.with_access_token(authorization)
    return descriptor


def authorization_code_request(context: AuthorizationContext, code: str) -> RequestDescriptor:
    """Descriptor for exchanging an authorization code for tokens."""
    return (
        _token_request(basic(context.client_id, context.client_secret))
        .with_form_fields(AUTHORIZATION_CODE_FIELDS)
        .with_body_parameters(
            {
                "code": code,
                "grant_type": GrantType.AUTHORIZATION_CODE,
                "redirect_uri": context.redirect_uri,
            }
        )
    )


def refresh_token_request(
    context: AuthorizationContext,
    refresh_token: str,
    *,
    grant_type: GrantType | str = DEFAULT_REFRESH_GRANT_TYPE,
) -> RequestDescriptor:
    """Descriptor for exchanging a refresh token for a new access token."""
    return (
        _token_request()
        .with_form_fields(REFRESH_TOKEN_FIELDS)
        .with_body_parameters(
            {
                "client_id": context.client_id,
                "grant_type": str(grant_type),
                "refresh_token": refresh_token,
            }
        )
    )


def client_credentials_request(context: AuthorizationContext) -> RequestDescriptor:
    """Descriptor for an app-only client-credentials token."""
    return (
        _token_request(basic(context.client_id, context.client_secret))
        .with_form_fields(CLIENT_CREDENTIALS_FIELDS)
        .with_body_parameters(
            {
                "grant_type": GrantType.CLIENT_CREDENTIALS,
                "redirect_uri": context.redirect_uri,
            }
        )
    )


async def exchange_authorization_code(
    context: AuthorizationContext,
    code: str,
    *,
    http_client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
) -> dict[str, Any]:
    """Exchange an authorization code and return the decoded token payload."""
    logger.info("Exchanging authorization code for client %s", context.client_id)
    response = await execute(
        authorization_code_request(context, code),
        http_client=http_client,
        timeout=timeout,
    )
    payload: dict[str, Any] = response.json()
    return payload


async def refresh_access_token(
    context: AuthorizationContext,
    refresh_token: str,
    *,
    grant_type: GrantType | str = DEFAULT_REFRESH_GRANT_TYPE,
    http_client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
) -> dict[str, Any]:
    """Exchange a refresh token and return the decoded token payload.

    The default *grant_type* is ``authorization_code``, which is what this
    call has always sent. The token endpoint documents ``refresh_token``;
    pass ``GrantType.REFRESH_TOKEN`` once the server contract is confirmed.
    """
    if grant_type != GrantType.REFRESH_TOKEN:
        logger.warning("Refreshing access token with non-standard grant_type=%s", grant_type)
    logger.info("Refreshing access token for client %s", context.client_id)
    response = await execute(
        refresh_token_request(context, refresh_token, grant_type=grant_type),
        http_client=http_client,
        timeout=timeout,
    )
    payload: dict[str, Any] = response.json()
    return payload


async def request_client_credentials_token(
    context: AuthorizationContext,
    *,
    http_client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
) -> str | None:
    """Request an app-only token and return just its ``access_token`` field."""
    logger.info("Requesting client-credentials token for client %s", context.client_id)
    response = await execute(
        client_credentials_request(context),
        http_client=http_client,
        timeout=timeout,
    )
    access_token: str | None = response.json().get("access_token")
    return access_token
