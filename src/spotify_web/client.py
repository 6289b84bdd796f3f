"""Spotify Web API async client.

Holds the OAuth client configuration and the caller-managed access token.
Responses from resource endpoints are returned raw: decoding JSON and
inspecting the status code is left to the caller.
"""

import logging
import random
from typing import Any

import httpx

from spotify_web.auth.context import AuthorizationContext
from spotify_web.auth.flow import (
    build_login_uri,
    exchange_authorization_code,
    refresh_access_token,
    request_client_credentials_token,
)
from spotify_web.constants import (
    DEFAULT_REFRESH_GRANT_TYPE,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_STATE_LENGTH,
    GrantType,
)
from spotify_web.endpoints import PreflightFailure, get_endpoint
from spotify_web.exceptions import AccessTokenMissingError
from spotify_web.request.descriptor import PreparedRequest, RequestDescriptor
from spotify_web.settings import SpotifyWebSettings
from spotify_web.transport import execute

logger = logging.getLogger(__name__)


class SpotifyClient:
    """Async Spotify Web API client.

    The only mutable state is the access token, written through
    :meth:`set_access_token`. Tokens are never refreshed automatically and
    expiry is not tracked.

    An ``httpx.AsyncClient`` may be injected to share a connection pool;
    otherwise each call opens its own. The caller owns any injected client.
    """

    def __init__(
        self,
        context: AuthorizationContext,
        *,
        access_token: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        state_length: int = DEFAULT_STATE_LENGTH,
        refresh_grant_type: GrantType = DEFAULT_REFRESH_GRANT_TYPE,
        random_source: random.Random | None = None,
    ) -> None:
        self._context = context
        self._access_token = access_token
        self._http_client = http_client
        self._request_timeout = request_timeout
        self._state_length = state_length
        self._refresh_grant_type = refresh_grant_type
        self._random_source = random_source

    @classmethod
    def from_settings(cls, settings: SpotifyWebSettings, **kwargs: Any) -> "SpotifyClient":
        """Create a client configured from :class:`SpotifyWebSettings`."""
        kwargs.setdefault("request_timeout", settings.SPOTIFY_REQUEST_TIMEOUT)
        kwargs.setdefault("state_length", settings.SPOTIFY_STATE_LENGTH)
        kwargs.setdefault("refresh_grant_type", settings.SPOTIFY_REFRESH_GRANT_TYPE)
        return cls(AuthorizationContext.from_settings(settings), **kwargs)

    @property
    def context(self) -> AuthorizationContext:
        return self._context

    @property
    def access_token(self) -> str | None:
        return self._access_token

    def set_access_token(self, access_token: str | None) -> None:
        """Store the bearer token used for resource calls."""
        self._access_token = access_token

    # -------------------------------------------------------------------
    # Authorization
    # -------------------------------------------------------------------

    def login_uri(self, *, state: str | None = None) -> str:
        """Authorize URL with a freshly generated state token."""
        return build_login_uri(
            self._context,
            state=state,
            state_length=self._state_length,
            random_source=self._random_source,
        )

    async def exchange_code(self, code: str) -> dict[str, Any]:
        """Exchange an authorization code; returns the decoded token payload."""
        return await exchange_authorization_code(
            self._context,
            code,
            http_client=self._http_client,
            timeout=self._request_timeout,
        )

    async def refresh(self, refresh_token: str, *, grant_type: GrantType | str | None = None) -> dict[str, Any]:
        """Exchange a refresh token; returns the decoded token payload."""
        return await refresh_access_token(
            self._context,
            refresh_token,
            grant_type=grant_type or self._refresh_grant_type,
            http_client=self._http_client,
            timeout=self._request_timeout,
        )

    async def client_credentials_token(self) -> str | None:
        """Request an app-only token; returns only the access token string."""
        return await request_client_credentials_token(
            self._context,
            http_client=self._http_client,
            timeout=self._request_timeout,
        )

    # -------------------------------------------------------------------
    # Resource calls
    # -------------------------------------------------------------------

    async def send(self, request: RequestDescriptor | PreparedRequest) -> httpx.Response:
        """Send a descriptor built by the caller and return the raw response."""
        return await execute(request, http_client=self._http_client, timeout=self._request_timeout)

    async def call(self, endpoint_name: str, **arguments: Any) -> httpx.Response | PreflightFailure:
        """Call a named endpoint from the endpoint table.

        Path placeholders and parameters are both taken from *arguments*.
        A :class:`PreflightFailure` is returned without touching the network
        when local validation fails.

        Raises:
            AccessTokenMissingError: If no access token has been set.
            UnknownEndpointError: If *endpoint_name* is not in the table.
        """
        if self._access_token is None:
            raise AccessTokenMissingError()
        endpoint = get_endpoint(endpoint_name)
        prepared = endpoint.prepare(self._access_token, **arguments)
        if isinstance(prepared, PreflightFailure):
            logger.info("Pre-flight check failed for %s: %s", endpoint_name, prepared.message)
            return prepared
        return await self.send(prepared)
