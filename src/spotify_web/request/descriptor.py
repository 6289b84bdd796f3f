"""Immutable request descriptors and the transport-level requests built from them.

A :class:`RequestDescriptor` is configured through ``with_*`` steps, each of
which returns a new descriptor::

    request = (
        web_request()
        .with_path(f"albums/{album_id}")
        .with_method(Method.GET)
        .with_access_token(bearer(token))
        .with_content_type(ContentType.JSON)
        .with_query_parameters({"market": market})
        .build()
    )

Descriptors derived from a shared base never see each other's changes, so a
base can be reused freely from concurrent tasks.
"""

import base64
import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from spotify_web.constants import (
    AUTHORIZATION_CODE_FIELDS,
    SPOTIFY_ACCOUNTS_BASE,
    SPOTIFY_API_BASE,
    AuthorizationType,
    ContentType,
    Method,
)
from spotify_web.request.codec import encode_body, encode_query


def bearer(access_token: str) -> str:
    """Authorization header value for a bearer token."""
    return f"{AuthorizationType.BEARER} {access_token}"


def basic(client_id: str, client_secret: str) -> str:
    """Authorization header value for HTTP Basic client authentication."""
    credential = base64.b64encode(f"{client_id}:{client_secret}".encode()).decode()
    return f"{AuthorizationType.BASIC} {credential}"


def _freeze(parameters: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    if parameters is None:
        return None
    return MappingProxyType(dict(parameters))


@dataclass(frozen=True, slots=True)
class PreparedRequest:
    """A fully-encoded request, ready to hand to the transport."""

    method: Method
    url: str
    headers: Mapping[str, str]
    content: bytes | None = None


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Not-yet-sent description of a single HTTP request."""

    base_uri: str = ""
    path: str = ""
    method: Method = Method.GET
    content_type: ContentType | None = None
    authorization: str | None = None
    query_parameters: Mapping[str, Any] | None = None
    body_parameters: Mapping[str, Any] | None = None
    form_fields: tuple[str, ...] = AUTHORIZATION_CODE_FIELDS

    # ------------------------------------------------------------------
    # Configuration steps
    # ------------------------------------------------------------------

    def with_uri(self, base_uri: str) -> "RequestDescriptor":
        return dataclasses.replace(self, base_uri=base_uri)

    def with_path(self, path: str) -> "RequestDescriptor":
        return dataclasses.replace(self, path=path)

    def with_method(self, method: Method | str) -> "RequestDescriptor":
        return dataclasses.replace(self, method=Method(method))

    def with_content_type(self, content_type: ContentType | str) -> "RequestDescriptor":
        return dataclasses.replace(self, content_type=ContentType(content_type))

    def with_access_token(self, authorization: str) -> "RequestDescriptor":
        """Set the complete ``Authorization`` header value, e.g. ``bearer(token)``."""
        return dataclasses.replace(self, authorization=authorization)

    def with_query_parameters(self, parameters: Mapping[str, Any] | None) -> "RequestDescriptor":
        return dataclasses.replace(self, query_parameters=_freeze(parameters))

    def with_body_parameters(self, parameters: Mapping[str, Any] | None) -> "RequestDescriptor":
        return dataclasses.replace(self, body_parameters=_freeze(parameters))

    def with_form_fields(self, fields: Iterable[str]) -> "RequestDescriptor":
        """Set which body keys (and in which order) a form-encoded body carries."""
        return dataclasses.replace(self, form_fields=tuple(fields))

    # ------------------------------------------------------------------
    # Derived transport fields
    # ------------------------------------------------------------------

    def full_uri(self) -> str:
        """Base URI, path and (if query parameters were given) the encoded query."""
        uri = self.base_uri + self.path
        if self.query_parameters is not None:
            uri += "?" + encode_query(self.query_parameters)
        return uri

    def headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.authorization is not None:
            headers["Authorization"] = self.authorization
        content_type = self.content_type
        if content_type is None and self.body_parameters is not None:
            # Bodies without a declared type are encoded as JSON.
            content_type = ContentType.JSON
        if content_type is not None:
            headers["Content-Type"] = str(content_type)
        return headers

    def body(self) -> bytes | None:
        if self.body_parameters is None:
            return None
        return encode_body(self.body_parameters, self.content_type, self.form_fields)

    def build(self) -> PreparedRequest:
        """Materialize the request. Pure: performs no I/O."""
        return PreparedRequest(
            method=self.method,
            url=self.full_uri(),
            headers=MappingProxyType(self.headers()),
            content=self.body(),
        )


def web_request() -> RequestDescriptor:
    """A descriptor targeting the Spotify Web API."""
    return RequestDescriptor(base_uri=SPOTIFY_API_BASE)


def accounts_request() -> RequestDescriptor:
    """A descriptor targeting the Spotify Accounts service."""
    return RequestDescriptor(base_uri=SPOTIFY_ACCOUNTS_BASE)
