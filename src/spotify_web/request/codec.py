"""Query-string and request-body encoding for sanitized parameter maps."""

import json
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote, urlencode

from spotify_web.constants import ContentType
from spotify_web.request.sanitize import sanitize_parameters


def _wire_value(value: Any) -> Any:
    """Render booleans the way JavaScript-style query strings expect them."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def encode_query(parameters: Mapping[str, Any]) -> str:
    """Encode *parameters* as an RFC 3986 query string (without the ``?``).

    Blank strings and ``None`` values are dropped entirely. Lists are not
    expanded; callers join multi-valued parameters beforehand.
    """
    pairs = [
        (key, _wire_value(value))
        for key, value in sanitize_parameters(parameters).items()
        if value is not None
    ]
    return urlencode(pairs, quote_via=quote)


def encode_form(parameters: Mapping[str, Any], fields: Iterable[str]) -> str:
    """Encode the named *fields* of *parameters* as form data, in field order.

    Keys outside *fields* are ignored, as are missing, ``None`` and blank
    values.
    """
    sanitized = sanitize_parameters(parameters)
    pairs = [
        (field, _wire_value(sanitized[field]))
        for field in fields
        if sanitized.get(field) is not None
    ]
    return urlencode(pairs)


def encode_json(parameters: Mapping[str, Any]) -> str:
    """Encode *parameters* as a compact JSON object. ``None`` becomes ``null``."""
    return json.dumps(sanitize_parameters(parameters), separators=(",", ":"))


def encode_body(
    parameters: Mapping[str, Any],
    content_type: ContentType | str | None,
    form_fields: Iterable[str] = (),
) -> bytes:
    """Encode a body map according to *content_type*.

    Form encoding applies only to ``application/x-www-form-urlencoded``;
    any other content type (or none) is sent as JSON.
    """
    if content_type == ContentType.FORM:
        return encode_form(parameters, form_fields).encode()
    return encode_json(parameters).encode()
