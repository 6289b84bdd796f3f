"""Request construction: sanitizing, encoding and immutable descriptors."""

from spotify_web.request.codec import encode_body, encode_form, encode_json, encode_query
from spotify_web.request.descriptor import (
    PreparedRequest,
    RequestDescriptor,
    accounts_request,
    basic,
    bearer,
    web_request,
)
from spotify_web.request.sanitize import is_blank, sanitize_parameters

__all__ = [
    "PreparedRequest",
    "RequestDescriptor",
    "accounts_request",
    "basic",
    "bearer",
    "encode_body",
    "encode_form",
    "encode_json",
    "encode_query",
    "is_blank",
    "sanitize_parameters",
    "web_request",
]
