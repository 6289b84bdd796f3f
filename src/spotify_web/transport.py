"""Single-shot HTTP execution of prepared requests."""

import logging
from urllib.parse import urlsplit

import httpx

from spotify_web.constants import DEFAULT_REQUEST_TIMEOUT
from spotify_web.request.descriptor import PreparedRequest, RequestDescriptor

logger = logging.getLogger(__name__)


def _loggable_url(url: str) -> str:
    """Scheme, host and path only; query strings may carry identifiers or state."""
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}"


async def execute(
    request: PreparedRequest | RequestDescriptor,
    *,
    http_client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
) -> httpx.Response:
    """Send *request* once and return the response untouched.

    Status codes are not interpreted and the body is not decoded. Transport
    failures (connection errors, DNS failures, timeouts) propagate as
    ``httpx`` exceptions. When *http_client* is given it is used as-is and
    *timeout* is left to its own configuration.
    """
    if isinstance(request, RequestDescriptor):
        request = request.build()

    logger.debug(
        "Sending %s %s",
        request.method,
        _loggable_url(request.url),
        extra={"http_method": str(request.method), "url": _loggable_url(request.url)},
    )

    if http_client is not None:
        response = await http_client.request(
            request.method,
            request.url,
            headers=dict(request.headers),
            content=request.content,
        )
    else:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                content=request.content,
            )

    logger.debug("Received HTTP %d from %s", response.status_code, _loggable_url(request.url))
    return response
