"""Tests for the transport executor."""

import httpx
import pytest
import respx

from spotify_web.constants import ContentType, Method
from spotify_web.request.descriptor import bearer, web_request
from spotify_web.transport import execute


@respx.mock
async def test_get_sends_url_and_headers() -> None:
    """Method, URL and headers from the descriptor reach the wire."""
    route = respx.get("https://api.spotify.com/v1/albums/123").mock(
        return_value=httpx.Response(200, json={"id": "123"})
    )
    request = (
        web_request()
        .with_path("albums/123")
        .with_access_token(bearer("token123"))
        .with_content_type(ContentType.JSON)
        .with_query_parameters({"market": "US"})
        .build()
    )

    response = await execute(request)

    assert response.json() == {"id": "123"}
    sent = route.calls[0].request
    assert sent.url.params["market"] == "US"
    assert sent.headers["Authorization"] == "Bearer token123"
    assert sent.headers["Content-Type"] == "application/json"


@respx.mock
async def test_accepts_unbuilt_descriptor() -> None:
    route = respx.put("https://api.spotify.com/v1/me/tracks").mock(return_value=httpx.Response(200))
    descriptor = (
        web_request()
        .with_path("me/tracks")
        .with_method(Method.PUT)
        .with_content_type(ContentType.JSON)
        .with_body_parameters({"ids": "a,b,c"})
    )

    await execute(descriptor)

    assert route.calls[0].request.content == b'{"ids":"a,b,c"}'


@respx.mock
async def test_non_2xx_returned_untouched() -> None:
    """Error statuses are handed back, not raised."""
    respx.get("https://api.spotify.com/v1/me").mock(
        return_value=httpx.Response(404, json={"error": {"status": 404, "message": "Not found"}})
    )

    response = await execute(web_request().with_path("me"))

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Not found"


@respx.mock
async def test_transport_error_propagates() -> None:
    """Connection failures surface as httpx exceptions, with a single attempt."""
    route = respx.get("https://api.spotify.com/v1/me").mock(side_effect=httpx.ConnectError("connection refused"))

    with pytest.raises(httpx.ConnectError):
        await execute(web_request().with_path("me"))
    assert route.call_count == 1


@respx.mock
async def test_injected_client_used() -> None:
    route = respx.get("https://api.spotify.com/v1/markets").mock(return_value=httpx.Response(200, json={}))

    async with httpx.AsyncClient() as client:
        response = await execute(web_request().with_path("markets"), http_client=client)
        assert not client.is_closed

    assert response.status_code == 200
    assert route.called
