"""Tests for the endpoint table and pre-flight checks."""

import json

import pytest

from spotify_web.constants import Method
from spotify_web.endpoints import (
    ENDPOINTS,
    Endpoint,
    ParameterCarrier,
    PreflightFailure,
    get_endpoint,
)
from spotify_web.exceptions import MissingPathArgumentError, UnknownEndpointError
from spotify_web.request.descriptor import RequestDescriptor


def _prepare(name: str, **arguments: object) -> RequestDescriptor:
    prepared = get_endpoint(name).prepare("tok", **arguments)
    assert isinstance(prepared, RequestDescriptor)
    return prepared


def test_table_names_are_unique_and_keyed() -> None:
    for name, endpoint in ENDPOINTS.items():
        assert endpoint.name == name


def test_unknown_endpoint() -> None:
    with pytest.raises(UnknownEndpointError, match="no_such_thing"):
        get_endpoint("no_such_thing")


def test_path_arguments() -> None:
    endpoint = get_endpoint("get_category_playlists")
    assert endpoint.path_arguments() == ["category_id"]


def test_get_album() -> None:
    """Path placeholders are filled and remaining arguments go to the query."""
    request = _prepare("get_album", id="123", market="US").build()
    assert request.url == "https://api.spotify.com/v1/albums/123?market=US"
    assert request.method is Method.GET
    assert request.headers["Authorization"] == "Bearer tok"
    assert request.headers["Content-Type"] == "application/json"
    assert request.content is None


def test_missing_path_argument() -> None:
    with pytest.raises(MissingPathArgumentError, match="'id'"):
        get_endpoint("get_album").prepare("tok", market="US")


def test_optional_blank_parameters_omitted() -> None:
    request = _prepare("get_user_saved_albums", limit=20, offset=0, market="").build()
    assert request.url.endswith("me/albums?limit=20&offset=0")


def test_bulk_ids_joined_into_query() -> None:
    request = _prepare("get_several_albums", ids=["a", "b", "c"], market="").build()
    assert request.url == "https://api.spotify.com/v1/albums?ids=a%2Cb%2Cc"


def test_bulk_ids_joined_into_body() -> None:
    """Body-carried bulk endpoints send the joined ids as JSON."""
    request = _prepare("save_tracks", ids=["a", "b", "c"]).build()
    assert request.method is Method.PUT
    assert request.url == "https://api.spotify.com/v1/me/tracks"
    assert request.content == b'{"ids":"a,b,c"}'


def test_bulk_ids_over_ceiling() -> None:
    """Too many ids yields a structured failure instead of a request."""
    result = get_endpoint("get_several_albums").prepare("tok", ids=[str(i) for i in range(21)])
    assert isinstance(result, PreflightFailure)
    assert result.status == "400"
    assert result.message == "You exceeded the maximum (20) number of albums allowed."


def test_bulk_ids_at_ceiling_allowed() -> None:
    request = _prepare("get_several_albums", ids=[str(i) for i in range(20)])
    assert request.query_parameters is not None
    assert request.query_parameters["ids"].count(",") == 19


def test_bulk_ids_empty() -> None:
    result = get_endpoint("save_episodes").prepare("tok", ids=[])
    assert isinstance(result, PreflightFailure)
    assert result.message == "Episode ID(s) cannot be empty."


def test_bulk_ids_missing() -> None:
    result = get_endpoint("check_saved_shows").prepare("tok")
    assert isinstance(result, PreflightFailure)
    assert result.model_dump() == {"status": "400", "message": "Show ID(s) cannot be empty."}


def test_bulk_ids_pre_joined_string_counted() -> None:
    result = get_endpoint("get_several_albums").prepare("tok", ids=",".join(str(i) for i in range(25)))
    assert isinstance(result, PreflightFailure)


def test_volume_bounds() -> None:
    endpoint = get_endpoint("set_playback_volume")
    failure = endpoint.prepare("tok", volume_percent=101)
    assert isinstance(failure, PreflightFailure)
    assert "between 0 and 100" in failure.message
    assert isinstance(endpoint.prepare("tok", volume_percent=0, device_id=""), RequestDescriptor)


def test_seek_rejects_negative_position() -> None:
    assert isinstance(get_endpoint("seek_to_position").prepare("tok", position_ms=-1), PreflightFailure)
    request = _prepare("seek_to_position", position_ms=25000, device_id="").build()
    assert request.url.endswith("me/player/seek?position_ms=25000")


def test_limit_bounds_only_when_given() -> None:
    assert isinstance(get_endpoint("search").prepare("tok", q="abba", type="track", limit=51), PreflightFailure)
    request = _prepare("search", q="abba", type="track").build()
    assert request.url.endswith("search?q=abba&type=track")


def test_body_endpoint_keeps_nulls() -> None:
    request = _prepare("start_playback", context_uri="", uris=None, position_ms=0).build()
    assert request.url.endswith("me/player/play")
    assert json.loads(request.content or b"") == {"uris": None, "position_ms": 0}


def test_transfer_playback_device_ids_stay_a_list() -> None:
    request = _prepare("transfer_playback", device_ids=["d1"], play=True).build()
    assert json.loads(request.content or b"") == {"device_ids": ["d1"], "play": True}


def test_custom_endpoint() -> None:
    endpoint = Endpoint("follow", Method.PUT, "me/following", carrier=ParameterCarrier.BODY, max_ids=50, item="artist")
    request = endpoint.prepare("tok", ids=("x", "y"), type="artist")
    assert isinstance(request, RequestDescriptor)
    assert json.loads(request.build().content or b"") == {"ids": "x,y", "type": "artist"}


def test_numeric_strings_checked_against_bounds() -> None:
    request = _prepare("search", q="abba", type="track", limit="10").build()
    assert request.url.endswith("search?q=abba&type=track&limit=10")
    assert isinstance(_prepare("set_playback_volume", volume_percent="50"), RequestDescriptor)
    failure = get_endpoint("set_playback_volume").prepare("tok", volume_percent="150")
    assert isinstance(failure, PreflightFailure)
    assert "between 0 and 100" in failure.message


def test_non_numeric_bound_value() -> None:
    failure = get_endpoint("search").prepare("tok", q="abba", type="track", limit="ten")
    assert isinstance(failure, PreflightFailure)
    assert failure.message == '"limit" must be an integer.'


@pytest.mark.parametrize(
    ("name", "url"),
    [
        ("get_current_user_profile", "https://api.spotify.com/v1/me"),
        ("get_available_markets", "https://api.spotify.com/v1/markets"),
        ("get_available_devices", "https://api.spotify.com/v1/me/player/devices"),
    ],
)
def test_no_arguments_means_no_query(name: str, url: str) -> None:
    request = _prepare(name).build()
    assert request.url == url


def test_no_arguments_means_no_body() -> None:
    request = _prepare("start_playback").build()
    assert request.url == "https://api.spotify.com/v1/me/player/play"
    assert request.content is None


def test_recently_played_sends_before_over_after() -> None:
    request = _prepare("get_recently_played_tracks", limit=20, after=100, before=200).build()
    assert request.url.endswith("me/player/recently-played?limit=20&before=200")
    request = _prepare("get_recently_played_tracks", after=100, before="").build()
    assert request.url.endswith("me/player/recently-played?after=100")


def test_add_custom_playlist_cover_image() -> None:
    request = _prepare("add_custom_playlist_cover_image", id="pl1", image_data="aGVsbG8=").build()
    assert request.method is Method.PUT
    assert request.url == "https://api.spotify.com/v1/playlists/pl1/images"
    assert json.loads(request.content or b"") == {"image_data": "aGVsbG8="}
