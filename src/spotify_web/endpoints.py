"""Declarative table of Spotify Web API endpoints.

Each :class:`Endpoint` names a path template, a method, and whether its
parameters travel in the query string or the JSON body. Bulk endpoints carry
an id ceiling that is checked locally before anything is sent; a violation
produces a :class:`PreflightFailure` value instead of a request.
"""

import enum
import string
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel

from spotify_web.constants import PREFLIGHT_STATUS, ContentType, Method
from spotify_web.exceptions import MissingPathArgumentError, UnknownEndpointError
from spotify_web.request.descriptor import RequestDescriptor, bearer, web_request
from spotify_web.request.sanitize import is_blank

_formatter = string.Formatter()


def _absent(value: Any) -> bool:
    return value is None or is_blank(value)


class ParameterCarrier(enum.StrEnum):
    """Where an endpoint's parameters are sent."""

    QUERY = "query"
    BODY = "body"


class PreflightFailure(BaseModel):
    """Local validation failure, returned in place of a response."""

    status: str = PREFLIGHT_STATUS
    message: str


@dataclass(frozen=True, slots=True)
class ParameterBound:
    """Inclusive numeric range for a single parameter."""

    name: str
    minimum: int | None = None
    maximum: int | None = None
    message: str = ""

    def check(self, value: Any) -> PreflightFailure | None:
        if _absent(value):
            return None
        try:
            number = int(value)
        except (TypeError, ValueError):
            return PreflightFailure(message=f'"{self.name}" must be an integer.')
        if (self.minimum is not None and number < self.minimum) or (
            self.maximum is not None and number > self.maximum
        ):
            return PreflightFailure(message=self.message or f'"{self.name}" is out of range.')
        return None


@dataclass(frozen=True, slots=True)
class Endpoint:
    """One Web API operation."""

    name: str
    method: Method
    path: str
    carrier: ParameterCarrier = ParameterCarrier.QUERY
    max_ids: int | None = None
    item: str = "item"
    bounds: tuple[ParameterBound, ...] = ()
    exclusive: tuple[str, ...] = ()

    def path_arguments(self) -> list[str]:
        """Placeholder names in the path template, in order."""
        return [field for _, field, _, _ in _formatter.parse(self.path) if field]

    def check_ids(self, ids: str | Sequence[str] | None) -> PreflightFailure | str:
        """Validate the id count against the ceiling, then join with commas."""
        if isinstance(ids, str):
            id_list = [part for part in ids.split(",") if part.strip()]
        else:
            id_list = list(ids or [])
        if self.max_ids is not None and len(id_list) > self.max_ids:
            return PreflightFailure(
                message=f"You exceeded the maximum ({self.max_ids}) number of {self.item}s allowed."
            )
        if len(id_list) < 1:
            return PreflightFailure(message=f"{self.item.capitalize()} ID(s) cannot be empty.")
        return ",".join(id_list)

    def prepare(self, access_token: str, **arguments: Any) -> RequestDescriptor | PreflightFailure:
        """Build the descriptor for a call, or the pre-flight failure that stops it.

        Path placeholders are filled from *arguments*; whatever remains is
        the parameter map for the endpoint's carrier.
        """
        path_values: dict[str, Any] = {}
        for name in self.path_arguments():
            if name not in arguments:
                raise MissingPathArgumentError(self.name, name)
            path_values[name] = arguments.pop(name)

        # At most one of the exclusive parameters is sent; earlier names win.
        given = [name for name in self.exclusive if not _absent(arguments.get(name))]
        for name in given[1:]:
            del arguments[name]

        if self.max_ids is not None:
            joined = self.check_ids(arguments.get("ids"))
            if isinstance(joined, PreflightFailure):
                return joined
            arguments["ids"] = joined

        for bound in self.bounds:
            failure = bound.check(arguments.get(bound.name))
            if failure is not None:
                return failure

        descriptor = (
            web_request()
            .with_path(self.path.format(**path_values))
            .with_access_token(bearer(access_token))
            .with_content_type(ContentType.JSON)
            .with_method(self.method)
        )
        parameters = arguments or None
        if self.carrier is ParameterCarrier.BODY:
            return descriptor.with_body_parameters(parameters)
        return descriptor.with_query_parameters(parameters)


_GET = Method.GET
_PUT = Method.PUT
_POST = Method.POST
_DELETE = Method.DELETE
_BODY = ParameterCarrier.BODY

_LIMIT = ParameterBound("limit", 1, 50, '"limit" must be between 1 and 50.')
_VOLUME = ParameterBound(
    "volume_percent", 0, 100, "Invalid volume percentage. Allowed values are between 0 and 100."
)
_POSITION = ParameterBound("position_ms", 0, None, '"position_ms" must not be negative.')

_TABLE: tuple[Endpoint, ...] = (
    # Albums
    Endpoint("get_album", _GET, "albums/{id}"),
    Endpoint("get_several_albums", _GET, "albums", max_ids=20, item="album"),
    Endpoint("get_album_tracks", _GET, "albums/{id}/tracks", bounds=(_LIMIT,)),
    Endpoint("get_user_saved_albums", _GET, "me/albums", bounds=(_LIMIT,)),
    Endpoint("save_albums", _PUT, "me/albums", max_ids=20, item="album"),
    Endpoint("remove_saved_albums", _DELETE, "me/albums", max_ids=20, item="album"),
    Endpoint("check_saved_albums", _GET, "me/albums/contains", max_ids=20, item="album"),
    Endpoint("get_new_releases", _GET, "browse/new-releases", bounds=(_LIMIT,)),
    # Artists
    Endpoint("get_artist", _GET, "artists/{id}"),
    Endpoint("get_several_artists", _GET, "artists", max_ids=50, item="artist"),
    Endpoint("get_artist_albums", _GET, "artists/{id}/albums", bounds=(_LIMIT,)),
    Endpoint("get_artist_top_tracks", _GET, "artists/{id}/top-tracks"),
    Endpoint("get_artist_related_artists", _GET, "artists/{id}/related-artists"),
    # Audiobooks
    Endpoint("get_audiobook", _GET, "audiobooks/{id}"),
    Endpoint("get_several_audiobooks", _GET, "audiobooks", max_ids=50, item="audiobook"),
    Endpoint("get_audiobook_chapters", _GET, "audiobooks/{id}/chapters", bounds=(_LIMIT,)),
    Endpoint("get_user_saved_audiobooks", _GET, "me/audiobooks", bounds=(_LIMIT,)),
    Endpoint("save_audiobooks", _PUT, "me/audiobooks", max_ids=50, item="audiobook"),
    Endpoint("remove_saved_audiobooks", _DELETE, "me/audiobooks", max_ids=50, item="audiobook"),
    Endpoint("check_saved_audiobooks", _GET, "me/audiobooks/contains", max_ids=50, item="audiobook"),
    # Categories
    Endpoint("get_several_browse_categories", _GET, "browse/categories", bounds=(_LIMIT,)),
    Endpoint("get_single_browse_category", _GET, "browse/categories/{id}"),
    # Chapters
    Endpoint("get_chapter", _GET, "chapters/{id}"),
    Endpoint("get_several_chapters", _GET, "chapters", max_ids=50, item="chapter"),
    # Episodes
    Endpoint("get_episode", _GET, "episodes/{id}"),
    Endpoint("get_several_episodes", _GET, "episodes", max_ids=50, item="episode"),
    Endpoint("get_user_saved_episodes", _GET, "me/episodes", bounds=(_LIMIT,)),
    Endpoint("save_episodes", _PUT, "me/episodes", max_ids=50, item="episode"),
    Endpoint("remove_saved_episodes", _DELETE, "me/episodes", max_ids=50, item="episode"),
    Endpoint("check_saved_episodes", _GET, "me/episodes/contains", max_ids=50, item="episode"),
    # Genres and markets
    Endpoint("get_available_genre_seeds", _GET, "recommendations/available-genre-seeds"),
    Endpoint("get_available_markets", _GET, "markets"),
    # Player
    Endpoint("get_playback_state", _GET, "me/player"),
    Endpoint("transfer_playback", _PUT, "me/player", carrier=_BODY),
    Endpoint("get_available_devices", _GET, "me/player/devices"),
    Endpoint("get_currently_playing_track", _GET, "me/player/currently-playing"),
    Endpoint("start_playback", _PUT, "me/player/play", carrier=_BODY),
    Endpoint("pause_playback", _PUT, "me/player/pause"),
    Endpoint("skip_to_next", _POST, "me/player/next"),
    Endpoint("skip_to_previous", _POST, "me/player/previous"),
    Endpoint("seek_to_position", _PUT, "me/player/seek", bounds=(_POSITION,)),
    Endpoint("set_repeat_mode", _PUT, "me/player/repeat"),
    Endpoint("set_playback_volume", _PUT, "me/player/volume", bounds=(_VOLUME,)),
    Endpoint("toggle_playback_shuffle", _PUT, "me/player/shuffle"),
    Endpoint(
        "get_recently_played_tracks",
        _GET,
        "me/player/recently-played",
        bounds=(_LIMIT,),
        exclusive=("before", "after"),
    ),
    Endpoint("get_user_queue", _GET, "me/player/queue"),
    Endpoint("add_item_to_playback_queue", _POST, "me/player/queue"),
    # Playlists
    Endpoint("get_playlist", _GET, "playlists/{id}"),
    Endpoint("change_playlist_details", _PUT, "playlists/{id}", carrier=_BODY),
    Endpoint("get_playlist_items", _GET, "playlists/{id}/tracks", bounds=(_LIMIT,)),
    Endpoint("update_playlist_items", _PUT, "playlists/{id}/tracks", carrier=_BODY),
    Endpoint("add_items_to_playlist", _POST, "playlists/{id}/tracks", carrier=_BODY),
    Endpoint("remove_playlist_items", _DELETE, "playlists/{id}/tracks", carrier=_BODY),
    Endpoint("get_current_user_playlists", _GET, "me/playlists", bounds=(_LIMIT,)),
    Endpoint("get_user_playlists", _GET, "users/{user_id}/playlists", bounds=(_LIMIT,)),
    Endpoint("create_playlist", _POST, "users/{user_id}/playlists", carrier=_BODY),
    Endpoint("get_featured_playlists", _GET, "browse/featured-playlists", bounds=(_LIMIT,)),
    Endpoint("get_category_playlists", _GET, "browse/categories/{category_id}/playlists", bounds=(_LIMIT,)),
    Endpoint("get_playlist_cover_image", _GET, "playlists/{id}/images"),
    Endpoint("add_custom_playlist_cover_image", _PUT, "playlists/{id}/images", carrier=_BODY),
    # Search
    Endpoint("search", _GET, "search", bounds=(_LIMIT,)),
    # Shows
    Endpoint("get_show", _GET, "shows/{id}"),
    Endpoint("get_several_shows", _GET, "shows", max_ids=50, item="show"),
    Endpoint("get_show_episodes", _GET, "shows/{id}/episodes", bounds=(_LIMIT,)),
    Endpoint("get_user_saved_shows", _GET, "me/shows", bounds=(_LIMIT,)),
    Endpoint("save_shows", _PUT, "me/shows", max_ids=50, item="show"),
    Endpoint("remove_saved_shows", _DELETE, "me/shows", max_ids=50, item="show"),
    Endpoint("check_saved_shows", _GET, "me/shows/contains", max_ids=50, item="show"),
    # Tracks
    Endpoint("get_track", _GET, "tracks/{id}"),
    Endpoint("get_several_tracks", _GET, "tracks", max_ids=50, item="track"),
    Endpoint("get_user_saved_tracks", _GET, "me/tracks", bounds=(_LIMIT,)),
    Endpoint("save_tracks", _PUT, "me/tracks", carrier=_BODY, max_ids=50, item="track"),
    Endpoint("remove_saved_tracks", _DELETE, "me/tracks", carrier=_BODY, max_ids=50, item="track"),
    Endpoint("check_saved_tracks", _GET, "me/tracks/contains", max_ids=50, item="track"),
    Endpoint("get_several_audio_features", _GET, "audio-features", max_ids=100, item="track"),
    Endpoint("get_audio_features", _GET, "audio-features/{id}"),
    Endpoint("get_audio_analysis", _GET, "audio-analysis/{id}"),
    Endpoint("get_recommendations", _GET, "recommendations"),
    # Users
    Endpoint("get_current_user_profile", _GET, "me"),
    Endpoint("get_user_profile", _GET, "users/{user_id}"),
    Endpoint("get_user_top_items", _GET, "me/top/{type}", bounds=(_LIMIT,)),
)

ENDPOINTS: Mapping[str, Endpoint] = MappingProxyType({endpoint.name: endpoint for endpoint in _TABLE})


def get_endpoint(name: str) -> Endpoint:
    """Look up an endpoint by name."""
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise UnknownEndpointError(name) from None
