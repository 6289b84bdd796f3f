"""Spotify Web client exceptions.

Only programming errors are raised from here. Transport failures surface as
``httpx`` exceptions and remote failures as plain responses.
"""


class SpotifyWebError(Exception):
    """Base exception for Spotify Web client errors."""


class UnknownEndpointError(SpotifyWebError):
    """No endpoint with the requested name exists in the endpoint table."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown Spotify endpoint: {name!r}")


class MissingPathArgumentError(SpotifyWebError):
    """An endpoint path template references an argument that was not supplied."""

    def __init__(self, endpoint: str, argument: str) -> None:
        self.endpoint = endpoint
        self.argument = argument
        super().__init__(f"Endpoint {endpoint!r} requires path argument {argument!r}")


class AccessTokenMissingError(SpotifyWebError):
    """A resource call was attempted before an access token was set."""

    def __init__(self) -> None:
        super().__init__("No access token set; call set_access_token() first")
