"""Per-client OAuth configuration."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from spotify_web.constants import DEFAULT_RESPONSE_TYPE

if TYPE_CHECKING:
    from spotify_web.settings import SpotifyWebSettings


@dataclass(frozen=True, slots=True)
class AuthorizationContext:
    """OAuth client configuration, fixed for the lifetime of a client."""

    client_id: str
    client_secret: str = field(repr=False)
    redirect_uri: str
    response_type: str = DEFAULT_RESPONSE_TYPE
    scopes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of scopes but keep an immutable, ordered tuple.
        object.__setattr__(self, "scopes", tuple(self.scopes))

    @classmethod
    def from_settings(cls, settings: "SpotifyWebSettings") -> "AuthorizationContext":
        """Build a context from loaded settings."""
        return cls(
            client_id=settings.SPOTIFY_CLIENT_ID,
            client_secret=settings.SPOTIFY_CLIENT_SECRET,
            redirect_uri=settings.SPOTIFY_REDIRECT_URI,
            response_type=settings.SPOTIFY_RESPONSE_TYPE,
            scopes=settings.scope_list(),
        )

    @property
    def scope(self) -> str:
        """Scopes joined the way the authorize endpoint expects them."""
        return " ".join(self.scopes)
