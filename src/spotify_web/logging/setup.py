"""Logging configuration for applications embedding the client."""

import logging
import sys

from spotify_web.logging.formatter import JSONLogFormatter
from spotify_web.settings import SpotifyWebSettings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = logging.INFO, fmt: str = "json", service: str = "spotify-web") -> None:
    """Replace root handlers with a single stdout handler.

    *fmt* is ``"json"`` for :class:`JSONLogFormatter` output or ``"text"``
    for the plain format.
    """
    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    if fmt == "json":
        handler.setFormatter(JSONLogFormatter(service=service))
    elif fmt == "text":
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        raise ValueError(f"Unknown log format: {fmt!r}")
    root.addHandler(handler)


def configure_logging_from_settings(settings: SpotifyWebSettings, service: str = "spotify-web") -> None:
    """Configure logging from ``LOG_LEVEL`` and ``LOG_FORMAT``."""
    configure_logging(settings.LOG_LEVEL, fmt=settings.LOG_FORMAT, service=service)
