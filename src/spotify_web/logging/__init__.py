"""Structured logging — JSON formatter and setup."""

from spotify_web.logging.formatter import JSONLogFormatter
from spotify_web.logging.setup import configure_logging, configure_logging_from_settings

__all__ = ["JSONLogFormatter", "configure_logging", "configure_logging_from_settings"]
