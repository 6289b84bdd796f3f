"""JSON log formatter for structured logging output."""

import json
import logging
from datetime import UTC, datetime

# Extra attributes copied onto the JSON entry when a log call supplies them
_EXTRA_FIELDS = ("http_method", "url", "status_code")


class JSONLogFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Output format::

        {"timestamp": "...", "level": "DEBUG", "service": "spotify-web",
         "logger": "spotify_web.transport", "message": "...", "http_method": "GET", ...}
    """

    def __init__(self, service: str = "spotify-web") -> None:
        super().__init__()
        self._service = service

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "service": self._service,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in _EXTRA_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
