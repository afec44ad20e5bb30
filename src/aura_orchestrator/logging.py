"""JSON log output for the assistant.

Every record becomes one JSON line. Fields passed with ``extra=`` are grouped under
``"extra"`` so turn ids, domains and file names stay machine-readable.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))
) | {"message", "asctime"}

_THIRD_PARTY = ("openai", "httpx", "httpcore", "urllib3")


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _STANDARD_ATTRS and not key.startswith("_")
    }


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extra = _extra_fields(record)
        if extra:
            entry["extra"] = extra
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def configure_logging(level: str, *, debug: bool = False, stream: TextIO | None = None) -> None:
    """Send all records to ``stream`` (stdout by default) as JSON lines.

    Args:
        level: Root level name, case-insensitive.
        debug: Also emit DEBUG records from ``aura_orchestrator`` loggers.
        stream: Destination; the CLI passes stderr to keep stdout for the chat.
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level.upper())

    if debug:
        logging.getLogger("aura_orchestrator").setLevel(logging.DEBUG)

    floor = max(root.level, logging.INFO)
    for name in _THIRD_PARTY:
        logging.getLogger(name).setLevel(floor)
