"""Logging setup for the client and the command line (JSON and text)."""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import datetime, timezone

from listex.call_context import get_call_id

# Extra fields the client attaches to its log records.
CALL_FIELDS: tuple[str, ...] = ("resource", "verb", "status", "etag")


def _timestamp(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


def _call_fields(record: logging.LogRecord) -> dict[str, object]:
    return {
        name: getattr(record, name)
        for name in CALL_FIELDS
        if getattr(record, name, None) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": _timestamp(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        call_id = get_call_id()
        if call_id:
            entry["call_id"] = call_id
        entry.update(_call_fields(record))
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = "".join(
                traceback.format_exception(*record.exc_info)
            )
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable lines, prefixed with the short call ID when set."""

    def format(self, record: logging.LogRecord) -> str:
        ts = _timestamp(record).strftime("%Y-%m-%d %H:%M:%S")
        call_id = get_call_id()
        prefix = f"[{call_id[:12]}] " if call_id else ""
        line = f"{ts} {record.levelname:<8} {prefix}{record.name} - {record.getMessage()}"

        fields = _call_fields(record)
        if fields:
            line += " " + " ".join(f"{k}={v}" for k, v in fields.items())

        if record.exc_info and record.exc_info[0] is not None:
            line += "\n" + "".join(traceback.format_exception(*record.exc_info))
        return line


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "text",
    logger_name: str | None = None,
) -> logging.Logger:
    """Attach a stderr handler to *logger_name* (root when None)."""
    target = logging.getLogger(logger_name)
    target.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    target.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if log_format.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())
    target.addHandler(handler)
    return target
