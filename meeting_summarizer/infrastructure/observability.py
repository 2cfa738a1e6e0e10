"""Structured Logging - record formatting and root-handler setup.

Invariants:
    - Every line carries the record's own creation time (UTC), level, logger and message
    - Only whitelisted `extra` keys are emitted; anything else passed via extra stays out
    - Text format appends the same whitelisted keys as key=value pairs
    - setup_logging is idempotent: repeated calls replace, never stack, its handler
    - Third-party HTTP client loggers are held at WARNING unless the app runs at DEBUG
"""

import logging
import json
from datetime import datetime, timezone

# Keys callers attach through `extra=`. Transcript and summary text never appear here.
LOGGED_EXTRAS: tuple[str, ...] = (
    "error_code", "path", "operation", "attempt",
    "input_tokens", "output_tokens", "stop_reason", "recipient_count",
)

_CHATTY_LOGGERS = ("httpx", "httpcore", "anthropic")


def _extras(record: logging.LogRecord, keys: tuple[str, ...]) -> dict:
    return {k: record.__dict__[k] for k in keys if record.__dict__.get(k) is not None}


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def __init__(self, extra_keys: tuple[str, ...] = LOGGED_EXTRAS):
        super().__init__()
        self.extra_keys = extra_keys

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_extras(record, self.extra_keys),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable lines for local runs, whitelisted extras appended."""

    def __init__(self, extra_keys: tuple[str, ...] = LOGGED_EXTRAS):
        super().__init__("%(asctime)s %(levelname)-7s %(name)s: %(message)s")
        self.extra_keys = extra_keys

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        pairs = " ".join(f"{k}={v}" for k, v in _extras(record, self.extra_keys).items())
        return f"{line} [{pairs}]" if pairs else line


class _AppHandler(logging.StreamHandler):
    """Marker type so setup_logging can find its own handler."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the app's root handler, replacing one from an earlier call."""
    root = logging.getLogger()
    for stale in [h for h in root.handlers if isinstance(h, _AppHandler)]:
        root.removeHandler(stale)

    handler = _AppHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)

    resolved = logging.getLevelName(level.upper())
    root.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    quiet = logging.NOTSET if root.level <= logging.DEBUG else logging.WARNING
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(quiet)
    return handler
