"""Structured Logging — JSON records for the client, with credential redaction.

Invariants:
    - Every record carries timestamp, level, logger and message; the timestamp is the record's
      own creation time (UTC), not formatting time
    - Networking extras (method, url, status_code, attempt, endpoint, error_code,
      refresh_state, body_bytes) and the error envelope are emitted only when set
    - Authorization/Cookie values never reach a record (redact_headers)
    - setup_logging is idempotent: re-running swaps the handler it installed

Design Decisions:
    - Hand-written JSON formatter on stdlib logging: no extra dependency, the
      host app keeps control of handlers and levels
    - Failures are logged with the NetworkingError.to_dict() envelope under "error",
      so log queries see the same shape as the taxonomy
"""

import json
import logging
from collections.abc import Mapping
from datetime import datetime, timezone

_EXTRA_KEYS = (
    "method", "url", "status_code", "attempt", "endpoint",
    "error_code", "refresh_state", "body_bytes", "error",
)
_SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "set-cookie", "proxy-authorization"})
_TEXT_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key))
            for key in _EXTRA_KEYS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copy of headers safe to log."""
    return {
        name: "<redacted>" if name.lower() in _SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the travelnet handler on the root logger, replacing a previous one."""
    root = logging.getLogger()
    for installed in [h for h in root.handlers if getattr(h, "_travelnet", False)]:
        root.removeHandler(installed)

    handler = logging.StreamHandler()
    handler._travelnet = True
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))
    return handler
