"""Structured Logging: JSON formatter and setup for host applications.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (type_name, member_name, error_code) surfaced when present
    - The library never calls setup_logging itself: the host application decides
    - Level and format default to Settings.log_level / Settings.log_format

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
"""

import logging
import json
from datetime import datetime, timezone

from beanoutline.config import get_settings

_EXTRA_FIELDS = (
    "type_name", "member_name", "convention", "property_count", "error_code",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Handler:
    """Attach a formatted handler to the 'beanoutline' logger."""
    settings = get_settings()
    level = level or settings.log_level
    fmt = fmt or settings.log_format
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    root = logging.getLogger("beanoutline")
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
