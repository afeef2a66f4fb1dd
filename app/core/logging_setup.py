"""
Purpose:
- Configure stdlib logging once at startup (text for local dev, JSON for hosted logs).
- Surface a few extra fields (site, user, query) when a log call passes them.
"""

from __future__ import annotations
import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("site", "user", "query")


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    root = logging.getLogger()
    # uvicorn --reload re-imports the app; don't stack handlers
    for h in list(root.handlers):
        if getattr(h, "_search_api_handler", False):
            root.removeHandler(h)
    handler._search_api_handler = True
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
