"""Structured Logging — one JSON line per event, with validation outcome fields grouped.

Invariants:
    - Every line carries timestamp, level, logger and message
    - Rejection fields (validator, error_code, generation) are grouped under
      "validation" and only emitted when the record has them
    - setup_logging is idempotent: calling it twice does not duplicate output

Design Decisions:
    - stdlib logging + a Formatter subclass; the shell passes fields via `extra=`
"""

import json
import logging
from datetime import datetime, timezone

VALIDATION_FIELDS = ("validator", "error_code", "generation", "promote_role")
REQUEST_FIELDS = ("path",)

_HANDLER_NAME = "topoguard"
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _collect(record: logging.LogRecord, keys: tuple[str, ...]) -> dict:
    return {
        key: record.__dict__[key]
        for key in keys
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_collect(record, REQUEST_FIELDS),
        }
        validation = _collect(record, VALIDATION_FIELDS)
        if validation:
            line["validation"] = validation
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the root handler for the service."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
