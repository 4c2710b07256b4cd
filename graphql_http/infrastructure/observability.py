"""Structured Logging — JSON formatter and setup for request observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Request extras (method, path, status, operation_name, interactive) are
      surfaced at the top level when present
    - Error extras (error_code, error_category, error_count) are grouped under
      "error" as code/category/count, omitted when none is present
    - JSON format in production, human-readable in development
    - setup_logging is idempotent: one handler per process

Design Decisions:
    - setup_logging called once on startup via lifespan
    - Refusals log the GraphQLHTTPError code and category so a 4xx can be
      traced to its cause without the response body
"""

import logging
import json
from datetime import datetime, timezone

_REQUEST_FIELDS = ("method", "path", "status", "operation_name", "interactive")
_ERROR_FIELDS = {
    "error_code": "code",
    "error_category": "category",
    "error_count": "count",
}
_HANDLER_NAME = "graphql_http"


def _present(record: logging.LogRecord, key: str):
    return record.__dict__.get(key)


class JSONFormatter(logging.Formatter):
    """One JSON object per record: base fields, request extras, error group."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: _present(record, key) for key in _REQUEST_FIELDS
            if _present(record, key) is not None
        })
        error = {
            name: _present(record, key) for key, name in _ERROR_FIELDS.items()
            if _present(record, key) is not None
        }
        if error:
            log["error"] = error
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
