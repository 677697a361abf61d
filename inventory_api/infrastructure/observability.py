"""Structured Logging - formatters and setup for inventory request and storage logs.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Inventory context (product_id, operation, error_code, path, backend) is
      surfaced by both formats whenever a log call passes it via extra=
    - At most one inventory handler is attached to the root logger, however many
      times setup_logging runs (each app lifespan calls it)

Design Decisions:
    - JSON for log shipping, key=value suffix on plain text for local runs
"""

import json
import logging
from datetime import datetime, timezone

# product_id: catalog + error handlers; operation/path: JSON file store;
# error_code: error handlers; backend: store factory
CONTEXT_FIELDS = ("product_id", "operation", "error_code", "path", "backend")

HANDLER_NAME = "inventory_api"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def log_context(record: logging.LogRecord) -> dict:
    """Inventory context fields present on the record, in CONTEXT_FIELDS order."""
    context = {}
    for key in CONTEXT_FIELDS:
        val = record.__dict__.get(key)
        if val is not None:
            context[key] = val
    return context


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(log_context(record))
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class ContextTextFormatter(logging.Formatter):
    """Plain text line followed by the inventory context as key=value pairs."""

    def __init__(self):
        super().__init__(TEXT_FORMAT)

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        context = log_context(record)
        if not context:
            return line
        pairs = " ".join(f"{key}={val}" for key, val in context.items())
        return f"{line} [{pairs}]"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the inventory handler on the root logger, replacing an earlier one."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else ContextTextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
