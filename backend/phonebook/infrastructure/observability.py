"""Structured Logging — one JSON line per record, phonebook fields included.

Invariants:
    - Every line carries timestamp (record creation time, UTC), level, logger, message
    - person_id / error_code / path / operation appear only when set on the record
    - setup_logging replaces the root handler; calling it again never duplicates output

Design Decisions:
    - JSON for the server, plain text for the CLI (fmt="text")
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = ("person_id", "error_code", "path", "operation")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key]) for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    logging.basicConfig(
        handlers=[handler],
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )
