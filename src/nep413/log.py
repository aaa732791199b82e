"""Logging setup for applications embedding the verifier."""

import json
import logging

# LogRecord attributes copied into JSON output when a caller passes them via extra=
JSON_EXTRA_FIELDS = ("account_id",)


class _JsonFormatter(logging.Formatter):
    """One JSON object per record, with verification context when present."""

    def format(self, record):
        entry = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in JSON_EXTRA_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def build_handler(json_log: bool = False) -> logging.Handler:
    handler = logging.StreamHandler()
    if json_log:
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
    return handler


def setup_logging(level: str, json_log: bool = False) -> None:
    """Configure the root logger. No-op if the application already did."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[build_handler(json_log)],
    )
