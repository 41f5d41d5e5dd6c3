"""JSON logging to standard output."""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from datetime import datetime, timezone

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

_STANDARD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


@dataclass
class LoggerConfig:
    """Settings for the application logger."""

    level: str = ""


class JsonFormatter(logging.Formatter):
    """Formats each record as one JSON object with time, level and msg keys."""

    def format(self, record: logging.LogRecord) -> str:
        level = "WARN" if record.levelno == logging.WARNING else record.levelname
        entry = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .astimezone()
            .isoformat(),
            "level": level,
            "msg": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRIBUTES and not key.startswith("_"):
                entry[key] = value
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class _JsonStdoutHandler(logging.StreamHandler):
    pass


def parse_log_level(level: str) -> int:
    """Map a level name to a logging level; unknown names mean INFO."""
    return _LEVELS.get(level.upper(), logging.INFO)


def init_logger(config: LoggerConfig) -> logging.Logger:
    """Make JSON on standard output the default log destination and return it."""
    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, _JsonStdoutHandler)]:
        root.removeHandler(handler)
    handler = _JsonStdoutHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
    root.setLevel(parse_log_level(config.level))
    return root