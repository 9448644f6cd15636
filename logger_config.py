"""Centralized logging configuration for the employees service."""

import json
import logging
import sys
from datetime import datetime, timezone
from types import MappingProxyType

from config import LOG_FORMAT, LOG_LEVEL, LOG_OUTPUT

STDOUT = "stdout"
STDERR = "stderr"
VACUUM = "vacuum"

_LEVELS = MappingProxyType({
    "panic": logging.CRITICAL,
    "fatal": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
})

# LogRecord attributes that never count as structured context.
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    """One JSON object per line; `extra=` fields are emitted as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                entry[key] = value
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


def _text_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt='%(asctime)s | %(levelname)-7s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


_FORMATTERS = MappingProxyType({
    "json": JSONFormatter,
    "text": _text_formatter,
})


def _make_handler(output: str) -> logging.Handler:
    if output in (STDOUT, ""):
        return logging.StreamHandler(sys.stdout)
    if output == STDERR:
        return logging.StreamHandler(sys.stderr)
    if output == VACUUM:
        return logging.NullHandler()
    try:
        return logging.FileHandler(output, mode="a", encoding="utf-8")
    except OSError:
        return logging.StreamHandler(sys.stdout)  # falling back to stdout


def create_logger(name: str, level: str, fmt: str, output: str) -> logging.Logger:
    """
    Configure a named logger from explicit settings.

    Args:
        name: Logger name (usually __name__)
        level: panic | fatal | error | warning | info | debug | trace (unknown -> debug)
        fmt: json | text (unknown -> text)
        output: stdout | stderr | vacuum | path/to/file

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(_LEVELS.get(level.lower(), logging.DEBUG))

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    handler = _make_handler(output)
    handler.setFormatter(_FORMATTERS.get(fmt, _text_formatter)())
    logger.addHandler(handler)
    return logger


def setup_logger(name: str) -> logging.Logger:
    """Configure logger from the EMPLOYEES_LOG_* settings in config.py."""
    return create_logger(name, LOG_LEVEL, LOG_FORMAT, LOG_OUTPUT)
