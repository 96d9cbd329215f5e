"""Logging setup for the CSS generator.

Everything logs under the ``vibe_css`` logger. The console handler writes
to stderr so generated CSS on stdout stays clean; an optional rotating
file handler records every level, as text or one JSON object per line.
"""

import json
import logging
import logging.config
import logging.handlers
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path

LOGGER_NAME = "vibe_css"

# Record attributes copied into JSON output when passed via ``extra=``
STRUCTURED_FIELDS = ("class_name", "rule_count", "config_file")

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


class LogCategory(Enum):
    """Sub-loggers, one per component."""

    GENERATOR = "generator"
    CONFIG = "config"
    STYLESHEET = "stylesheet"
    CLI = "cli"


class JSONFormatter(logging.Formatter):
    """Render records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "time": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "location": f"{record.module}:{record.lineno}",
            "message": record.getMessage(),
        }
        entry.update(
            {name: getattr(record, name) for name in STRUCTURED_FIELDS if hasattr(record, name)}
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def _console_level(level: str, quiet: bool, verbose: bool) -> str:
    if quiet:
        return "ERROR"
    if verbose:
        return "DEBUG"
    return level


def setup_logging(
    level: str = "WARNING",
    quiet: bool = False,
    verbose: bool = False,
    log_file: Path | None = None,
    log_format: str = "text",
    rotation_count: int = 3,
    max_bytes: int = 5 * 1024 * 1024,
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Console level when neither ``quiet`` nor ``verbose`` is set.
        quiet: Only errors reach the console. Takes precedence over ``verbose``.
        verbose: Debug output on the console.
        log_file: Also log everything to this file, rotated by size.
        log_format: ``"text"`` or ``"json"`` for the file handler.
        rotation_count: Rotated files to keep.
        max_bytes: Size at which the file is rotated.

    Returns:
        The ``vibe_css`` logger.
    """
    handlers: dict = {
        "console": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": "console",
            "level": _console_level(level, quiet, verbose),
        }
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": str(log_file),
            "maxBytes": max_bytes,
            "backupCount": rotation_count,
            "encoding": "utf-8",
            "formatter": "json" if log_format == "json" else "file",
            "level": "DEBUG",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {"format": CONSOLE_FORMAT},
                "file": {"format": FILE_FORMAT},
                "json": {"()": JSONFormatter},
            },
            "handlers": handlers,
            "loggers": {
                LOGGER_NAME: {
                    "handlers": list(handlers),
                    "level": "DEBUG",
                    "propagate": False,
                }
            },
        }
    )
    return logging.getLogger(LOGGER_NAME)


def get_logger() -> logging.Logger:
    """Return the package logger."""
    return logging.getLogger(LOGGER_NAME)


def get_category_logger(category: LogCategory) -> logging.Logger:
    """Return the child logger for one component.

    Example:
        >>> logger = get_category_logger(LogCategory.STYLESHEET)
        >>> logger.name
        'vibe_css.stylesheet'
    """
    return logging.getLogger(f"{LOGGER_NAME}.{category.value}")


@contextmanager
def debug_context(logger: logging.Logger | None = None) -> Iterator[logging.Logger]:
    """Lower a logger and its handlers to DEBUG for the duration of a block."""
    target = logger or get_logger()
    saved = [(target, target.level)] + [(h, h.level) for h in target.handlers]
    try:
        for obj, _ in saved:
            obj.setLevel(logging.DEBUG)
        yield target
    finally:
        for obj, previous in saved:
            obj.setLevel(previous)
