"""
Formatters and handlers for the three log formats.

- json: one object per line, keyword context merged into the top level
- console: a short human-readable line
- rich: colourised terminal output on stderr
"""

import json
import logging
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

from .config import LoggingConfig

CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
CONSOLE_DATE_FORMAT = "%H:%M:%S"


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    ``TestFinderLogger`` stores keyword arguments in ``record.extra_context``;
    they become top-level keys, so ``logger.debug("...", path=p)`` yields a
    ``"path"`` field.
    """

    def __init__(self, service_name: str = "testfinder", version: str = "unknown"):
        super().__init__()
        self.static_fields = {"service": service_name, "version": version}

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **self.static_fields,
        }

        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id:
            entry["correlation_id"] = correlation_id

        entry.update(getattr(record, "extra_context", {}))

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(entry, default=str)


def create_console_formatter() -> logging.Formatter:
    return logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT)


def create_formatter(config: LoggingConfig) -> logging.Formatter:
    """Formatter for a stream or file handler; rich falls back to plain text."""
    if config.format_type == "json":
        return StructuredFormatter(config.service_name, config.version)
    return create_console_formatter()


def create_rich_handler() -> logging.Handler:
    """Rich handler writing to stderr, leaving stdout to command output."""
    return RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        log_time_format="[%X]",
    )
