"""
Logger wrapper with correlation IDs and structured context.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Optional
from uuid import uuid4


class TestFinderLogger:
    """Logger that attaches a correlation ID and keyword context to every record."""

    __test__ = False

    def __init__(self, name: str, correlation_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id or str(uuid4())
        self.extra_context: Dict[str, Any] = {}

    @property
    def name(self) -> str:
        return self.logger.name

    def _log(self, level: int, msg: str, exc_info: bool = False, **kwargs):
        if not self.logger.isEnabledFor(level):
            return

        extra: Dict[str, Any] = {"correlation_id": self.correlation_id}
        context = dict(self.extra_context)
        context.update(kwargs)
        if context:
            extra["extra_context"] = context

        self.logger.log(level, msg, exc_info=exc_info, extra=extra)

    def debug(self, msg: str, **kwargs):
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        self._log(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs):
        """Log an error together with the active exception's traceback."""
        self._log(logging.ERROR, msg, exc_info=True, **kwargs)

    def critical(self, msg: str, **kwargs):
        self._log(logging.CRITICAL, msg, **kwargs)

    def add_context(self, **kwargs):
        """Add persistent context to this logger."""
        self.extra_context.update(kwargs)

    def clear_context(self):
        self.extra_context.clear()

    def with_context(self, **kwargs) -> "TestFinderLogger":
        """Create a copy of this logger with additional context."""
        new_logger = TestFinderLogger(self.logger.name, self.correlation_id)
        new_logger.extra_context = self.extra_context.copy()
        new_logger.extra_context.update(kwargs)
        return new_logger

    @contextmanager
    def temp_context(self, **kwargs):
        """Context manager adding context for the duration of a block."""
        original_context = self.extra_context.copy()
        self.extra_context.update(kwargs)
        try:
            yield self
        finally:
            self.extra_context = original_context


def get_logger(name: str, correlation_id: Optional[str] = None) -> TestFinderLogger:
    """Get a TestFinderLogger instance."""
    return TestFinderLogger(name, correlation_id)
