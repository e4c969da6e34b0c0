"""
Timing helpers for logging how long operations take.
"""

import time
from typing import Any, Dict, Optional

from .loggers import TestFinderLogger, get_logger


class TimedOperation:
    """Context manager for timing operations with automatic logging."""

    def __init__(
        self,
        operation: str,
        logger: Optional[TestFinderLogger] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger(f"testfinder.performance.{operation}")
        self.context = context or {}
        self.start_time: Optional[float] = None
        self.duration_ms: Optional[float] = None

    def __enter__(self) -> "TimedOperation":
        self.start_time = time.perf_counter()
        self.logger.debug(f"Starting operation: {self.operation}", **self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time is None:
            return

        self.duration_ms = (time.perf_counter() - self.start_time) * 1000

        if exc_type is None:
            self.logger.debug(
                f"Completed operation: {self.operation} in {self.duration_ms:.2f}ms",
                operation=self.operation,
                duration=self.duration_ms,
                status="success",
                **self.context,
            )
        else:
            self.logger.error(
                f"Failed operation: {self.operation} after {self.duration_ms:.2f}ms: {exc_val}",
                operation=self.operation,
                duration=self.duration_ms,
                status="failed",
                error_type=exc_type.__name__,
                **self.context,
            )
