"""
Installation of testfinder's log handlers on the root logger.

The LoggingManager singleton owns the handlers it installs. Reconfiguring
replaces only those, so handlers added by pytest or an embedding program
survive.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

from ..constants import DEFAULT_LOG_FILE
from .config import LoggingConfig
from .formatters import create_formatter, create_rich_handler
from .loggers import TestFinderLogger

PACKAGE_LOGGER = "testfinder"


class LoggingManager:
    """Process-wide owner of testfinder's logging handlers."""

    _instance = None
    config: Optional[LoggingConfig]
    handlers: List[logging.Handler]

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.config = None
            instance.handlers = []
            cls._instance = instance
        return cls._instance

    def configure(self, config: LoggingConfig):
        """Replace the installed handlers with the outputs named in ``config``."""
        self.reset()
        self.config = config

        root_logger = logging.getLogger()
        root_logger.setLevel(config.level)
        logging.getLogger(PACKAGE_LOGGER).setLevel(config.level)

        for output in config.output:
            handler = self._build_handler(output, config)
            handler.setLevel(config.level)
            root_logger.addHandler(handler)
            self.handlers.append(handler)

    def reset(self):
        """Remove and close every handler installed by ``configure``."""
        root_logger = logging.getLogger()
        for handler in self.handlers:
            root_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

    def _build_handler(self, output: str, config: LoggingConfig) -> logging.Handler:
        if output == "file":
            return self._build_file_handler(config)
        if output != "console":
            raise ValueError(f"Unknown log output: {output}")

        if config.format_type == "rich":
            return create_rich_handler()
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(create_formatter(config))
        return handler

    def _build_file_handler(self, config: LoggingConfig) -> logging.Handler:
        path = Path(config.file_path or DEFAULT_LOG_FILE).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(create_formatter(config))
        return handler

    def get_logger(self, name: str, correlation_id: Optional[str] = None) -> TestFinderLogger:
        return TestFinderLogger(name, correlation_id)


logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Configure the global logging system."""
    logging_manager.configure(config)
