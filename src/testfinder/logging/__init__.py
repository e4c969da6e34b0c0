"""
testfinder logging package

Structured logging with correlation IDs and configurable outputs:
- formatters: Log formatting (JSON, console, rich)
- loggers: Logger wrapper with correlation IDs and keyword context
- performance: Operation timing
- config: Logging configuration
- manager: Centralized logging setup
"""

from .config import LoggingConfig, create_default_config
from .formatters import StructuredFormatter
from .loggers import TestFinderLogger
from .manager import LoggingManager, configure_logging, logging_manager
from .performance import TimedOperation

get_logger = logging_manager.get_logger

__all__ = [
    "LoggingConfig",
    "LoggingManager",
    "configure_logging",
    "create_default_config",
    "TestFinderLogger",
    "get_logger",
    "TimedOperation",
    "StructuredFormatter",
]
