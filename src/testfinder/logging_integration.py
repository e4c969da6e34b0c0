"""
Integration between the configuration system and logging.

Configures the logging system from a ``TestFinderConfig`` and gives modules
easy access to loggers.
"""

import inspect
import logging
from typing import Optional

from .core.config import ConfigManager, TestFinderConfig
from .logging import (
    LoggingConfig as LogConfig,
    TestFinderLogger,
    configure_logging,
    get_logger as _get_logger,
)

_logging_configured = False
_current_config: Optional[TestFinderConfig] = None


def configure_logging_from_config(
    config: TestFinderConfig,
    service_name: str = "testfinder",
    version: str = "unknown",
    level_override: Optional[int] = None,
):
    """Configure logging system from a testfinder configuration.

    ``level_override`` wins over the configured level; the CLI uses it for
    ``--verbose``.
    """
    global _logging_configured, _current_config

    logging_config = config.logging
    log_config = LogConfig(
        level=level_override if level_override is not None else logging_config.level.value,
        format_type=logging_config.format,
        output=logging_config.output,
        file_path=logging_config.file_path,
        max_file_size=logging_config.max_file_size,
        backup_count=logging_config.backup_count,
        service_name=service_name,
        version=version,
    )

    configure_logging(log_config)
    _logging_configured = True
    _current_config = config


def configure_logging_from_manager(
    config_manager: ConfigManager,
    service_name: str = "testfinder",
    version: str = "unknown",
    level_override: Optional[int] = None,
):
    """Configure logging system from a ConfigManager."""
    configure_logging_from_config(
        config_manager.load_config(), service_name, version, level_override
    )


def ensure_logging_configured():
    """Ensure logging is configured with defaults if not already done."""
    global _logging_configured

    if not _logging_configured:
        configure_logging(
            LogConfig(level=logging.WARNING, format_type="console", output=["console"])
        )
        _logging_configured = True


def get_logger(name: str, correlation_id: Optional[str] = None) -> TestFinderLogger:
    """Get a logger instance, ensuring logging is configured."""
    ensure_logging_configured()
    return _get_logger(name, correlation_id)


def get_module_logger(module_name: Optional[str] = None) -> TestFinderLogger:
    """Get a logger for the calling module.

    Handlers are installed lazily by ``ensure_logging_configured`` or the CLI,
    so importing a module that calls this leaves logging untouched.
    """
    if module_name is None:
        frame = inspect.currentframe().f_back
        module_name = frame.f_globals.get("__name__", "testfinder")

    return _get_logger(module_name)


def verbosity_to_level(verbose: int) -> Optional[int]:
    """Map a ``-v`` count to a log level; 0 keeps the configured level."""
    if verbose <= 0:
        return None
    return logging.DEBUG if verbose > 1 else logging.INFO
