"""
Configuration management for testfinder.

Usage:
    from testfinder.core.config import ConfigManager

    config = ConfigManager().load_config()
    config.mapping.backend_extension
"""

from ...exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .manager import ConfigManager, default_config_file
from .models import (
    LoggingConfig,
    LogLevel,
    MappingConfig,
    OpenerConfig,
    ResolverConfig,
    TestFinderConfig,
    TestFinderSettings,
)

__all__ = [
    "TestFinderConfig",
    "TestFinderSettings",
    "MappingConfig",
    "ResolverConfig",
    "OpenerConfig",
    "LoggingConfig",
    "LogLevel",
    "ConfigManager",
    "default_config_file",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
]
