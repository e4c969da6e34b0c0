"""
testfinder Exception Hierarchy

All exceptions include actionable error messages and context to help users
resolve issues.

Exception Hierarchy:
    TestFinderError (base)
    ├── ConfigurationError
    │   ├── InvalidConfigurationError
    │   └── ConfigurationValidationError
    ├── RepositoryError
    │   ├── RepositoryRootNotFoundError
    │   └── PathOutsideRepositoryError
    └── CLIError
        └── FileOpenError
"""

from .base import ExceptionContext, TestFinderError

# CLI exceptions
from .cli import CLIError, FileOpenError

# Configuration exceptions
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

# Repository exceptions
from .repository import (
    PathOutsideRepositoryError,
    RepositoryError,
    RepositoryRootNotFoundError,
)

__all__ = [
    # Base
    "TestFinderError",
    "ExceptionContext",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
    # Repository
    "RepositoryError",
    "RepositoryRootNotFoundError",
    "PathOutsideRepositoryError",
    # CLI
    "CLIError",
    "FileOpenError",
]
