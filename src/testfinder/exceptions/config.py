"""
Configuration-related exceptions.

All exceptions related to configuration parsing, validation, and management.
"""

from typing import Any, List, Optional

from .base import ExceptionContext, TestFinderError


class ConfigurationError(TestFinderError):
    """Base class for configuration-related errors."""

    def __init__(self, message: str, help_text: Optional[str] = None):
        super().__init__(
            message, ExceptionContext(help_text=help_text, error_code="CONFIG_ERROR")
        )


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains invalid values."""

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        message = f"Invalid configuration for '{field}': got {repr(value)}, expected {expected}"
        TestFinderError.__init__(
            self,
            message,
            ExceptionContext(
                help_text=f"Please check the configuration for '{field}' and ensure it matches the expected format: {expected}",
                error_code="CONFIG_INVALID",
                user_action="Run 'testfinder config --show' to inspect the active values",
            ),
        )


class ConfigurationValidationError(ConfigurationError):
    """Raised when configuration fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "Configuration validation failed:"
        for error in errors:
            message += f"\n  - {error}"

        TestFinderError.__init__(
            self,
            message,
            ExceptionContext(
                help_text="Please check your configuration file and fix the validation errors listed above",
                error_code="CONFIG_VALIDATION",
                user_action="Run 'testfinder config --reset' to restore the defaults",
            ),
        )
