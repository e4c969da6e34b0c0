"""
CLI-related exceptions.

Raised by the command-line shell after the test files have been found.
"""

from .base import ExceptionContext, TestFinderError


class CLIError(TestFinderError):
    """Base class for CLI-related errors."""


class FileOpenError(CLIError):
    """Raised when the configured opener command cannot open a file."""

    def __init__(self, path: str, reason: str):
        self.path = path
        message = f"Could not open {path}: {reason}"
        context = ExceptionContext(
            help_text="Check the opener command templates in your configuration",
            error_code="OPEN_FAILED",
            user_action="Run 'testfinder config --show' to see the active opener",
            context={"path": path},
        )
        super().__init__(message, context)
