"""
Base exception class for testfinder.

Every error that reaches the user derives from TestFinderError. The CLI error
handler prints the message with its guidance and logs ``to_dict()`` under
the error's correlation ID.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ExceptionContext:
    """Guidance attached to a testfinder exception."""

    help_text: Optional[str] = None
    error_code: Optional[str] = None
    user_action: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)
    correlation_id: Optional[str] = None


def new_correlation_id() -> str:
    return uuid.uuid4().hex[:8]


class TestFinderError(Exception):
    """Base exception for all testfinder errors.

    Attributes:
        message: What went wrong, without guidance
        help_text: Optional explanation of how to fix it
        error_code: Stable code for log searches
        user_action: Optional command or step the user can take next
        context: Facts about the failure; entries whose value is None are dropped
        correlation_id: Short ID shown to the user and written to the log
    """

    # Keep pytest from collecting this class from test modules that import it
    __test__ = False

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        super().__init__(message)
        details = context or ExceptionContext()

        self.message = message
        self.help_text = details.help_text
        self.error_code = details.error_code
        self.user_action = details.user_action
        self.context = {k: v for k, v in details.context.items() if v is not None}
        self.correlation_id = details.correlation_id or new_correlation_id()

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form written to the log by the CLI."""
        return {
            "error_type": type(self).__name__,
            "error_code": self.error_code,
            "correlation_id": self.correlation_id,
            "message": self.message,
            "help_text": self.help_text,
            "user_action": self.user_action,
            "context": self.context,
        }
