"""
Repository-related exceptions.

Raised by the command-line shell when it cannot establish which repository a
file belongs to. The mapping engine itself never raises.
"""

from pathlib import Path
from typing import Union

from .base import ExceptionContext, TestFinderError


class RepositoryError(TestFinderError):
    """Base class for repository-related errors."""


class RepositoryRootNotFoundError(RepositoryError):
    """Raised when no repository root can be discovered for a path."""

    def __init__(self, start: Union[str, Path]):
        self.start = str(start)
        message = f"No repository root found above {self.start}"
        context = ExceptionContext(
            help_text="Run the command inside a git checkout or pass the root explicitly",
            error_code="REPO_ROOT_NOT_FOUND",
            user_action="Use '--root <directory>' to name the repository root",
            context={"start": self.start},
        )
        super().__init__(message, context)


class PathOutsideRepositoryError(RepositoryError):
    """Raised when the requested file does not live under the repository root."""

    def __init__(self, path: Union[str, Path], repo_root: Union[str, Path]):
        self.path = str(path)
        self.repo_root = str(repo_root)
        message = f"{self.path} is not inside repository {self.repo_root}"
        context = ExceptionContext(
            help_text="Test candidates are computed from repository-relative paths",
            error_code="PATH_OUTSIDE_REPO",
            context={"path": self.path, "repo_root": self.repo_root},
        )
        super().__init__(message, context)
