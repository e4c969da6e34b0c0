"""Services combining the mapping engine with filesystem resolution."""

from .finder import TestFileFinder, absolute_path, find_repository_root

__all__ = ["TestFileFinder", "absolute_path", "find_repository_root"]
