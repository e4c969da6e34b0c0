"""
Test file finder service.

Ties the mapper and resolver together for one active file. The host (the CLI
here) passes the active file and the repository root explicitly; nothing is
read from ambient state.
"""

import asyncio
import os
from pathlib import Path, PurePosixPath
from typing import List, Optional, Union

from ..constants import REPOSITORY_MARKERS
from ..core.config import TestFinderConfig
from ..logging_integration import get_module_logger
from ..mapping import PathMapper
from ..resolution import CandidateResolver

logger = get_module_logger()

PathLike = Union[str, Path]


def absolute_path(path: PathLike) -> Path:
    """Absolute, normalized form of ``path`` that keeps symlinks as they were given."""
    return Path(os.path.normpath(Path(path).expanduser().absolute()))


def find_repository_root(start: PathLike) -> Optional[Path]:
    """Walk upwards from ``start`` to the first directory holding a repository marker."""
    current = absolute_path(start)
    if not current.is_dir():
        current = current.parent

    for directory in (current, *current.parents):
        if any((directory / marker).exists() for marker in REPOSITORY_MARKERS):
            return directory
    return None


class TestFileFinder:
    """Finds the existing test files for a source file."""

    __test__ = False

    def __init__(
        self,
        mapper: Optional[PathMapper] = None,
        resolver: Optional[CandidateResolver] = None,
    ):
        self.mapper = mapper or PathMapper()
        self.resolver = resolver or CandidateResolver()

    @classmethod
    def from_config(cls, config: TestFinderConfig) -> "TestFileFinder":
        return cls(
            mapper=PathMapper.for_extensions(
                config.mapping.backend_extension, config.mapping.frontend_extension
            ),
            resolver=CandidateResolver(check_timeout=config.resolver.check_timeout),
        )

    @staticmethod
    def relative_path(active_file: PathLike, repo_root: PathLike) -> str:
        """Repository-relative form of ``active_file`` with forward slashes.

        Returns an empty string when the file is not under ``repo_root``.
        """
        file_path = Path(active_file)
        root = Path(repo_root)
        try:
            relative = file_path.relative_to(root)
        except ValueError:
            return ""
        if not relative.parts:
            return ""
        return PurePosixPath(*relative.parts).as_posix().lstrip("/")

    def candidates(self, active_file: Optional[PathLike], repo_root: Optional[PathLike]) -> List[str]:
        """All mapped candidates for the active file, before existence filtering."""
        if not active_file or not repo_root:
            return []

        relative = self.relative_path(active_file, repo_root)
        if not relative:
            return []
        return self.mapper.map_to_test_candidates(relative)

    async def find_async(
        self, active_file: Optional[PathLike], repo_root: Optional[PathLike]
    ) -> List[Path]:
        candidates = self.candidates(active_file, repo_root)
        if not candidates:
            logger.debug("No test candidates", active_file=str(active_file))
            return []

        logger.debug(
            f"Mapped {len(candidates)} test candidates",
            active_file=str(active_file),
            candidates=candidates,
        )
        return await self.resolver.resolve_existing(candidates, repo_root)

    def find(self, active_file: Optional[PathLike], repo_root: Optional[PathLike]) -> List[Path]:
        """Existing test files for ``active_file``, most conventional first."""
        return asyncio.run(self.find_async(active_file, repo_root))
