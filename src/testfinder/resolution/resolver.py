"""
Candidate resolver: keep only the candidate test files that exist.

All existence checks are issued at once and gathered before the result is
built. Each check writes into the slot of its candidate, so the output
follows candidate order no matter which check finishes first.
"""

import asyncio
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..constants import DEFAULT_CHECK_TIMEOUT_SECONDS
from ..logging import TimedOperation
from ..logging_integration import get_module_logger

logger = get_module_logger()


def _exists(path: Path) -> bool:
    # Raises OSError for missing or unreadable paths, ValueError for unrepresentable ones
    path.stat()
    return True


class CandidateResolver:
    """Filters mapped candidates down to files present under a repository root."""

    def __init__(self, check_timeout: float = DEFAULT_CHECK_TIMEOUT_SECONDS):
        self.check_timeout = check_timeout

    async def exists(self, path: Path) -> bool:
        """Check a single path without blocking the event loop.

        Errors and timeouts count as "does not exist".
        """
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(_exists, path), timeout=self.check_timeout
            )
        except FileNotFoundError:
            logger.debug(f"{path} does not exist on the filesystem", path=str(path))
        except asyncio.TimeoutError:
            logger.debug(
                f"Existence check for {path} timed out",
                path=str(path),
                timeout=self.check_timeout,
            )
        except (OSError, ValueError) as e:
            logger.debug(
                f"Existence check for {path} failed: {e}",
                path=str(path),
                error_type=type(e).__name__,
            )
        return False

    async def resolve_existing(
        self, candidates: Iterable[str], repo_root: Union[str, Path]
    ) -> List[Path]:
        """Return the absolute paths of the candidates that exist, in candidate order."""
        root = Path(repo_root)
        unique: List[str] = list(dict.fromkeys(candidates))
        if not unique:
            return []

        paths = [root / candidate for candidate in unique]
        with TimedOperation(
            "resolve_candidates", logger, {"candidate_count": len(paths)}
        ):
            found: List[Optional[bool]] = [None] * len(paths)

            async def check(index: int, path: Path) -> None:
                found[index] = await self.exists(path)

            await asyncio.gather(*(check(i, p) for i, p in enumerate(paths)))

        existing = [path for path, present in zip(paths, found) if present]
        logger.debug(
            f"Resolved {len(existing)} of {len(paths)} candidates",
            repo_root=str(root),
        )
        return existing

    def resolve(self, candidates: Iterable[str], repo_root: Union[str, Path]) -> List[Path]:
        """Synchronous wrapper around ``resolve_existing``."""
        return asyncio.run(self.resolve_existing(candidates, repo_root))
