"""
Path mapper: repository-relative source path to candidate test paths.

The mapper performs no I/O. It applies every convention rule in table order
and collects the results into an insertion-ordered set, so the first rule to
produce a candidate decides where it appears in the output.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from ..constants import DEFAULT_BACKEND_EXTENSION, DEFAULT_FRONTEND_EXTENSION
from .inflection import Pluralizer
from .rules import ConventionRule, build_default_rules


class CandidateSet:
    """Ordered set of candidate paths; re-adding a value keeps its first position."""

    def __init__(self, items: Iterable[str] = ()):
        self._items: Dict[str, None] = {}
        self.extend(items)

    def add(self, item: str) -> None:
        self._items.setdefault(item, None)

    def extend(self, items: Iterable[str]) -> None:
        for item in items:
            self.add(item)

    def to_list(self) -> List[str]:
        return list(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"CandidateSet({self.to_list()!r})"


class PathMapper:
    """Maps a repository-relative path to the test files that conventionally cover it."""

    def __init__(self, rules: Optional[Sequence[ConventionRule]] = None):
        self.rules = tuple(rules) if rules is not None else build_default_rules()

    @classmethod
    def for_extensions(
        cls,
        backend_extension: str = DEFAULT_BACKEND_EXTENSION,
        frontend_extension: str = DEFAULT_FRONTEND_EXTENSION,
        pluralizer: Optional[Pluralizer] = None,
    ) -> "PathMapper":
        """Create a mapper over the default rule table with custom extensions."""
        return cls(build_default_rules(backend_extension, frontend_extension, pluralizer))

    def map_to_test_candidates(self, path: str) -> List[str]:
        """Return the ordered, de-duplicated candidate test paths for ``path``.

        ``path`` must already be relative to the repository root with the
        leading slash removed. Paths matching no rule yield an empty list.
        """
        candidates = CandidateSet()
        for rule in self.rules:
            candidates.extend(rule.apply(path))
        return candidates.to_list()
