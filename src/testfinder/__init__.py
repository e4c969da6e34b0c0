"""
testfinder: convention-based navigation from source files to their tests.

Architecture Overview:
- mapping: Convention rules, pluralization and the pure path mapper
- resolution: Concurrent existence checks for mapped candidates
- services: The finder combining mapper and resolver for one active file
- core.config: Pydantic configuration with TOML and environment overrides
- cli: Command-line interface and selection/open shell
- logging, exceptions: Cross-cutting concerns
"""

__version__ = "0.1.0"

from .exceptions import TestFinderError
from .mapping import CandidateSet, ConventionRule, EnglishPluralizer, PathMapper, Pluralizer
from .resolution import CandidateResolver
from .services import TestFileFinder, find_repository_root

__all__ = [
    "CandidateResolver",
    "CandidateSet",
    "ConventionRule",
    "EnglishPluralizer",
    "PathMapper",
    "Pluralizer",
    "TestFileFinder",
    "TestFinderError",
    "find_repository_root",
]
