"""Convention-based mapping from source files to test files."""

from .inflection import EnglishPluralizer, Pluralizer, pluralize
from .mapper import CandidateSet, PathMapper
from .rules import DEFAULT_RULES, ConventionRule, build_default_rules

__all__ = [
    "CandidateSet",
    "ConventionRule",
    "DEFAULT_RULES",
    "EnglishPluralizer",
    "PathMapper",
    "Pluralizer",
    "build_default_rules",
    "pluralize",
]
