"""Filesystem resolution of mapped test candidates."""

from .resolver import CandidateResolver

__all__ = ["CandidateResolver"]
