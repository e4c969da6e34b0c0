"""Helpers shared by CLI commands."""

from .targets import load_config, resolve_target

__all__ = ["load_config", "resolve_target"]
