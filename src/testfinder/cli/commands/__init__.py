"""CLI commands for testfinder."""

from .candidates import candidates
from .config import config
from .open import open_command

__all__ = [
    "candidates",
    "config",
    "open_command",
]
