"""
Selection and opening of resolved test files.

Zero candidates is reported and ignored, a single candidate is opened
directly, and several candidates are offered as a numbered menu.
"""

import shlex
import subprocess
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import click
from rich.console import Console
from rich.prompt import Prompt

from ..constants import OPENER_PATH_PLACEHOLDER
from ..core.config import OpenerConfig
from ..exceptions import FileOpenError
from ..logging_integration import get_module_logger

console = Console()
logger = get_module_logger()

NO_TESTS_MESSAGE = "No test files found"


class FileOpener:
    """Opens files with a command template, or the user's editor when none is set."""

    def __init__(self, command: Optional[str] = None, beside_command: Optional[str] = None):
        self.command = command
        self.beside_command = beside_command

    @classmethod
    def from_config(cls, config: OpenerConfig) -> "FileOpener":
        return cls(config.command, config.beside_command)

    def build_command(self, path: Path, beside: bool = False) -> Optional[List[str]]:
        """Argument list for opening ``path``, or None to fall back to the editor."""
        template = self.beside_command if beside and self.beside_command else self.command
        if template is None:
            return None
        return [
            arg.replace(OPENER_PATH_PLACEHOLDER, str(path)) for arg in shlex.split(template)
        ]

    def open(self, path: Path, beside: bool = False) -> None:
        args = self.build_command(path, beside)
        if beside and not self.beside_command:
            logger.debug("No beside command configured, opening in the current view")

        if args is None:
            try:
                click.edit(filename=str(path))
            except click.ClickException as e:
                raise FileOpenError(str(path), e.format_message()) from e
            return

        logger.info(f"Opening {path}", command=args)
        try:
            subprocess.run(args, check=True)
        except (OSError, subprocess.CalledProcessError) as e:
            raise FileOpenError(str(path), str(e)) from e


def display_label(path: Path, repo_root: Path) -> str:
    """Menu label for a resolved path: relative to the repository root."""
    try:
        return Path(path).relative_to(repo_root).as_posix()
    except ValueError:
        return str(path)


def choose_candidate(labels: Sequence[str]) -> Optional[int]:
    """Ask the user to pick one label; returns its index, or None on cancel."""
    for number, label in enumerate(labels, start=1):
        console.print(f"  [bold cyan]{number}[/bold cyan]  {label}", highlight=False, soft_wrap=True)

    try:
        answer = Prompt.ask(
            "Open which test file? [dim](enter to cancel)[/dim]",
            console=console,
            choices=[str(n) for n in range(1, len(labels) + 1)],
            show_choices=False,
            default="",
            show_default=False,
        )
    except (EOFError, KeyboardInterrupt):
        return None

    if not answer:
        return None
    return int(answer) - 1


def open_test_file(
    resolved: Sequence[Path],
    repo_root: Path,
    opener: FileOpener,
    beside: bool = False,
    chooser: Callable[[Sequence[str]], Optional[int]] = choose_candidate,
) -> Optional[Path]:
    """Open one of the resolved test files; returns the opened path, if any."""
    if not resolved:
        console.print(f"[yellow]{NO_TESTS_MESSAGE}[/yellow]")
        return None

    if len(resolved) == 1:
        selected = resolved[0]
    else:
        index = chooser([display_label(path, repo_root) for path in resolved])
        if index is None:
            logger.debug("Selection cancelled")
            return None
        selected = resolved[index]

    opener.open(selected, beside=beside)
    return selected
