"""Open the test file belonging to a source file."""

from pathlib import Path
from typing import Optional

import click

from ...services import TestFileFinder
from ..error_handlers import handle_cli_errors
from ..selection import FileOpener, open_test_file
from ..utils import load_config, resolve_target


@click.command(name="open")
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--root", "-r",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Repository root (defaults to the enclosing git checkout)",
)
@click.option(
    "--beside", "-b",
    is_flag=True,
    help="Open next to the current view instead of replacing it",
)
@click.pass_context
@handle_cli_errors
def open_command(
    ctx: click.Context,
    path: Path,
    root: Optional[Path],
    beside: bool,
) -> None:
    """Open the test file for PATH.

    A single match opens straight away; several matches are offered as a
    numbered list.

    \b
    Examples:
        testfinder open app/controllers/widgets_controller.rb
        testfinder open app/models/person.rb --beside
    """
    config = load_config(ctx)
    active_file, repo_root = resolve_target(path, root)

    resolved = TestFileFinder.from_config(config).find(active_file, repo_root)
    open_test_file(resolved, repo_root, FileOpener.from_config(config.opener), beside=beside)
