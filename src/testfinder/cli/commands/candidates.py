"""List the test files mapped from a source file."""

import json
from pathlib import Path
from typing import Optional

import click

from ...logging_integration import get_module_logger
from ...services import TestFileFinder
from ..error_handlers import handle_cli_errors
from ..utils import load_config, resolve_target

logger = get_module_logger()


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--root", "-r",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Repository root (defaults to the enclosing git checkout)",
)
@click.option(
    "--all", "show_all",
    is_flag=True,
    help="List every mapped candidate, including files that do not exist",
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print the result as a JSON array",
)
@click.pass_context
@handle_cli_errors
def candidates(
    ctx: click.Context,
    path: Path,
    root: Optional[Path],
    show_all: bool,
    as_json: bool,
) -> None:
    """Show the test files for PATH.

    Paths are printed relative to the repository root, most conventional
    first.

    \b
    Examples:
        testfinder candidates app/models/person.rb
        testfinder candidates lib/billing/invoice.rb --all
        testfinder candidates components/web/Button.tsx --json
    """
    active_file, repo_root = resolve_target(path, root)
    finder = TestFileFinder.from_config(load_config(ctx))

    if show_all:
        results = finder.candidates(active_file, repo_root)
    else:
        results = [
            found.relative_to(repo_root).as_posix()
            for found in finder.find(active_file, repo_root)
        ]

    logger.info(
        f"{len(results)} test files for {active_file}",
        repo_root=str(repo_root),
        show_all=show_all,
    )

    if as_json:
        click.echo(json.dumps(results))
        return

    for result in results:
        click.echo(result)
