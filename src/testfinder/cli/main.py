"""testfinder CLI main entry point."""

from pathlib import Path
from typing import Optional

import click

from . import __version__
from ..core.config import ConfigManager
from ..exceptions import ConfigurationError
from ..logging_integration import (
    configure_logging_from_manager,
    ensure_logging_configured,
    get_logger,
    verbosity_to_level,
)
from .commands import candidates, config, open_command


def setup_logging(config_file: Optional[Path] = None, verbose: int = 0) -> None:
    """Set up logging from the configuration file, honouring ``--verbose``."""
    try:
        configure_logging_from_manager(
            ConfigManager(config_file),
            service_name="testfinder-cli",
            version=__version__,
            level_override=verbosity_to_level(verbose),
        )
    except ConfigurationError as e:
        # Commands reload the configuration and report the error themselves
        ensure_logging_configured()
        get_logger("testfinder.cli").debug(f"Using default logging: {e.message}")
        return

    get_logger("testfinder.cli").debug(
        "testfinder CLI started", version=__version__, verbose_level=verbose
    )


@click.group()
@click.version_option(version=__version__, prog_name="testfinder")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path",
)
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: int) -> None:
    """testfinder: jump from a source file to its tests.

    Maps a file to the test files that conventionally cover it
    (app/models/person.rb -> test/models/person_test.rb and friends) and
    opens the one that exists.

    \b
    Examples:
        testfinder candidates app/models/person.rb
        testfinder open lib/billing/invoice.rb
        testfinder open app/models/person.rb --beside
        testfinder config --show
    """
    setup_logging(config, verbose)

    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config
    ctx.obj["verbose"] = verbose


cli.add_command(candidates)
cli.add_command(open_command)
cli.add_command(config)


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
