"""Configuration management command."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.prompt import Confirm
from rich.table import Table

from ...core.config import ConfigManager, TestFinderConfig
from ...logging_integration import get_module_logger
from ..error_handlers import handle_cli_errors

console = Console()
logger = get_module_logger()


@click.command()
@click.option("--show", is_flag=True, help="Show current configuration")
@click.option(
    "--export",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Export configuration to a TOML file",
)
@click.option("--reset", is_flag=True, help="Reset configuration to defaults")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
@handle_cli_errors
def config(
    ctx: click.Context,
    show: bool,
    export: Optional[Path],
    reset: bool,
    yes: bool,
) -> None:
    """Manage configuration.

    \b
    Examples:
        testfinder config --show
        testfinder config --export testfinder.toml
        testfinder config --reset --yes
    """
    config_manager = ConfigManager(ctx.obj.get("config_file"))

    if reset:
        if yes or Confirm.ask("Are you sure you want to reset all configuration?", console=console):
            config_manager.reset_config()
            logger.info("Configuration reset", config_file=str(config_manager.config_file))
            console.print("[green]✓ Configuration reset to defaults[/green]")
        return

    if export:
        config_manager.export_config(export)
        console.print(f"[green]✓ Configuration exported to {export}[/green]", soft_wrap=True)
        return

    show_configuration(config_manager)


def show_configuration(config_manager: ConfigManager) -> None:
    """Display the active configuration as a table."""
    config: TestFinderConfig = config_manager.load_config()

    table = Table(title="testfinder Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Config file", str(config_manager.config_file))
    table.add_row("Backend extension", config.mapping.backend_extension)
    table.add_row("Frontend extension", config.mapping.frontend_extension)
    table.add_row("Check timeout", f"{config.resolver.check_timeout:g}s")
    table.add_row("Open command", config.opener.command or "$EDITOR")
    table.add_row(
        "Open beside command",
        config.opener.beside_command or config.opener.command or "$EDITOR",
    )
    table.add_row("Log level", config.logging.level.value)
    table.add_row("Log format", config.logging.format)
    table.add_row("Log output", ", ".join(config.logging.output))

    console.print(table)
