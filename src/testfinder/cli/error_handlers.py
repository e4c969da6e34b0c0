"""
Centralized error handling for the CLI.

Provides consistent error display, logging and exit codes across all CLI commands.
"""

import functools
import sys

import click
from rich.console import Console

from ..exceptions import (
    CLIError,
    ConfigurationError,
    RepositoryError,
    TestFinderError,
)
from ..logging_integration import get_logger

console = Console(stderr=True)

EXIT_UNEXPECTED = 1
EXIT_CONFIGURATION = 3
EXIT_REPOSITORY = 4
EXIT_CLI = 9
EXIT_GENERAL = 10
EXIT_SYSTEM = 11


def handle_cli_errors(func):
    """Decorator to handle all CLI errors with proper formatting and exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (click.exceptions.Exit, click.ClickException, click.Abort):
            raise
        except KeyboardInterrupt:
            _handle_keyboard_interrupt()
        except ConfigurationError as e:
            _handle_error(e, "⚙️  Configuration Error", EXIT_CONFIGURATION)
        except RepositoryError as e:
            _handle_error(e, "📁 Repository Error", EXIT_REPOSITORY)
        except CLIError as e:
            _handle_error(e, "⌨️  Command Error", EXIT_CLI)
        except TestFinderError as e:
            _handle_error(e, "❌ Error", EXIT_GENERAL)
        except OSError as e:
            _handle_system_error(e)
        except Exception as e:
            _handle_unexpected_error(e)

    return wrapper


def _print_error(message: str, style: str = "red"):
    console.print(f"[{style}]{message}[/{style}]", markup=True, highlight=False)


def _print_help(message: str):
    console.print(f"[blue]💡 {message}[/blue]", highlight=False)


def _print_action(message: str):
    console.print(f"[green]🔧 Action: {message}[/green]", highlight=False)


def _print_context(context_items: list):
    console.print(f"[dim]📋 Context: {', '.join(context_items)}[/dim]", highlight=False)


def _print_error_id(error_id: str):
    console.print(f"[dim]🔍 Error ID: {error_id}[/dim]", highlight=False)


def _handle_keyboard_interrupt():
    _print_error("\nOperation cancelled by user", "yellow")
    sys.exit(EXIT_UNEXPECTED)


def _handle_error(e: TestFinderError, title: str, exit_code: int):
    """Print a testfinder exception with its guidance and exit."""
    _print_error(f"{title}: {e.message}")
    if e.help_text:
        _print_help(e.help_text)
    if e.user_action:
        _print_action(e.user_action)
    if e.context:
        _print_context([f"{k}: {v}" for k, v in e.context.items()])
    _print_error_id(e.correlation_id)

    logger = get_logger("testfinder.cli.error")
    logger.error(
        f"{type(e).__name__} ({e.error_code}): {e.message}",
        error_dict=e.to_dict(),
    )
    sys.exit(exit_code)


def _handle_system_error(e: OSError):
    _print_error(f"💻 System Error: {e}")
    _print_help("Check file permissions and that the paths exist")

    get_logger("testfinder.cli.error").error(f"System error: {e}")
    sys.exit(EXIT_SYSTEM)


def _handle_unexpected_error(e: Exception):
    _print_error(f"🐛 Unexpected Error: {e}")
    console.print("[yellow]This may be a bug. Run again with -vv for details.[/yellow]")

    get_logger("testfinder.cli.error").exception("Unexpected error occurred")
    sys.exit(EXIT_UNEXPECTED)
