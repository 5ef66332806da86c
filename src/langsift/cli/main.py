"""
langsift CLI - Main entry point
"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from langsift.cli.commands import detect, profiles
from langsift.core.config.settings import settings
from langsift.core.logging.logger import get_logger, set_level

# Initialize CLI app
app = typer.Typer(
    name="langsift",
    help="Statistical language identification with character n-gram profiles",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# Initialize console and logger
console = Console()
logger = get_logger(__name__)

# Add subcommands
app.add_typer(detect.app, name="detect", help="Language detection commands")
app.add_typer(profiles.app, name="profiles", help="Language profile commands")


def _version_table() -> Table:
    table = Table(title="langsift Version Information")
    table.add_column("Component", style="cyan")
    table.add_column("Version", style="green")
    table.add_column("Environment", style="yellow")
    table.add_row("langsift", settings.APP_VERSION, settings.ENVIRONMENT)
    table.add_row("Python", "3.9+", "Required")
    table.add_row("Profiles", settings.PROFILE_DIR or "-", "PROFILE_DIR")
    return table


def version_callback(value: bool) -> None:
    """Handle version callback"""
    if value:
        console.print(_version_table())
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging"
    ),
    show_version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show langsift version and exit",
    ),
) -> None:
    """
    langsift CLI - Statistical language identification

    Run 'langsift --help' for available commands.
    """
    if verbose:
        set_level("DEBUG")
        logger.debug("Verbose logging enabled")


@app.command()
def version() -> None:
    """Show langsift version information"""
    console.print(_version_table())


if __name__ == "__main__":
    app()
