"""Root callback for the arc-ai CLI."""

import typer

from arc_ai import __version__
from arc_ai.logging_config import configure_logging


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"arc-ai {__version__}")
        raise typer.Exit()


def main_command(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print debug logging to stderr",
    ),
) -> None:
    """AI-powered development tools.

    Generate commit messages, analyze code, and more using AI models.
    """
    configure_logging(verbose)
