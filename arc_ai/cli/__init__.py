"""CLI entry point for arc-ai.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from arc_ai.cli.ask import ask_command
from arc_ai.cli.commit import commit_command
from arc_ai.cli.config import config_app
from arc_ai.cli.main import main_command

# Main application
app = typer.Typer(
    name="arc-ai",
    help="AI-powered development tools",
    add_completion=False,
    no_args_is_help=True,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("commit")(commit_command)
app.command("ask")(ask_command)

app.callback()(main_command)


__all__ = [
    "app",
    "ask_command",
    "commit_command",
    "config_app",
    "main_command",
]
