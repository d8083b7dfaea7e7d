"""CLI command for generating and applying a commit message."""

from typing import Optional

import typer

from arc_ai.formatters import render_suggestion
from arc_ai.git import GitError, NoStagedChangesError, create_commit, get_staged_diff
from arc_ai.global_config import GlobalConfigError, resolve_model
from arc_ai.llm import LLMError, ask_ai
from arc_ai.prompts import build_commit_prompt
from arc_ai.cli.utils import get_stdin, is_affirmative


def commit_command(
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="AI model to use",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show message without committing",
    ),
) -> None:
    """Generate an AI commit message from staged changes.

    Runs 'git diff --cached', sends the diff to the first available AI CLI
    (claude, then codex) and offers the suggested message for commit.
    """
    try:
        effective_model = resolve_model(model)
    except GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    # Step 1: Collect the staged diff
    try:
        diff = get_staged_diff()
    except NoStagedChangesError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"git diff failed: {e}", err=True)
        raise typer.Exit(1)

    # Step 2: Ask the provider
    typer.echo("Generating commit message...", err=True)
    try:
        message = ask_ai(build_commit_prompt(diff), model=effective_model)
    except LLMError as e:
        typer.echo(f"AI request failed: {e}", err=True)
        raise typer.Exit(1)

    message = message.strip()
    typer.echo(render_suggestion(message))

    if dry_run:
        return

    # Step 3: Confirm with the user
    typer.echo("")
    typer.echo("Use this message? [Y/n]: ", nl=False)
    # readline() returns "" at end-of-file, which counts as the default answer
    response = get_stdin().readline()
    if not is_affirmative(response):
        typer.echo("Commit cancelled.")
        return

    # Step 4: Create the commit
    try:
        output = create_commit(message)
    except GitError as e:
        typer.echo(f"git commit failed: {e}", err=True)
        raise typer.Exit(1)

    if output:
        typer.echo(output)
