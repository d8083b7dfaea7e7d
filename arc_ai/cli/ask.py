"""CLI command for asking an AI a question."""

from typing import List, Optional

import typer

from arc_ai.formatters import AskResult, OutputFormat, render_ask_result
from arc_ai.global_config import GlobalConfigError, resolve_model
from arc_ai.llm import LLMError, ask_ai
from arc_ai.prompts import EmptyQuestionError, read_stdin_lines, resolve_question
from arc_ai.cli.utils import get_stdin


def ask_command(
    question: Optional[List[str]] = typer.Argument(
        None,
        help="The question. Read from stdin when omitted.",
        show_default=False,
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="AI model to use",
    ),
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--output",
        "-o",
        case_sensitive=False,
        help="Output format (table, json, yaml)",
    ),
) -> None:
    """Ask an AI model a question and get a response.

    The question can be provided as arguments or piped via stdin.
    """
    words = question or []

    # stdin is only consumed when no positional question was given
    stdin_lines = [] if words else read_stdin_lines(get_stdin())

    try:
        text = resolve_question(words, stdin_lines)
    except EmptyQuestionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    try:
        effective_model = resolve_model(model)
        response = ask_ai(text, model=effective_model)
    except GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(render_ask_result(AskResult(question=text, response=response), output))
