"""Prompt construction for arc-ai commands.

Contains:
- COMMIT_PROMPT_TEMPLATE: Instruction wrapped around a staged diff
- build_commit_prompt: Render the commit prompt for a diff
- read_stdin_lines: Read a text stream into lines
- resolve_question: Derive the question for `arc-ai ask`
"""

from typing import Iterable, TextIO


class EmptyQuestionError(ValueError):
    """Raised when no question text could be derived."""

    pass


COMMIT_PROMPT_TEMPLATE = """Generate a concise git commit message for the following diff.
Use conventional commit format (feat:, fix:, docs:, refactor:, etc.).
Keep the message under 72 characters for the subject line.
Include a brief body if needed.

Diff:
{diff}

Respond with ONLY the commit message, no explanations."""


def build_commit_prompt(diff: str) -> str:
    """Render the commit message prompt for a staged diff.

    Args:
        diff: The (possibly truncated) staged diff.

    Returns:
        The full prompt to send to the provider.
    """
    return COMMIT_PROMPT_TEMPLATE.format(diff=diff)


def read_stdin_lines(stream: TextIO) -> list[str]:
    """Read every line from a text stream, without line terminators."""
    return [line.rstrip("\r\n") for line in stream]


def resolve_question(args: Iterable[str], stdin_lines: Iterable[str] = ()) -> str:
    """Derive the question text for `arc-ai ask`.

    Positional words are joined with single spaces. When there are none,
    the stdin lines are joined with newlines instead.

    Args:
        args: Positional words from the command line.
        stdin_lines: Lines read from standard input.

    Returns:
        The question text.

    Raises:
        EmptyQuestionError: If the question is empty or whitespace-only.
    """
    words = list(args)
    if words:
        question = " ".join(words)
    else:
        question = "\n".join(stdin_lines)

    if not question.strip():
        raise EmptyQuestionError("no question provided")

    return question
