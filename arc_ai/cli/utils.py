"""Shared utility functions for CLI commands."""

import sys
from typing import Optional, TextIO

# Responses to a [Y/n] prompt that count as "yes"; the empty answer is the default
AFFIRMATIVE_RESPONSES = ("", "y", "yes")


def is_affirmative(response: Optional[str]) -> bool:
    """Check whether a [Y/n] answer accepts.

    Args:
        response: The raw text typed by the user.

    Returns:
        True for an empty answer, "y" or "yes" in any case.
    """
    return (response or "").strip().lower() in AFFIRMATIVE_RESPONSES


def get_stdin() -> TextIO:
    """Return the current standard input stream."""
    return sys.stdin
