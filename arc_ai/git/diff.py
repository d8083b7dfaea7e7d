"""Staged diff collection.

Contains:
- get_staged_diff: Get the staged diff, truncated to a character budget
- truncate_diff: Cut a diff at a character budget and mark it
"""

import logging

from arc_ai.config import MAX_DIFF_CHARS, TRUNCATION_MARKER
from arc_ai.git.exceptions import NoStagedChangesError
from arc_ai.git.runner import run_git_command

logger = logging.getLogger(__name__)


def truncate_diff(diff: str, max_chars: int = MAX_DIFF_CHARS) -> str:
    """Truncate a diff to max_chars characters.

    The cut is by raw character count and can land mid-line.

    Args:
        diff: The diff text.
        max_chars: Maximum characters kept from the diff.

    Returns:
        The diff unchanged if it fits, otherwise the first max_chars
        characters followed by TRUNCATION_MARKER.
    """
    if len(diff) > max_chars:
        logger.debug("Truncating diff from %d to %d characters", len(diff), max_chars)
        return diff[:max_chars] + TRUNCATION_MARKER
    return diff


def get_staged_diff(max_chars: int = MAX_DIFF_CHARS) -> str:
    """Get the staged diff (git diff --cached).

    Args:
        max_chars: Maximum characters for the diff output.

    Returns:
        The staged diff string, truncated if necessary.

    Raises:
        GitError: If git fails.
        NoStagedChangesError: If there are no staged changes.
    """
    diff = run_git_command(["diff", "--cached"], strip=False)

    if not diff:
        raise NoStagedChangesError(
            "no staged changes (stage your changes first with: git add <files>)"
        )

    logger.debug("Collected staged diff (%d characters)", len(diff))
    return truncate_diff(diff, max_chars)
