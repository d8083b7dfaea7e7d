"""Creating commits."""

import logging

from arc_ai.git.runner import run_git_command

logger = logging.getLogger(__name__)


def create_commit(message: str) -> str:
    """Commit the staged changes with the given message.

    Args:
        message: The full commit message (subject and optional body).

    Returns:
        git's output describing the new commit.

    Raises:
        GitError: If git commit fails.
    """
    logger.debug("Committing with a %d character message", len(message))
    return run_git_command(["commit", "-m", message])
