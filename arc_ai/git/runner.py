"""Git command runner.

Contains:
- run_git_command: Run a git command and return its output
"""

import logging
import subprocess

from arc_ai.git.exceptions import GitError

logger = logging.getLogger(__name__)


def run_git_command(args: list[str], strip: bool = True) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        strip: Strip surrounding whitespace from stdout.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails or git is not installed.
    """
    logger.debug("Running: git %s", " ".join(args[:2]))
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args[:2])}\n{stderr}".rstrip())
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")

    return result.stdout.strip() if strip else result.stdout
