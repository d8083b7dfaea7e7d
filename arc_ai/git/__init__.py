"""Git helpers for arc-ai.

This package provides:
- exceptions: GitError, NoStagedChangesError
- runner: run_git_command
- diff: get_staged_diff, truncate_diff
- commit: create_commit
"""

from arc_ai.git.exceptions import GitError, NoStagedChangesError
from arc_ai.git.runner import run_git_command
from arc_ai.git.diff import get_staged_diff, truncate_diff
from arc_ai.git.commit import create_commit

__all__ = [
    "GitError",
    "NoStagedChangesError",
    "run_git_command",
    "get_staged_diff",
    "truncate_diff",
    "create_commit",
]
