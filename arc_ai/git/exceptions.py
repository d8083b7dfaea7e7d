"""Exceptions raised by the git helpers."""


class GitError(Exception):
    """A git invocation failed or git could not be run."""

    pass


class NoStagedChangesError(GitError):
    """`git diff --cached` produced no output."""

    pass
