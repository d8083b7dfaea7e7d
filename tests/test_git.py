"""Tests for arc_ai.git package."""

import subprocess

import pytest

from arc_ai.config import MAX_DIFF_CHARS, TRUNCATION_MARKER
from arc_ai.git import (
    GitError,
    NoStagedChangesError,
    create_commit,
    get_staged_diff,
    run_git_command,
    truncate_diff,
)


class TestRunGitCommand:
    """Tests for run_git_command function."""

    def test_successful_command(self, mocker, completed_process):
        """Test successful git command execution."""
        mock_run = mocker.patch("subprocess.run", return_value=completed_process("output\n"))

        result = run_git_command(["status"])

        assert result == "output"
        assert mock_run.call_args[0][0] == ["git", "status"]

    def test_keeps_whitespace_when_not_stripping(self, mocker, completed_process):
        """Test that strip=False returns stdout untouched."""
        mocker.patch("subprocess.run", return_value=completed_process("  output\n"))

        assert run_git_command(["status"], strip=False) == "  output\n"

    def test_failed_command_raises_error(self, mocker):
        """Test that failed command raises GitError."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(1, "git", stderr="fatal: bad revision"),
        )

        with pytest.raises(GitError) as exc_info:
            run_git_command(["diff", "--cached"])

        assert "Git command failed" in str(exc_info.value)
        assert "fatal: bad revision" in str(exc_info.value)

    def test_git_not_found_raises_error(self, mocker):
        """Test that missing git raises GitError."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(GitError) as exc_info:
            run_git_command(["status"])

        assert "not installed" in str(exc_info.value)


class TestTruncateDiff:
    """Tests for truncate_diff function."""

    def test_short_diff_unchanged(self):
        """Test that a diff under the budget is returned as-is."""
        diff = "diff --git a/x b/x\n+line\n"
        assert truncate_diff(diff) == diff

    def test_diff_at_limit_unchanged(self):
        """Test that a diff of exactly the budget is not truncated."""
        diff = "a" * MAX_DIFF_CHARS
        assert truncate_diff(diff) == diff

    def test_long_diff_truncated(self):
        """Test that a diff over the budget keeps the prefix plus marker."""
        diff = "x" * 5000 + "y" * 7000

        result = truncate_diff(diff)

        assert result == diff[:MAX_DIFF_CHARS] + TRUNCATION_MARKER
        assert result.endswith("\n... (truncated)")

    def test_cuts_mid_line(self):
        """Test that truncation is by raw character count."""
        diff = "+" + "a" * 20 + "\n"

        result = truncate_diff(diff, max_chars=5)

        assert result == "+aaaa" + TRUNCATION_MARKER


class TestGetStagedDiff:
    """Tests for get_staged_diff function."""

    def test_returns_diff(self, mocker, completed_process, sample_diff):
        """Test that the staged diff is returned."""
        mock_run = mocker.patch("subprocess.run", return_value=completed_process(sample_diff))

        result = get_staged_diff()

        assert result == sample_diff
        assert mock_run.call_args[0][0] == ["git", "diff", "--cached"]

    def test_empty_diff_raises(self, mocker, completed_process):
        """Test that an empty diff raises NoStagedChangesError."""
        mocker.patch("subprocess.run", return_value=completed_process(""))

        with pytest.raises(NoStagedChangesError):
            get_staged_diff()

    def test_git_failure_raises_git_error(self, mocker):
        """Test that a failing git diff raises GitError."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(128, "git", stderr="not a git repository"),
        )

        with pytest.raises(GitError) as exc_info:
            get_staged_diff()

        assert not isinstance(exc_info.value, NoStagedChangesError)

    def test_large_diff_truncated(self, mocker, completed_process):
        """Test that a large diff is truncated."""
        mocker.patch("subprocess.run", return_value=completed_process("z" * 12000))

        result = get_staged_diff()

        assert result == "z" * MAX_DIFF_CHARS + TRUNCATION_MARKER


class TestCreateCommit:
    """Tests for create_commit function."""

    def test_runs_git_commit(self, mocker, completed_process):
        """Test that git commit is run with the message."""
        mock_run = mocker.patch(
            "subprocess.run",
            return_value=completed_process("[main abc123] feat: add helper\n"),
        )

        result = create_commit("feat: add helper\n\nAdd helper function")

        assert mock_run.call_args[0][0] == [
            "git", "commit", "-m", "feat: add helper\n\nAdd helper function",
        ]
        assert result == "[main abc123] feat: add helper"

    def test_failure_raises_git_error(self, mocker):
        """Test that a failed commit raises GitError."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(1, "git", stderr="nothing to commit"),
        )

        with pytest.raises(GitError) as exc_info:
            create_commit("fix: something")

        assert "nothing to commit" in str(exc_info.value)
