"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(temp_dir, mocker):
    """Point the global config directory at a temporary location."""
    mock_dir = temp_dir / ".arc-ai"
    mocker.patch("arc_ai.global_config._CONFIG_DIR", mock_dir)
    return mock_dir


@pytest.fixture
def sample_diff():
    """Sample staged diff for testing."""
    return """diff --git a/existing_file.py b/existing_file.py
index 1234567..abcdefg 100644
--- a/existing_file.py
+++ b/existing_file.py
@@ -1,5 +1,8 @@
 def main():
-    print("old")
+    print("new")
+
+def helper():
+    return True
"""


@pytest.fixture
def completed_process():
    """Factory for subprocess.run results."""

    def _make(stdout: str = "", stderr: str = "", returncode: int = 0) -> MagicMock:
        result = MagicMock()
        result.stdout = stdout
        result.stderr = stderr
        result.returncode = returncode
        return result

    return _make


@pytest.fixture
def which_only(mocker):
    """Patch shutil.which so only the named executables are found."""

    def _install(*names: str) -> MagicMock:
        return mocker.patch(
            "arc_ai.llm.base.shutil.which",
            side_effect=lambda name: f"/usr/bin/{name}" if name in names else None,
        )

    return _install
