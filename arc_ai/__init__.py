"""arc-ai: commit messages and quick answers from locally installed AI CLIs."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("arc-ai")
except PackageNotFoundError:
    # Running from a source checkout that was never installed
    __version__ = "0.0.0-dev"
