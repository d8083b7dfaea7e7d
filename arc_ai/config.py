"""Static configuration for arc-ai.

User-editable settings live in ~/.arc-ai/config.yaml (see global_config.py).
This module only holds the fixed values the commands are built around.
"""

from enum import Enum


class AIProvider(str, Enum):
    """Supported AI command-line tools, valued by executable name."""

    CLAUDE = "claude"
    CODEX = "codex"


# Providers are probed in this order; the first one found on PATH wins.
PROVIDER_ORDER = [AIProvider.CLAUDE, AIProvider.CODEX]

# Maximum characters of staged diff sent to the provider
MAX_DIFF_CHARS = 10000

# Appended to a diff that was cut at MAX_DIFF_CHARS
TRUNCATION_MARKER = "\n... (truncated)"
