"""AI provider module for arc-ai.

This module dispatches prompts to whichever known AI command-line tool is
installed. Providers are probed in the fixed order from config.PROVIDER_ORDER
and the first one found on PATH handles the request on its own.
"""

import logging

from arc_ai.config import PROVIDER_ORDER, AIProvider
from arc_ai.llm.base import (
    BaseCLIProvider,
    EmptyPromptError,
    LLMError,
    NoProviderAvailableError,
    ProviderExecutionError,
)
from arc_ai.llm.claude_provider import ClaudeProvider
from arc_ai.llm.codex_provider import CodexProvider

logger = logging.getLogger(__name__)

PROVIDER_CLASSES: dict[AIProvider, type[BaseCLIProvider]] = {
    AIProvider.CLAUDE: ClaudeProvider,
    AIProvider.CODEX: CodexProvider,
}


def get_provider(provider: AIProvider, model: str | None = None) -> BaseCLIProvider:
    """Get a provider instance.

    Args:
        provider: The provider to use.
        model: Optional model override passed through to the CLI.

    Returns:
        An instance of the matching provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    try:
        provider_cls = PROVIDER_CLASSES[provider]
    except KeyError:
        raise ValueError(f"Unsupported provider: {provider}")
    return provider_cls(model=model)


def select_provider(model: str | None = None) -> BaseCLIProvider:
    """Return the first provider whose executable is on PATH.

    Args:
        model: Optional model override passed through to the CLI.

    Raises:
        NoProviderAvailableError: If none of the known CLIs is installed.
    """
    for provider in PROVIDER_ORDER:
        if PROVIDER_CLASSES[provider].is_available():
            logger.debug("Using provider %s", provider.value)
            return get_provider(provider, model=model)

    names = " or ".join(p.value for p in PROVIDER_ORDER)
    raise NoProviderAvailableError(f"no AI provider available (install {names} CLI)")


def ask_ai(prompt: str, model: str | None = None) -> str:
    """Send a prompt to the first available AI CLI.

    This is the single entry point shared by `commit` and `ask`.

    Args:
        prompt: The prompt text.
        model: Optional model override.

    Returns:
        The provider's response, trimmed of surrounding whitespace.

    Raises:
        EmptyPromptError: If the prompt is empty or whitespace-only.
        NoProviderAvailableError: If no known CLI is installed.
        ProviderExecutionError: If the chosen CLI fails.
    """
    if not prompt or not prompt.strip():
        raise EmptyPromptError("prompt must not be empty")

    provider = select_provider(model=model)
    return provider.ask(prompt)


# Export commonly used items
__all__ = [
    "BaseCLIProvider",
    "ClaudeProvider",
    "CodexProvider",
    "LLMError",
    "NoProviderAvailableError",
    "ProviderExecutionError",
    "EmptyPromptError",
    "PROVIDER_CLASSES",
    "get_provider",
    "select_provider",
    "ask_ai",
]
