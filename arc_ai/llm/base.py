"""Base classes and shared utilities for AI CLI providers."""

import logging
import shutil
import subprocess
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """Base exception for provider-related errors."""

    pass


class NoProviderAvailableError(LLMError):
    """Raised when none of the known AI CLIs is on PATH."""

    pass


class ProviderExecutionError(LLMError):
    """Raised when the selected AI CLI cannot run or exits non-zero."""

    pass


class EmptyPromptError(LLMError):
    """Raised when an empty prompt is about to be dispatched."""

    pass


class BaseCLIProvider(ABC):
    """An AI assistant invoked as an external executable.

    Subclasses describe the calling convention: which executable to run
    and how the prompt and optional model are laid out on its command
    line. Running the process and handling its failures is shared.
    """

    #: Provider name used in messages
    name: str = ""

    #: Executable looked up on PATH
    executable: str = ""

    def __init__(self, model: str | None = None):
        """Initialize the provider.

        Args:
            model: Model override passed through to the CLI, if any.
        """
        self.model = model

    @classmethod
    def is_available(cls) -> bool:
        """Check whether the provider's executable is on PATH."""
        # noinspection PyArgumentList
        return shutil.which(cls.executable) is not None

    @abstractmethod
    def build_args(self, prompt: str) -> list[str]:
        """Build the full argument list, executable first, prompt last.

        Args:
            prompt: The prompt text.

        Returns:
            Argument list suitable for subprocess.run.
        """
        pass

    def _model_args(self) -> list[str]:
        """Return the --model flag pair, or nothing when no model is set."""
        if self.model:
            return ["--model", self.model]
        return []

    def ask(self, prompt: str) -> str:
        """Send a prompt to the CLI and return its trimmed stdout.

        Args:
            prompt: The prompt text.

        Returns:
            The response with surrounding whitespace removed.

        Raises:
            ProviderExecutionError: If the CLI cannot be started or exits non-zero.
        """
        args = self.build_args(prompt)
        logger.debug("Running %s (model=%s, prompt=%d chars)", self.name, self.model or "default", len(prompt))

        try:
            result = subprocess.run(
                args,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise ProviderExecutionError(f"{self.name} failed: {e}") from e

        if result.returncode != 0:
            detail = (result.stderr or "").strip()
            message = f"{self.name} failed: exit status {result.returncode}"
            if detail:
                message = f"{message}\n{detail}"
            raise ProviderExecutionError(message)

        return result.stdout.strip()
