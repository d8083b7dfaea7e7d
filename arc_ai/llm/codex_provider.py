"""Codex CLI provider."""

from arc_ai.config import AIProvider
from arc_ai.llm.base import BaseCLIProvider


class CodexProvider(BaseCLIProvider):
    """Runs `codex ask [--model M] PROMPT`."""

    name = AIProvider.CODEX.value
    executable = AIProvider.CODEX.value

    def build_args(self, prompt: str) -> list[str]:
        return [self.executable, "ask", *self._model_args(), prompt]
