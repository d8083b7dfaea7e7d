"""Claude Code CLI provider."""

from arc_ai.config import AIProvider
from arc_ai.llm.base import BaseCLIProvider


class ClaudeProvider(BaseCLIProvider):
    """Runs `claude --print [--model M] PROMPT`."""

    name = AIProvider.CLAUDE.value
    executable = AIProvider.CLAUDE.value

    def build_args(self, prompt: str) -> list[str]:
        return [self.executable, "--print", *self._model_args(), prompt]
