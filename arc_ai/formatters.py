"""Output rendering for arc-ai commands."""

from enum import Enum

import yaml
from pydantic import BaseModel


class OutputFormat(str, Enum):
    """Rendering for `arc-ai ask` results."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


class AskResult(BaseModel):
    """A question and the provider's answer.

    Attributes:
        question: The question as sent to the provider.
        response: The trimmed provider response.
    """

    question: str
    response: str


def render_ask_result(result: AskResult, fmt: OutputFormat = OutputFormat.TABLE) -> str:
    """Render an AskResult for display.

    The human-readable form is just the response; structured forms carry
    both the question and the response.

    Args:
        result: The question/response pair.
        fmt: Output format.

    Returns:
        The rendered text, without a trailing newline.
    """
    if fmt == OutputFormat.JSON:
        return result.model_dump_json(indent=2)
    if fmt == OutputFormat.YAML:
        return yaml.safe_dump(
            result.model_dump(),
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        ).rstrip("\n")
    return result.response


def render_suggestion(message: str) -> str:
    """Render the suggested commit message block."""
    return f"\nSuggested commit message:\n{message}"
