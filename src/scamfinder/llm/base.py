"""Abstract analysis provider interface for ScamFinder."""

from __future__ import annotations

import abc
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from scamfinder.models.content import PromptPart


@dataclass
class LLMResult:
    """Unified result from any provider call."""

    content: str = ""
    input_tokens: int = 0
    output_tokens: int = 0
    latency_ms: float = 0.0
    model: str = ""
    raw_response: dict = field(default_factory=dict)


class AnalysisProvider(abc.ABC):
    """Abstract interface for a hosted model that returns structured JSON."""

    @abc.abstractmethod
    def generate(
        self,
        parts: Sequence[PromptPart],
        *,
        response_schema: dict[str, Any],
        system_instruction: str,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> LLMResult:
        """Send one request and return the raw response text.

        Args:
            parts: Ordered prompt parts (inline binary and text).
            response_schema: Structured-output schema the model must follow.
            system_instruction: Fixed persona / stance instruction.
            temperature: Override sampling temperature.
            max_tokens: Override max generation tokens.

        Returns:
            An ``LLMResult`` whose ``content`` is the model's text output.
        """

    def check_connectivity(self) -> bool:
        """Return True if the backing service is reachable."""
        return True

    def close(self) -> None:
        """Release any held resources."""
