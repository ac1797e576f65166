"""Gemini analysis provider for ScamFinder.

Uses the ``google-genai`` unified SDK with API-key authentication. The
provider is selected at runtime with ``SCAMFINDER_LLM__PROVIDER=gemini``
(the default).
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import Any

from scamfinder.exceptions import CredentialError
from scamfinder.llm.base import AnalysisProvider, LLMResult
from scamfinder.models.content import InlineBinary, PromptPart, TextPart

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"

_STOP_REASONS = ("1", "FinishReason.STOP", "STOP")


class GeminiProvider(AnalysisProvider):
    """Analysis provider backed by Google Gemini.

    Args:
        api_key: Gemini API key. Required; an empty key fails immediately
            with ``CredentialError`` before any client is created.
        model: Gemini model name (e.g. ``gemini-2.5-flash``).
        temperature: Default sampling temperature.
        max_tokens: Default max output tokens.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.2,
        max_tokens: int = 8192,
    ) -> None:
        if not api_key:
            raise CredentialError()
        self.model_name = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._client = None
        self._init_client(api_key)

    def _init_client(self, api_key: str) -> None:
        """Initialize the Google Gen AI client."""
        try:
            from google import genai

            self._client = genai.Client(api_key=api_key)
            logger.info("Gemini provider initialized: model=%s", self.model_name)
        except Exception as e:
            logger.error("Failed to initialize Gemini provider: %s", e)
            raise

    @staticmethod
    def _to_parts(parts: Sequence[PromptPart]) -> list[Any]:
        from google.genai import types

        converted = []
        for part in parts:
            if isinstance(part, InlineBinary):
                converted.append(types.Part.from_bytes(data=part.data, mime_type=part.mime_type))
            elif isinstance(part, TextPart):
                converted.append(types.Part.from_text(text=part.text))
            else:
                raise TypeError(f"Unsupported prompt part: {type(part).__name__}")
        return converted

    def generate(
        self,
        parts: Sequence[PromptPart],
        *,
        response_schema: dict[str, Any],
        system_instruction: str,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> LLMResult:
        from google.genai import types

        temp = temperature if temperature is not None else self.temperature
        tokens = max_tokens if max_tokens is not None else self.max_tokens

        # Scam content routinely discusses fraud, extortion and phishing;
        # the safety filters would otherwise block the analysis itself.
        safety_settings = [
            types.SafetySetting(category=category, threshold=types.HarmBlockThreshold.BLOCK_NONE)
            for category in (
                types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
                types.HarmCategory.HARM_CATEGORY_HARASSMENT,
                types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
                types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
            )
        ]

        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=temp,
            max_output_tokens=tokens,
            response_mime_type="application/json",
            response_schema=response_schema,
            safety_settings=safety_settings,
        )
        contents = [types.Content(role="user", parts=self._to_parts(parts))]

        start = time.monotonic()
        try:
            response = self._client.models.generate_content(
                model=self.model_name,
                contents=contents,
                config=config,
            )
        except Exception as e:
            logger.error("Gemini API error: %s", e)
            raise

        latency_ms = (time.monotonic() - start) * 1000

        usage = getattr(response, "usage_metadata", None)
        input_tokens = (getattr(usage, "prompt_token_count", 0) or 0) if usage else 0
        output_tokens = (getattr(usage, "candidates_token_count", 0) or 0) if usage else 0

        candidates = getattr(response, "candidates", None)
        if candidates:
            finish_reason = getattr(candidates[0], "finish_reason", None)
            if finish_reason and str(finish_reason) not in _STOP_REASONS:
                logger.warning(
                    "Gemini response finish_reason=%s (model=%s). Safety ratings: %s",
                    finish_reason,
                    self.model_name,
                    getattr(candidates[0], "safety_ratings", "N/A"),
                )
        else:
            logger.error(
                "Gemini returned no candidates (model=%s). Prompt feedback: %s",
                self.model_name,
                getattr(response, "prompt_feedback", None),
            )

        content_text = (response.text or "") if candidates else ""

        logger.info(
            "Gemini analysis complete: model=%s input_tokens=%d output_tokens=%d latency_ms=%.0f",
            self.model_name,
            input_tokens,
            output_tokens,
            latency_ms,
        )

        return LLMResult(
            content=content_text,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            latency_ms=latency_ms,
            model=self.model_name,
            raw_response={"text": content_text},
        )

    def check_connectivity(self) -> bool:
        """Verify that Gemini is reachable with a minimal request."""
        try:
            from google.genai import types

            response = self._client.models.generate_content(
                model=self.model_name,
                contents="Say hello in one word.",
                config=types.GenerateContentConfig(max_output_tokens=10),
            )
            return bool(response.candidates)
        except Exception as e:
            logger.warning("Gemini connectivity check failed: %s", e)
            return False

    def close(self) -> None:
        """Close the underlying HTTP client."""
        close = getattr(self._client, "close", None)
        if callable(close):
            close()
