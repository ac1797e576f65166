"""Retrying analysis provider wrapper.

Wraps any ``AnalysisProvider`` with exponential-backoff retry for transient
network / provider errors. The factory configures ``max_retries`` from
``llm.max_retries``, which defaults to 0: a failed scan is reported to the
user, who resubmits.

Usage::

    from scamfinder.llm.gemini_provider import GeminiProvider
    from scamfinder.llm.retry import RetryingAnalysisProvider

    base = GeminiProvider(api_key=...)
    resilient = RetryingAnalysisProvider(base, max_retries=2, base_delay=1.0)
    result = resilient.generate(parts, response_schema=..., system_instruction=...)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import Any

from scamfinder.llm.base import AnalysisProvider, LLMResult
from scamfinder.models.content import PromptPart

logger = logging.getLogger(__name__)

# Exceptions that are safe to retry: transient network / rate-limit issues.
_RETRYABLE_EXCEPTION_NAMES = frozenset({
    "ConnectionError",
    "TimeoutError",
    "ReadTimeout",
    "ConnectTimeout",
    "RemoteProtocolError",
    "ServerError",
    "ServiceUnavailable",
    "TooManyRequests",
    "InternalServerError",
})


def _is_retryable(exc: Exception) -> bool:
    """Return True if *exc* looks like a transient error worth retrying."""
    name = type(exc).__name__
    if name in _RETRYABLE_EXCEPTION_NAMES:
        return True
    # google-genai APIError carries ``code``; httpx errors carry a response
    status_code = (
        getattr(exc, "code", None)
        or getattr(exc, "status_code", None)
        or getattr(getattr(exc, "response", None), "status_code", None)
    )
    if isinstance(status_code, int) and status_code in (429, 500, 502, 503, 504):
        return True
    return False


class RetryingAnalysisProvider(AnalysisProvider):
    """Transparent retry wrapper around any ``AnalysisProvider``.

    Args:
        delegate: The actual provider to delegate calls to.
        max_retries: Number of retry attempts (0 = no retries, just pass through).
        base_delay: Base delay in seconds for exponential backoff.
        max_delay: Cap on the backoff delay.
    """

    def __init__(
        self,
        delegate: AnalysisProvider,
        *,
        max_retries: int = 0,
        base_delay: float = 1.0,
        max_delay: float = 30.0,
    ) -> None:
        self._delegate = delegate
        self._max_retries = max_retries
        self._base_delay = base_delay
        self._max_delay = max_delay

    def _call_with_retry(self, func, *args, **kwargs) -> LLMResult:  # type: ignore[no-untyped-def]
        """Invoke *func* with exponential-backoff retry on transient errors."""
        last_exc: Exception | None = None
        for attempt in range(1, self._max_retries + 2):  # attempt 1 = initial call
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                last_exc = exc
                if attempt > self._max_retries or not _is_retryable(exc):
                    raise
                delay = min(self._base_delay * (2 ** (attempt - 1)), self._max_delay)
                logger.warning(
                    "Analysis call failed (attempt %d/%d): %s, retrying in %.1fs",
                    attempt,
                    self._max_retries + 1,
                    type(exc).__name__,
                    delay,
                )
                time.sleep(delay)
        # Should not reach here, but satisfy the type checker
        raise last_exc  # type: ignore[misc]

    def generate(
        self,
        parts: Sequence[PromptPart],
        *,
        response_schema: dict[str, Any],
        system_instruction: str,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> LLMResult:
        """Send one analysis request with retry on transient errors."""
        return self._call_with_retry(
            self._delegate.generate,
            parts,
            response_schema=response_schema,
            system_instruction=system_instruction,
            temperature=temperature,
            max_tokens=max_tokens,
        )

    def check_connectivity(self) -> bool:
        """Delegate connectivity check (no retry, it does its own)."""
        return self._delegate.check_connectivity()

    def close(self) -> None:
        """Delegate cleanup."""
        self._delegate.close()
