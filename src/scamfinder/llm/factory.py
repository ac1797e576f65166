"""Factory for creating analysis provider instances from ScamFinder settings."""

from __future__ import annotations

import logging

from scamfinder.exceptions import CredentialError
from scamfinder.llm.base import AnalysisProvider
from scamfinder.settings.config import Settings

logger = logging.getLogger(__name__)


def create_analysis_provider(provider: str | None = None, settings: Settings | None = None) -> AnalysisProvider:
    """Create an analysis provider from settings or an explicit provider name.

    The returned provider is wrapped with ``RetryingAnalysisProvider``; with
    the default ``llm.max_retries = 0`` the wrapper passes calls straight
    through.

    Args:
        provider: Override provider name. If None, reads from
            ``settings.llm.provider``.
        settings: Settings to build from; defaults to ``get_settings()``.

    Returns:
        A configured ``AnalysisProvider`` instance (with retry wrapper).

    Raises:
        CredentialError: If no API key is configured. Raised before any
            client is created or any network call is made.
        ValueError: If the provider name is not recognized.
    """
    if settings is None:
        from scamfinder.settings import get_settings

        settings = get_settings()
    provider_name = (provider or settings.llm.provider).lower().strip()

    base: AnalysisProvider

    if provider_name == "gemini":
        if not settings.llm.api_key:
            raise CredentialError()

        from scamfinder.llm.gemini_provider import GeminiProvider

        base = GeminiProvider(
            api_key=settings.llm.api_key,
            model=settings.llm.model,
            temperature=settings.llm.temperature,
            max_tokens=settings.llm.max_tokens,
        )

    else:
        raise ValueError(f"Unknown analysis provider: {provider_name!r}. Supported: gemini")

    logger.info("Created analysis provider: provider=%s model=%s", provider_name, settings.llm.model)

    from scamfinder.llm.retry import RetryingAnalysisProvider

    return RetryingAnalysisProvider(
        base,
        max_retries=settings.llm.max_retries,
        base_delay=settings.llm.retry_base_delay,
    )
