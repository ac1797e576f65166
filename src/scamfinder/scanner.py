"""End-to-end scan pipeline.

validate → classify → assemble → analysis provider → decode.

Each scan is independent: one request yields exactly one ``ScanResult`` or
one ``ScamFinderError``. Nothing is retried here; retry policy belongs to the
provider wrapper.
"""

from __future__ import annotations

import logging
import time

from scamfinder.classifier import classify
from scamfinder.exceptions import EmptyResponseError, ScamFinderError, TransportError, ValidationError
from scamfinder.llm.base import AnalysisProvider
from scamfinder.models.content import ClassifiedContent, ContentCategory
from scamfinder.models.request import AnalysisRequest
from scamfinder.models.results import ScanResult
from scamfinder.prompts import SYSTEM_INSTRUCTION, assemble
from scamfinder.schema import RESPONSE_SCHEMA, decode
from scamfinder.settings.config import Settings

logger = logging.getLogger(__name__)


def validate_request(request: AnalysisRequest, *, max_file_bytes: int, max_text_chars: int) -> None:
    """Reject requests that must never reach the analysis service.

    Raises:
        ValidationError: Empty request, oversize file, or oversize text.
    """
    if request.is_empty:
        raise ValidationError("Please input text or upload a file to start scanning.", field="request")
    if request.file is not None and request.file.size_bytes > max_file_bytes:
        limit_mb = max_file_bytes / (1024 * 1024)
        raise ValidationError(
            f"File size too large ({request.file.size_bytes} bytes). Please upload files under {limit_mb:g}MB.",
            field="file",
        )
    if len(request.text) > max_text_chars:
        raise ValidationError(
            f"Text is too long ({len(request.text)} characters). The limit is {max_text_chars} characters.",
            field="text",
        )


class Scanner:
    """Runs scans against an analysis provider.

    Args:
        provider: Provider to use. When None, one is created from settings on
            the first scan that passes validation.
        settings: Settings override; defaults to ``get_settings()``.
    """

    def __init__(self, provider: AnalysisProvider | None = None, settings: Settings | None = None) -> None:
        if settings is None:
            from scamfinder.settings import get_settings

            settings = get_settings()
        self.settings = settings
        self._provider = provider

    @property
    def provider(self) -> AnalysisProvider:
        if self._provider is None:
            from scamfinder.llm.factory import create_analysis_provider

            self._provider = create_analysis_provider(settings=self.settings)
        return self._provider

    def scan(self, request: AnalysisRequest) -> ScanResult:
        """Analyze one request and return its verdict.

        Raises:
            ValidationError: The request was rejected locally.
            CredentialError: No API key is configured.
            TransportError: The analysis service call failed.
            EmptyResponseError: The service returned no text.
            DecodeError: The response is not JSON.
            SchemaError: The response does not match the result contract.
        """
        validate_request(
            request,
            max_file_bytes=self.settings.limits.max_file_bytes,
            max_text_chars=self.settings.limits.max_text_chars,
        )

        if request.file is not None:
            classified = classify(request.file.file_name, request.file.declared_mime_type)
            payload: bytes | None = request.file.raw_bytes
        else:
            classified = ClassifiedContent(ContentCategory.NONE, "")
            payload = None

        prompt = assemble(classified.category, payload, request.text, mime_type=classified.mime_type)
        logger.info(
            "Scanning: category=%s mime=%s file=%s text_chars=%d",
            classified.category.value,
            classified.mime_type or "-",
            request.file.file_name if request.file else "-",
            len(request.text),
        )

        provider = self.provider
        start = time.monotonic()
        try:
            response = provider.generate(
                prompt.parts,
                response_schema=RESPONSE_SCHEMA,
                system_instruction=SYSTEM_INSTRUCTION,
                temperature=self.settings.llm.temperature,
                max_tokens=self.settings.llm.max_tokens,
            )
        except ScamFinderError:
            raise
        except Exception as e:
            logger.error("Analysis failed: %s", e)
            raise TransportError(str(e) or type(e).__name__) from e

        if not response.content or not response.content.strip():
            raise EmptyResponseError()

        result = decode(response.content)
        logger.info(
            "Scan complete: verdict=%s scam_score=%d elapsed_ms=%.0f",
            result.verdict.value,
            result.scam_score,
            (time.monotonic() - start) * 1000,
        )
        return result

    def close(self) -> None:
        if self._provider is not None:
            self._provider.close()


def scan(request: AnalysisRequest) -> ScanResult:
    """Scan *request* with a provider built from the current settings."""
    scanner = Scanner()
    try:
        return scanner.scan(request)
    finally:
        scanner.close()
