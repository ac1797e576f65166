"""ScamFinder exception hierarchy.

Every error is terminal for the current scan; callers resubmit explicitly.
"""

from __future__ import annotations


class ScamFinderError(Exception):
    """Base exception for all ScamFinder-specific errors."""


class ValidationError(ScamFinderError):
    """Raised locally when a request is rejected before dispatch.

    Attributes:
        field: The offending request field (``text``, ``file`` or ``request``).
    """

    def __init__(self, message: str, *, field: str = "request") -> None:
        self.field = field
        super().__init__(message)


class CredentialError(ScamFinderError):
    """Raised when the analysis API key is missing."""

    def __init__(self, message: str = "API key is missing. Set SCAMFINDER_LLM__API_KEY or GEMINI_API_KEY.") -> None:
        super().__init__(message)


class ScanInProgressError(ScamFinderError):
    """Raised when a session already has an outstanding scan."""

    def __init__(self) -> None:
        super().__init__("A scan is already in progress. Wait for it to finish before submitting again.")


class AnalysisFailure(ScamFinderError):
    """Base for failures returned by, or decoding, the analysis capability.

    Attributes:
        reason: Short machine-readable failure reason.
    """

    reason = "analysis_failed"


class TransportError(AnalysisFailure):
    """The analysis service call itself failed (network, auth, quota...)."""

    reason = "transport"


class EmptyResponseError(AnalysisFailure):
    """The analysis service returned no text."""

    reason = "empty_response"

    def __init__(self, message: str = "No response from the analysis service.") -> None:
        super().__init__(message)


class DecodeError(AnalysisFailure):
    """The response text is not valid JSON."""

    reason = "invalid_json"


class SchemaError(AnalysisFailure):
    """The response is JSON but does not match the result contract.

    Attributes:
        missing_fields: Required fields absent from the response.
    """

    reason = "unparseable_result"

    def __init__(self, message: str, *, missing_fields: list[str] | None = None) -> None:
        self.missing_fields = list(missing_fields or [])
        super().__init__(message)
