"""Domain models for ScamFinder requests, prompts and results."""

from scamfinder.models.content import (
    ClassifiedContent,
    ContentCategory,
    InlineBinary,
    PromptPart,
    PromptPayload,
    TextPart,
)
from scamfinder.models.request import AnalysisRequest, FilePayload, TextPayload
from scamfinder.models.results import ImageAnalysisDetails, ScanResult, UrlRisk, UrlRiskLevel, Verdict

__all__ = [
    "AnalysisRequest",
    "ClassifiedContent",
    "ContentCategory",
    "FilePayload",
    "ImageAnalysisDetails",
    "InlineBinary",
    "PromptPart",
    "PromptPayload",
    "ScanResult",
    "TextPart",
    "TextPayload",
    "UrlRisk",
    "UrlRiskLevel",
    "Verdict",
]
