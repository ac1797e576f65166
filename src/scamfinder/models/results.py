"""Result models for a scan.

``ScanResult`` mirrors the JSON contract the analysis model is asked to
produce (see ``scamfinder.schema``). Instances are immutable; numeric fields
are kept exactly as returned, without clamping.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class Verdict(str, Enum):
    """Top-level categorical judgment."""

    SAFE = "SAFE"
    SUSPICIOUS = "SUSPICIOUS"
    SCAM = "SCAM"
    UNCERTAIN = "UNCERTAIN"


class UrlRiskLevel(str, Enum):
    """Per-URL risk rating."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    SAFE = "Safe"


class UrlRisk(BaseModel):
    """Assessment of a single URL found in the content."""

    model_config = ConfigDict(frozen=True)

    url: str
    risk: UrlRiskLevel
    issues: tuple[str, ...] = ()


class ImageAnalysisDetails(BaseModel):
    """Free-text findings for the four image-forensics heuristics."""

    model_config = ConfigDict(frozen=True)

    skin_smoothness: str = ""
    background_warping: str = ""
    reflection_symmetry: str = ""
    edge_consistency: str = ""


class ScanResult(BaseModel):
    """Structured fraud-risk verdict for one scan."""

    model_config = ConfigDict(frozen=True)

    verdict: Verdict
    scam_score: int
    red_flags: tuple[str, ...]
    urls: tuple[UrlRisk, ...]
    summary: str
    ai_image_probability: float | None = None
    image_analysis_details: ImageAnalysisDetails | None = None
    extracted_text_preview: str | None = None

    @property
    def risk_band(self) -> str:
        """Presentation band: ``high`` above 70, ``medium`` above 40, else ``low``."""
        if self.scam_score > 70:
            return "high"
        if self.scam_score > 40:
            return "medium"
        return "low"

    @property
    def is_likely_scam(self) -> bool:
        return self.scam_score > 70

    @property
    def is_likely_safe(self) -> bool:
        return self.scam_score < 20

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict using the wire field names."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)
