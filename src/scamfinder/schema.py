"""Response contract for the analysis model and its decoder.

``RESPONSE_SCHEMA`` is handed to the model as its structured-output schema.
``decode`` re-validates the returned text against the same contract, since
the model's adherence to the schema is not guaranteed.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from scamfinder.exceptions import DecodeError, SchemaError
from scamfinder.models.results import ScanResult, UrlRiskLevel, Verdict

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: tuple[str, ...] = ("verdict", "scam_score", "red_flags", "urls", "summary")

RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "verdict": {
            "type": "STRING",
            "enum": [v.value for v in Verdict],
            "description": "The final verdict of the scam analysis.",
        },
        "scam_score": {
            "type": "INTEGER",
            "description": "A score from 0 to 100 indicating likelihood of a scam (100 = definitely scam).",
        },
        "red_flags": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": (
                "List of specific indicators like urgency, poor grammar, money requests, or malicious scripts."
            ),
        },
        "urls": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "url": {"type": "STRING"},
                    "risk": {"type": "STRING", "enum": [r.value for r in UrlRiskLevel]},
                    "issues": {"type": "ARRAY", "items": {"type": "STRING"}},
                },
                "required": ["url", "risk"],
            },
            "description": "Analysis of URLs found in the content.",
        },
        "summary": {
            "type": "STRING",
            "description": "A concise summary of the findings.",
        },
        "ai_image_probability": {
            "type": "NUMBER",
            "description": "If an image is analyzed, probability (0.0-1.0) it is AI generated.",
        },
        "image_analysis_details": {
            "type": "OBJECT",
            "properties": {
                "skin_smoothness": {"type": "STRING"},
                "background_warping": {"type": "STRING"},
                "reflection_symmetry": {"type": "STRING"},
                "edge_consistency": {"type": "STRING"},
            },
            "description": "Heuristic details for image analysis.",
        },
        "extracted_text_preview": {
            "type": "STRING",
            "description": "The first 200 chars of text extracted from the file/image.",
        },
    },
    "required": list(REQUIRED_FIELDS),
}


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        # Remove opening fence (```json or ```)
        text = text.split("\n", 1)[-1] if "\n" in text else text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def decode(raw_text: str) -> ScanResult:
    """Parse and validate the model's raw response text.

    Out-of-range ``scam_score`` or ``ai_image_probability`` values are kept
    as returned; only a warning is logged.

    Args:
        raw_text: The response body, expected to be a JSON object.

    Returns:
        The validated ``ScanResult``.

    Raises:
        DecodeError: If the text is not valid JSON or cannot be parsed.
        SchemaError: If the JSON is not an object, lacks required fields, or
            has fields of the wrong type.
    """
    content = _strip_code_fences(raw_text)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse analysis response as JSON: %s", content[:200])
        raise DecodeError(f"Analysis response is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    except (ValueError, RecursionError) as e:
        # Syntactically valid but unparseable here: oversized integers, deep nesting
        logger.warning("Failed to parse analysis response: %s", type(e).__name__)
        raise DecodeError(f"Analysis response could not be parsed: {e}") from e

    if not isinstance(data, dict):
        raise SchemaError(f"Analysis response must be a JSON object, got {type(data).__name__}")

    missing = [name for name in REQUIRED_FIELDS if name not in data]
    if missing:
        raise SchemaError(
            f"Analysis response is missing required fields: {', '.join(missing)}",
            missing_fields=missing,
        )

    try:
        result = ScanResult.model_validate(data)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise SchemaError(f"Analysis response does not match the result schema: {problems}") from e

    if not 0 <= result.scam_score <= 100:
        logger.warning("scam_score out of range, passing through: %s", result.scam_score)
    if result.ai_image_probability is not None and not 0.0 <= result.ai_image_probability <= 1.0:
        logger.warning("ai_image_probability out of range, passing through: %s", result.ai_image_probability)

    return result
