"""ScamFinder test configuration: shared fixtures for unit tests."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

_CREDENTIAL_VARS = ("SCAMFINDER_LLM__API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY")


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Clear the settings LRU cache between tests."""
    from scamfinder.settings.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep real credentials and environment selection out of tests."""
    for name in _CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("SCAMFINDER_ENV", raising=False)


@pytest.fixture()
def api_key(monkeypatch) -> str:
    """Configure a dummy Gemini API key."""
    monkeypatch.setenv("SCAMFINDER_LLM__API_KEY", "test-key")
    return "test-key"


# ---------------------------------------------------------------------------
# Analysis responses
# ---------------------------------------------------------------------------


@pytest.fixture()
def scam_response() -> dict:
    """A well-formed analysis response for an obvious lottery scam."""
    return {
        "verdict": "SCAM",
        "scam_score": 95,
        "red_flags": ["urgency", "unrealistic prize"],
        "urls": [{"url": "http://bit.ly/xyz", "risk": "High", "issues": ["URL shortener"]}],
        "summary": "Classic advance-fee lottery scam.",
    }


@pytest.fixture()
def image_response() -> dict:
    """A well-formed analysis response for an image upload."""
    return {
        "verdict": "SUSPICIOUS",
        "scam_score": 55,
        "red_flags": ["AI-generated profile photo"],
        "urls": [],
        "summary": "Profile photo shows signs of synthesis.",
        "ai_image_probability": 0.82,
        "image_analysis_details": {
            "skin_smoothness": "Unnaturally uniform",
            "background_warping": "Bent door frame behind subject",
            "reflection_symmetry": "Mismatched catchlights",
            "edge_consistency": "Hair blends into background",
        },
        "extracted_text_preview": "",
    }


# ---------------------------------------------------------------------------
# Mock provider
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_provider(scam_response):
    """Return a ``MagicMock`` conforming to the ``AnalysisProvider`` interface.

    Default behaviour: returns the ``scam_response`` JSON.
    """
    from scamfinder.llm.base import AnalysisProvider, LLMResult

    mock = MagicMock(spec=AnalysisProvider)
    mock.check_connectivity.return_value = True
    mock.generate.return_value = LLMResult(
        content=json.dumps(scam_response),
        input_tokens=120,
        output_tokens=80,
        model="mock",
    )
    mock.close.return_value = None
    return mock


@pytest.fixture()
def scanner(mock_provider):
    """A ``Scanner`` wired to the mock provider with default settings."""
    from scamfinder.scanner import Scanner
    from scamfinder.settings.config import Settings

    return Scanner(provider=mock_provider, settings=Settings())
