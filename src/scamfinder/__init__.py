"""ScamFinder: fraud-risk analysis of text, images, documents and emails via a hosted Gemini model."""

from __future__ import annotations

try:
    from importlib.metadata import version

    __version__ = version("scamfinder")
except Exception:
    __version__ = "0.0.0"
