"""Analysis provider abstraction for ScamFinder.

Currently backed by ``gemini`` (Google Gen AI, API-key auth) through a
unified interface.
"""

from scamfinder.llm.base import AnalysisProvider, LLMResult
from scamfinder.llm.factory import create_analysis_provider

__all__ = ["AnalysisProvider", "LLMResult", "create_analysis_provider"]
