"""ScamFinder settings package."""

from scamfinder.settings.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
