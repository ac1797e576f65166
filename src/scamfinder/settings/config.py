"""Configuration loader for ScamFinder using Pydantic settings.

Config precedence (highest wins):
  1. CLI flags (where applicable)
  2. Environment variables (SCAMFINDER_* with __ for nesting)
  3. settings.local.toml
  4. settings.<env>.toml
  5. settings.default.toml
"""

from __future__ import annotations

import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------

_THIS_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = Path(os.getenv("SCAMFINDER_PROJECT_ROOT", _THIS_DIR.parents[2]))
CONFIG_DIR = PROJECT_ROOT / "config"

ENV_VAR_NAME = "SCAMFINDER_ENV"
DEFAULT_ENV = "local"

# Checked in order when SCAMFINDER_LLM__API_KEY is not set.
API_KEY_FALLBACK_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY")

MiB = 1024 * 1024


def _resolve_env() -> str:
    return (os.getenv(ENV_VAR_NAME) or DEFAULT_ENV).strip()


def _load_toml(path: Path) -> dict[str, Any]:
    if path.is_file():
        with open(path, "rb") as f:
            return tomllib.load(f)
    return {}


# ---------------------------------------------------------------------------
# Section models
# ---------------------------------------------------------------------------


class LLMSettings(BaseSettings):
    """Analysis provider configuration."""

    model_config = SettingsConfigDict(env_prefix="SCAMFINDER_LLM__")

    provider: str = "gemini"
    model: str = "gemini-2.5-flash"
    api_key: str = ""
    temperature: float = 0.2
    max_tokens: int = 8192
    max_retries: int = 0
    retry_base_delay: float = 1.0


class LimitsSettings(BaseSettings):
    """Hard input gates enforced before any request is dispatched."""

    model_config = SettingsConfigDict(env_prefix="SCAMFINDER_LIMITS__")

    max_file_bytes: int = 10 * MiB
    max_text_chars: int = 10_000


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="SCAMFINDER_API__")

    host: str = "0.0.0.0"
    port: int = 8200
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------


class Settings(BaseSettings):
    """Root ScamFinder settings with nested sections."""

    model_config = SettingsConfigDict(
        env_prefix="SCAMFINDER_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    env: str = Field(default_factory=_resolve_env)
    project_root: Path = Field(default=PROJECT_ROOT)
    debug: bool = False
    log_level: str = "INFO"

    llm: LLMSettings = Field(default_factory=LLMSettings)
    limits: LimitsSettings = Field(default_factory=LimitsSettings)
    api: APISettings = Field(default_factory=APISettings)

    @model_validator(mode="before")
    @classmethod
    def _merge_toml_files(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Layer TOML config files before env var overrides."""
        defaults = _load_toml(CONFIG_DIR / "settings.default.toml")
        env_name = (values.get("env") or os.getenv(ENV_VAR_NAME) or DEFAULT_ENV).strip()
        env_overrides = _load_toml(CONFIG_DIR / f"settings.{env_name}.toml")
        local_overrides = _load_toml(CONFIG_DIR / "settings.local.toml")

        # Merge: defaults < env-specific < local < explicit values
        merged: dict[str, Any] = {}
        for layer in (defaults, env_overrides, local_overrides, values):
            for key, val in layer.items():
                if isinstance(val, dict) and isinstance(merged.get(key), dict):
                    merged[key] = {**merged[key], **val}
                else:
                    merged[key] = val
        return merged

    @model_validator(mode="after")
    def _resolve_api_key(self) -> "Settings":
        """Fall back to the conventional Gemini key variables."""
        if not self.llm.api_key:
            for name in API_KEY_FALLBACK_VARS:
                value = os.getenv(name, "").strip()
                if value:
                    self.llm.api_key = value
                    break
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton settings instance (cached)."""
    return Settings()
