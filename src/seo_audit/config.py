"""Runtime configuration."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


DEFAULT_OPENAI_MODEL = "gpt-5-mini"
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"


@dataclass(frozen=True)
class Settings:
    """Explicit configuration handed to the probe, analyzer and generator.

    Core modules never read the environment themselves; build a Settings
    with ``Settings.from_env()`` at the edge (the CLI) and pass it down.
    """
    ai_provider: Optional[str] = None  # "openai" | "gemini" | None for auto
    openai_api_key: Optional[str] = None
    openai_model: str = DEFAULT_OPENAI_MODEL
    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_GEMINI_MODEL
    http_timeout: float = 10.0
    ai_timeout: float = 60.0
    lighthouse_path: str = "lighthouse"
    lighthouse_timeout: float = 120.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ
        provider = (env.get("AI_PROVIDER") or "").strip().lower() or None
        return cls(
            ai_provider=provider,
            openai_api_key=env.get("OPENAI_API_KEY") or None,
            openai_model=env.get("OPENAI_MODEL") or DEFAULT_OPENAI_MODEL,
            gemini_api_key=env.get("GEMINI_API_KEY") or env.get("GOOGLE_API_KEY") or None,
            gemini_model=env.get("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL,
            lighthouse_path=env.get("LIGHTHOUSE_PATH") or "lighthouse",
        )
