"""
Runtime configuration for the Gemini-backed operations.

The API key is read from the process environment when settings are built.
A missing key is not an error here: it becomes an empty string and the remote
service rejects the first request instead.
"""

import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Environment variables checked for the API key, in order
API_KEY_ENV_VARS = ("API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY")

DEFAULT_PRO_MODEL = "gemini-3-pro-preview"
DEFAULT_FLASH_MODEL = "gemini-3-flash-preview"
DEFAULT_TTS_MODEL = "gemini-2.5-flash-preview-tts"
DEFAULT_VOICE = "Kore"


class Settings(BaseModel):
    """Models, budgets and credentials used by the solver operations."""

    api_key: str = ""
    pro_model: str = DEFAULT_PRO_MODEL
    flash_model: str = DEFAULT_FLASH_MODEL
    tts_model: str = DEFAULT_TTS_MODEL
    voice_name: str = DEFAULT_VOICE

    temperature: float = Field(default=0.1, ge=0.0, le=2.0)
    solve_thinking_budget: int = Field(default=16384, ge=0)
    chat_thinking_budget: int = Field(default=8192, ge=0)

    image_mime_type: str = "image/jpeg"
    # TTS models answer with raw 16-bit mono PCM at this rate
    audio_sample_rate: int = 24000

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. If None, loads `.env` and uses os.environ.

        Returns:
            Settings instance
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        api_key = next((environ[name] for name in API_KEY_ENV_VARS if environ.get(name)), "")
        return cls(
            api_key=api_key,
            pro_model=environ.get("PROFESSOR_PRO_MODEL") or DEFAULT_PRO_MODEL,
            flash_model=environ.get("PROFESSOR_FLASH_MODEL") or DEFAULT_FLASH_MODEL,
            tts_model=environ.get("PROFESSOR_TTS_MODEL") or DEFAULT_TTS_MODEL,
            voice_name=environ.get("PROFESSOR_VOICE") or DEFAULT_VOICE,
        )


def get_settings() -> Settings:
    """Return settings read from the current environment."""
    return Settings.from_env()
