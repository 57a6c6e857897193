"""Gemini configuration read from the environment (and a local ``.env``)."""
from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"


class GeminiSettings(BaseModel):
    """Connection settings for the ``generateContent`` endpoint."""

    api_key: str = Field("", description="Gemini API key, sent as the ``key`` query parameter")
    model: str = Field(DEFAULT_MODEL, description="Model name, e.g. 'gemini-2.0-flash'")
    api_base: str = Field(DEFAULT_API_BASE, description="Base URL of the Generative Language API")
    timeout: Optional[float] = Field(None, gt=0, description="Request timeout in seconds, None for no timeout")

    model_config = {
        "frozen": True,
    }

    @property
    def endpoint(self) -> str:
        return f"{self.api_base.rstrip('/')}/models/{self.model}:generateContent"

    @classmethod
    def from_env(cls) -> "GeminiSettings":
        """Build settings from ``GEMINI_*`` environment variables."""
        load_dotenv()
        timeout_raw = os.getenv("GEMINI_TIMEOUT")
        return cls(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
            api_base=os.getenv("GEMINI_API_BASE") or DEFAULT_API_BASE,
            timeout=float(timeout_raw) if timeout_raw else None,
        )
