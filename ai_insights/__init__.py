"""Generative-API helpers: Gemini client, prompts and the summary pipeline."""

__all__ = [
    "AnalysisPipeline",
    "GeminiClient",
    "GeminiSettings",
]

from .analysis_pipeline import AnalysisPipeline
from .gemini_client import GeminiClient
from .settings import GeminiSettings
