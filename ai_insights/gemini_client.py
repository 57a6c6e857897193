"""Minimal async client for the Gemini ``generateContent`` endpoint.

One request per prompt: no retry, no backoff. Failures are raised as
:class:`RemoteCallError` by :meth:`GeminiClient.generate_text`;
:meth:`GeminiClient.generate` turns them into an ``"Error: ..."`` string so
callers can show it in place of the generated text.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from dashboard_engine.errors import RemoteCallError

from .settings import GeminiSettings

logger = logging.getLogger(__name__)

UNEXPECTED_FORMAT = "Unexpected response format from the API."


def build_payload(prompt: str) -> Dict[str, Any]:
    """Request body for a single-turn user prompt."""
    return {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}


def extract_text(body: Any) -> str:
    """Return ``candidates[0].content.parts[0].text`` from a response body."""
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise RemoteCallError(UNEXPECTED_FORMAT) from e
    if not isinstance(text, str):
        raise RemoteCallError(UNEXPECTED_FORMAT)
    return text


class GeminiClient:
    """Sends prompts to Gemini and returns the generated text."""

    def __init__(
        self,
        settings: Optional[GeminiSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client.

        Args:
            settings: connection settings, read from the environment when omitted
            http_client: shared ``httpx.AsyncClient``; one is created (and owned) when omitted
        """
        self.settings = settings or GeminiSettings.from_env()
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self.settings.timeout)

        if not self.settings.api_key:
            logger.warning("GEMINI_API_KEY is not set; requests will most likely be rejected")

    async def __aenter__(self) -> "GeminiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def generate_text(self, prompt: str) -> str:
        """Send *prompt* and return the generated text.

        Raises:
            RemoteCallError: on transport failure, non-success status or an
                unexpected response body.
        """
        try:
            response = await self._http.post(
                self.settings.endpoint,
                params={"key": self.settings.api_key},
                json=build_payload(prompt),
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RemoteCallError(str(e) or type(e).__name__) from e

        if not response.is_success:
            raise RemoteCallError(f"API request failed with status {response.status_code}")

        try:
            body = response.json()
        except ValueError as e:
            raise RemoteCallError(UNEXPECTED_FORMAT) from e

        return extract_text(body)

    async def generate(self, prompt: str) -> str:
        """Like :meth:`generate_text`, but failures come back as ``"Error: <reason>"``."""
        try:
            return await self.generate_text(prompt)
        except RemoteCallError as e:
            logger.error(f"Gemini call failed: {e}")
            return f"Error: {e}"
