import asyncio
import json

import httpx

from ai_insights.gemini_client import GeminiClient, build_payload, extract_text
from ai_insights.settings import GeminiSettings
from dashboard_engine.errors import RemoteCallError

import pytest


def _ok_body(text: str) -> dict:
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


def _client(handler) -> GeminiClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GeminiClient(GeminiSettings(api_key="test-key"), http_client=http)


def test_generate_posts_prompt_and_returns_text() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        return httpx.Response(200, json=_ok_body("All good"))

    assert asyncio.run(_client(handler).generate("hello")) == "All good"

    request = seen["request"]
    assert request.method == "POST"
    assert request.url.path == "/v1beta/models/gemini-2.0-flash:generateContent"
    assert request.url.params["key"] == "test-key"
    assert json.loads(request.content) == build_payload("hello")


def test_non_success_status_becomes_error_text() -> None:
    client = _client(lambda request: httpx.Response(500, json={"error": "nope"}))

    assert asyncio.run(client.generate("hello")) == "Error: API request failed with status 500"


def test_unexpected_body_becomes_format_error() -> None:
    client = _client(lambda request: httpx.Response(200, json={"candidates": []}))

    assert asyncio.run(client.generate("hello")) == "Error: Unexpected response format from the API."


def test_non_json_body_becomes_format_error() -> None:
    client = _client(lambda request: httpx.Response(200, text="<html>"))

    assert asyncio.run(client.generate("hello")) == "Error: Unexpected response format from the API."


def test_transport_failure_becomes_error_text() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    assert asyncio.run(_client(handler).generate("hello")) == "Error: connection refused"


def test_generate_text_raises_remote_call_error() -> None:
    client = _client(lambda request: httpx.Response(403))

    with pytest.raises(RemoteCallError, match="status 403"):
        asyncio.run(client.generate_text("hello"))


def test_extract_text_requires_full_path() -> None:
    assert extract_text(_ok_body("x")) == "x"
    for body in ({}, {"candidates": [{}]}, {"candidates": [{"content": {"parts": []}}]}, None):
        with pytest.raises(RemoteCallError):
            extract_text(body)


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "abc")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-test")
    monkeypatch.setenv("GEMINI_API_BASE", "http://localhost:9000/v1/")
    monkeypatch.setenv("GEMINI_TIMEOUT", "2.5")

    settings = GeminiSettings.from_env()

    assert settings.api_key == "abc"
    assert settings.timeout == 2.5
    assert settings.endpoint == "http://localhost:9000/v1/models/gemini-test:generateContent"


def test_invalid_url_becomes_error_text() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.InvalidURL("Invalid URL 'http://[bad'")

    assert asyncio.run(_client(handler).generate("hello")) == "Error: Invalid URL 'http://[bad'"
