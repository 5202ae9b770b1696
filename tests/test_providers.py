"""Tests for generator selection and REST providers."""

import json

import httpx
import pytest

from seo_audit.config import Settings
from seo_audit.errors import GenerationError
from seo_audit.providers import (
    GeminiGenerator,
    OpenAIGenerator,
    UnconfiguredGenerator,
    build_generator,
)


def test_no_keys_gives_unconfigured():
    generator = build_generator(Settings())
    assert isinstance(generator, UnconfiguredGenerator)
    with pytest.raises(GenerationError):
        generator.generate("prompt")


def test_openai_preferred_when_both_keys():
    generator = build_generator(Settings(openai_api_key="sk-1", gemini_api_key="g-1"))
    assert isinstance(generator, OpenAIGenerator)
    assert generator.model == "gpt-5-mini"


def test_explicit_provider_wins():
    settings = Settings(ai_provider="gemini", openai_api_key="sk-1", gemini_api_key="g-1")
    assert isinstance(build_generator(settings), GeminiGenerator)


def test_explicit_provider_without_key_falls_back():
    settings = Settings(ai_provider="openai", gemini_api_key="g-1", gemini_model="gemini-pro")
    generator = build_generator(settings)
    assert isinstance(generator, GeminiGenerator)
    assert generator.model == "gemini-pro"


def test_settings_from_env():
    settings = Settings.from_env({
        "AI_PROVIDER": " Gemini ",
        "GOOGLE_API_KEY": "g-1",
        "OPENAI_MODEL": "gpt-4o",
    })
    assert settings.ai_provider == "gemini"
    assert settings.gemini_api_key == "g-1"
    assert settings.openai_api_key is None
    assert settings.openai_model == "gpt-4o"


def test_openai_request_and_response():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"choices": [{"message": {"content": "1. [HIGH] A → B"}}]})

    generator = OpenAIGenerator("sk-1", "gpt-4o", transport=httpx.MockTransport(handler))
    assert generator.generate("hello") == "1. [HIGH] A → B"
    assert seen["url"] == "https://api.openai.com/v1/chat/completions"
    assert seen["auth"] == "Bearer sk-1"
    assert seen["body"]["model"] == "gpt-4o"
    assert seen["body"]["messages"] == [{"role": "user", "content": "hello"}]


def test_gemini_request_and_response():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["key"] = request.headers["x-goog-api-key"]
        return httpx.Response(200, json={
            "candidates": [{"content": {"parts": [{"text": "1. [LOW] A"}, {"text": " → B"}]}}]
        })

    generator = GeminiGenerator("g-1", "gemini-2.0-flash", transport=httpx.MockTransport(handler))
    assert generator.generate("hello") == "1. [LOW] A → B"
    assert seen["url"].endswith("/models/gemini-2.0-flash:generateContent")
    assert seen["key"] == "g-1"


def test_http_error_raises_generation_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(401, json={"error": "bad key"}))
    with pytest.raises(GenerationError, match="HTTP 401"):
        OpenAIGenerator("sk-bad", "gpt-4o", transport=transport).generate("hello")


def test_network_error_raises_generation_error():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(GenerationError, match="request failed"):
        GeminiGenerator("g-1", "gemini", transport=httpx.MockTransport(handler)).generate("hello")


@pytest.mark.parametrize("body", [{}, {"choices": []}, {"choices": [{"message": {}}]}])
def test_malformed_response_raises_generation_error(body):
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=body))
    with pytest.raises(GenerationError, match="Malformed"):
        OpenAIGenerator("sk-1", "gpt-4o", transport=transport).generate("hello")


def test_null_content_raises_generation_error():
    body = {"choices": [{"message": {"content": None}}]}
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=body))
    with pytest.raises(GenerationError):
        OpenAIGenerator("sk-1", "gpt-4o", transport=transport).generate("hello")


def test_invalid_json_raises_generation_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(GenerationError, match="invalid JSON"):
        OpenAIGenerator("sk-1", "gpt-4o", transport=transport).generate("hello")
