"""Text-generation backends for SEO recommendations."""

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from .config import Settings
from .errors import GenerationError


logger = logging.getLogger(__name__)


class RecommendationGenerator(ABC):
    """Turns a prompt into raw recommendation text."""

    provider: str
    model: str

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Return the model's text. Raises GenerationError on failure."""
        pass


class HTTPGenerator(RecommendationGenerator):
    """Shared request/response handling for REST-backed providers."""

    def __init__(
        self,
        api_key: str,
        model: str,
        timeout: float = 60.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.transport = transport

    @abstractmethod
    def build_request(self, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        """Return (url, headers, json body)."""
        pass

    @abstractmethod
    def extract_text(self, data: dict[str, Any]) -> str:
        pass

    def generate(self, prompt: str) -> str:
        url, headers, body = self.build_request(prompt)
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                resp = client.post(url, headers=headers, json=body)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as e:
            raise GenerationError(f"{self.provider} returned HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise GenerationError(f"{self.provider} request failed: {e}") from e
        except ValueError as e:
            raise GenerationError(f"{self.provider} returned invalid JSON") from e

        try:
            text = self.extract_text(data)
        except (KeyError, IndexError, TypeError) as e:
            raise GenerationError(f"Malformed {self.provider} response: {e!r}") from e

        if not isinstance(text, str):
            raise GenerationError(f"Malformed {self.provider} response: no text content")
        logger.debug("%s/%s returned %d chars", self.provider, self.model, len(text))
        return text


class OpenAIGenerator(HTTPGenerator):
    """OpenAI Chat Completions."""

    provider = "openai"
    base_url = "https://api.openai.com/v1"

    def build_request(self, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        return (
            f"{self.base_url}/chat/completions",
            {
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            {
                "model": self.model,
                "messages": [{"role": "user", "content": prompt}],
            },
        )

    def extract_text(self, data: dict[str, Any]) -> str:
        return data["choices"][0]["message"]["content"]


class GeminiGenerator(HTTPGenerator):
    """Google Gemini generateContent."""

    provider = "gemini"
    base_url = "https://generativelanguage.googleapis.com/v1beta"

    def build_request(self, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        return (
            f"{self.base_url}/models/{self.model}:generateContent",
            {
                "x-goog-api-key": self.api_key,
                "Content-Type": "application/json",
            },
            {"contents": [{"parts": [{"text": prompt}]}]},
        )

    def extract_text(self, data: dict[str, Any]) -> str:
        parts = data["candidates"][0]["content"]["parts"]
        return "".join(part.get("text", "") for part in parts)


class UnconfiguredGenerator(RecommendationGenerator):
    """Stand-in used when no API key is available."""

    provider = "none"
    model = "none"

    def generate(self, prompt: str) -> str:
        raise GenerationError("No AI provider configured (set OPENAI_API_KEY or GEMINI_API_KEY)")


def build_generator(settings: Settings, transport: httpx.BaseTransport | None = None) -> RecommendationGenerator:
    """Pick the generator once, based on which credentials are available.

    An explicit ``ai_provider`` wins when its key is set; otherwise OpenAI is
    preferred over Gemini.
    """
    openai = None
    gemini = None
    if settings.openai_api_key:
        openai = OpenAIGenerator(
            settings.openai_api_key, settings.openai_model, settings.ai_timeout, transport
        )
    if settings.gemini_api_key:
        gemini = GeminiGenerator(
            settings.gemini_api_key, settings.gemini_model, settings.ai_timeout, transport
        )

    if settings.ai_provider == "gemini" and gemini:
        return gemini
    if settings.ai_provider == "openai" and openai:
        return openai
    if settings.ai_provider and settings.ai_provider not in ("openai", "gemini"):
        logger.warning("Unknown AI_PROVIDER %r, falling back to available keys", settings.ai_provider)

    generator = openai or gemini
    if generator is None:
        logger.info("No AI provider configured; recommendations disabled")
        return UnconfiguredGenerator()
    return generator
