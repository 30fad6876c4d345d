"""Generative AI text client used for plan generation."""

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ..errors import (
    SERVICE_DISABLED_MARKER,
    PlanParseError,
    UpstreamConfigError,
    UpstreamTransientError,
    is_rate_limit_error,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationConfig:
    """Sampling settings sent with every request."""

    temperature: float = 0.4
    top_p: float = 0.9
    response_mime_type: str = "application/json"


@runtime_checkable
class TextGenerator(Protocol):
    """Protocol for AI text generation backends."""

    async def generate(self, prompt: str) -> str:
        """Return the generated text for a prompt."""
        ...


def translate_api_error(exc: Exception) -> Exception:
    """Map a provider error onto the fitplan error taxonomy.

    The provider message is kept so callers can still read any suggested
    retry delay from it.
    """
    message = str(exc)
    code = getattr(exc, "code", None)

    if code == 429 or is_rate_limit_error(exc):
        return UpstreamTransientError(message)
    if SERVICE_DISABLED_MARKER in message or "has not been used in project" in message:
        return UpstreamConfigError(message)
    return exc


class GeminiTextGenerator:
    """Text generator backed by the Gemini API.

    Built once at startup and shared by all requests.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = "gemini-1.5-flash",
        config: GenerationConfig | None = None,
        client: genai.Client | None = None,
    ):
        self.model = model
        self.config = config or GenerationConfig()
        self._client = client or genai.Client(api_key=api_key)

    async def generate(self, prompt: str) -> str:
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=self.config.temperature,
                    top_p=self.config.top_p,
                    response_mime_type=self.config.response_mime_type,
                ),
            )
        except genai_errors.APIError as e:
            translated = translate_api_error(e)
            if translated is e:
                raise
            raise translated from e

        text = response.text
        if not text:
            raise PlanParseError("AI provider returned an empty response")
        return text
