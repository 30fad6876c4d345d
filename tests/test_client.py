"""Tests for the Gemini text generator wrapper."""

import asyncio
from types import SimpleNamespace

import pytest
from google.genai import errors as genai_errors

from fitplan.agents.client import GeminiTextGenerator, GenerationConfig, translate_api_error
from fitplan.errors import PlanParseError, UpstreamConfigError, UpstreamTransientError


class FakeModels:
    def __init__(self, outcome):
        self.outcome = outcome
        self.calls: list[dict] = []

    async def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return SimpleNamespace(text=self.outcome)


def make_client(outcome):
    models = FakeModels(outcome)
    return SimpleNamespace(aio=SimpleNamespace(models=models)), models


def test_generate_returns_text_with_fixed_config():
    client, models = make_client('{"ok": true}')
    generator = GeminiTextGenerator(api_key=None, model="gemini-test", client=client)

    text = asyncio.run(generator.generate("make a plan"))

    assert text == '{"ok": true}'
    call = models.calls[0]
    assert call["model"] == "gemini-test"
    assert call["contents"] == "make a plan"
    assert call["config"].temperature == 0.4
    assert call["config"].top_p == 0.9
    assert call["config"].response_mime_type == "application/json"


def test_empty_response_rejected():
    client, _ = make_client("")
    generator = GeminiTextGenerator(api_key=None, client=client)

    with pytest.raises(PlanParseError):
        asyncio.run(generator.generate("make a plan"))


def test_rate_limit_translated():
    error = genai_errors.ClientError(
        429,
        {"error": {"code": 429, "message": "Resource exhausted. Please retry in 2s.", "status": "RESOURCE_EXHAUSTED"}},
    )
    client, _ = make_client(error)
    generator = GeminiTextGenerator(api_key=None, client=client)

    with pytest.raises(UpstreamTransientError) as exc_info:
        asyncio.run(generator.generate("make a plan"))

    assert exc_info.value.__cause__ is error


def test_default_config():
    assert GenerationConfig() == GenerationConfig(temperature=0.4, top_p=0.9, response_mime_type="application/json")


class CodedError(Exception):
    def __init__(self, code, message):
        super().__init__(message)
        self.code = code


def test_translate_service_disabled():
    error = CodedError(403, "Generative Language API has not been used in project 42 (SERVICE_DISABLED)")

    assert isinstance(translate_api_error(error), UpstreamConfigError)


def test_translate_keeps_retry_hint():
    translated = translate_api_error(CodedError(429, "Please retry in 13s"))

    assert isinstance(translated, UpstreamTransientError)
    assert "retry in 13s" in str(translated)


def test_translate_passes_other_errors_through():
    error = CodedError(400, "INVALID_ARGUMENT")

    assert translate_api_error(error) is error
