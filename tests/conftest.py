"""Pytest configuration and shared fixtures."""
import os
from typing import Any

import pytest

from contentgen.config import Settings
from contentgen.generation import GenerationClient
from contentgen.llm import ChatMessage, LLMProvider, LLMResponse
from contentgen.orchestrator import RequestOrchestrator


class FakeProvider(LLMProvider):
    """Provider that returns canned text or raises, without any network."""

    def __init__(self, reply: str | None = "generated text", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.requests: list[list[ChatMessage]] = []
        self.models: list[str | None] = []
        self.closed = False

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        self.requests.append(messages)
        self.models.append(model)
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.reply, model=model or "fake")

    async def close(self) -> None:
        self.closed = True


class RecordingFactory:
    """Provider factory that counts how many providers were built."""

    def __init__(self, provider: FakeProvider):
        self.provider = provider
        self.settings: list[Settings] = []

    def __call__(self, settings: Settings) -> LLMProvider:
        self.settings.append(settings)
        return self.provider

    @property
    def calls(self) -> int:
        return len(self.settings)


@pytest.fixture
def fake_provider():
    """Provider with a canned reply."""
    return FakeProvider()


@pytest.fixture
def factory(fake_provider):
    """Recording factory wrapping the fake provider."""
    return RecordingFactory(fake_provider)


@pytest.fixture
def env_with_key():
    """Environment mapping with a configured API key."""
    return {"GEMINI_API_KEY": "test-key"}


@pytest.fixture
def client(factory, env_with_key):
    """Generation client wired to the fake provider."""
    return GenerationClient(provider_factory=factory, environ=env_with_key)


@pytest.fixture
def orchestrator(client):
    """Orchestrator using the fake-backed client."""
    return RequestOrchestrator(client)


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "gemini": os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY"),
    }
