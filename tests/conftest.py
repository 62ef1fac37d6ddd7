"""Shared fixtures for sitechat tests."""

import asyncio
import json

import httpx
import pytest

from sitechat.ai.runtime import GeminiClient
from sitechat.config import Settings


def gemini_response(text: str) -> dict:
    """Minimal successful generateContent payload."""
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": text}]},
                "finishReason": "STOP",
            }
        ]
    }


class RecordingBackend:
    """Mock Gemini endpoint that records request bodies and replays responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, httpx.Response):
            return response
        return httpx.Response(200, json=gemini_response(response))


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", api_base="https://gemini.test")


@pytest.fixture
def make_client(settings):
    def _make(backend: RecordingBackend) -> GeminiClient:
        return GeminiClient(settings, transport=httpx.MockTransport(backend))

    return _make


class FakeSession:
    """Stand-in chat session returning scripted results."""

    def __init__(self, *results):
        self.results = list(results)
        self.submitted: list[str] = []
        self.gate: asyncio.Event | None = None
        self.closed = False

    async def submit(self, text):
        self.submitted.append(text)
        if self.gate is not None:
            await self.gate.wait()
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    async def aclose(self):
        self.closed = True
