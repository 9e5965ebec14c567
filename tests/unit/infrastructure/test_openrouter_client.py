"""Unit tests for OpenRouterClient."""

import json

import httpx
import pytest

from core.exceptions import QuizGenerationError
from infrastructure.llm.openrouter_client import OpenRouterClient


def _client(handler, api_key: str = "sk-test") -> OpenRouterClient:
    return OpenRouterClient(
        api_key=api_key,
        base_url="https://openrouter.test/api/v1/",
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


class TestChat:
    async def test_posts_single_user_message(self):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"choices": [{"message": {"content": "hi"}}]})

        data = await _client(handler).chat("Generate a quiz", "test-model")

        assert data["choices"][0]["message"]["content"] == "hi"
        request = requests[0]
        assert request.url == "https://openrouter.test/api/v1/chat/completions"
        assert request.headers["authorization"] == "Bearer sk-test"
        assert json.loads(request.content) == {
            "model": "test-model",
            "messages": [{"role": "user", "content": "Generate a quiz"}],
        }

    async def test_missing_api_key(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        with pytest.raises(QuizGenerationError):
            await _client(handler, api_key="").chat("x", "m")

    async def test_http_error_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"error": "bad key"})

        with pytest.raises(QuizGenerationError) as exc_info:
            await _client(handler).chat("x", "m")

        assert "401" in exc_info.value.message

    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(QuizGenerationError):
            await _client(handler).chat("x", "m")
