"""Unit tests for QuizGenerator."""

from unittest.mock import AsyncMock

import pytest

from core.exceptions import QuizGenerationError
from domain.services.quiz_service import NO_RESPONSE_MESSAGE, QuizGenerator, QuizStatus


@pytest.fixture
def chat_client() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def generator(chat_client: AsyncMock) -> QuizGenerator:
    return QuizGenerator(chat_client, model="test-model", default_prompt="Three questions please")


class TestGenerate:
    async def test_starts_idle(self, generator: QuizGenerator):
        assert generator.status == QuizStatus.IDLE
        assert generator.result == ""

    async def test_returns_first_choice_content(
        self, generator: QuizGenerator, chat_client: AsyncMock
    ):
        chat_client.chat.return_value = {
            "choices": [{"message": {"content": "1. How do you feel?"}}]
        }

        result = await generator.generate()

        assert result == "1. How do you feel?"
        assert generator.status == QuizStatus.DONE
        chat_client.chat.assert_called_once_with("Three questions please", "test-model")

    async def test_explicit_prompt_replaces_default(
        self, generator: QuizGenerator, chat_client: AsyncMock
    ):
        chat_client.chat.return_value = {"choices": [{"message": {"content": "ok"}}]}

        await generator.generate("Five questions")

        chat_client.chat.assert_called_once_with("Five questions", "test-model")
        assert generator.prompt == "Five questions"

    async def test_no_choices(self, generator: QuizGenerator, chat_client: AsyncMock):
        chat_client.chat.return_value = {"choices": []}

        result = await generator.generate()

        assert result == NO_RESPONSE_MESSAGE
        assert generator.status == QuizStatus.DONE

    async def test_client_error_is_reported_in_result(
        self, generator: QuizGenerator, chat_client: AsyncMock
    ):
        chat_client.chat.side_effect = QuizGenerationError("OpenRouter returned HTTP 401")

        result = await generator.generate()

        assert result == "Error: OpenRouter returned HTTP 401"
        assert generator.status == QuizStatus.ERROR

    async def test_unexpected_error_does_not_leave_loading(
        self, generator: QuizGenerator, chat_client: AsyncMock
    ):
        chat_client.chat.side_effect = ValueError("bad json")

        result = await generator.generate()

        assert result == "Error: bad json"
        assert generator.status == QuizStatus.ERROR

    @pytest.mark.parametrize(
        "payload",
        [
            {"choices": [{"message": None}]},
            {"choices": ["not-a-choice"]},
            [{"message": {"content": "x"}}],
        ],
    )
    async def test_malformed_payload_ends_in_error(
        self, generator: QuizGenerator, chat_client: AsyncMock, payload
    ):
        chat_client.chat.return_value = payload

        result = await generator.generate()

        assert result == "Error: Malformed response from model"
        assert generator.status == QuizStatus.ERROR

    async def test_null_content_is_empty_result(
        self, generator: QuizGenerator, chat_client: AsyncMock
    ):
        chat_client.chat.return_value = {"choices": [{"message": {"content": None}}]}

        result = await generator.generate()

        assert result == ""
        assert generator.status == QuizStatus.DONE
