"""Quiz generation over a chat-completion model."""

from enum import StrEnum
from typing import Any, Protocol

import structlog

from core.exceptions import AppException, QuizGenerationError

logger = structlog.get_logger()

NO_RESPONSE_MESSAGE = "No response from model."


class QuizStatus(StrEnum):
    """Lifecycle of a single generation request."""

    IDLE = "idle"
    LOADING = "loading"
    DONE = "done"
    ERROR = "error"


class IChatClient(Protocol):
    """Anything that can run one chat completion."""

    async def chat(self, prompt: str, model: str) -> dict[str, Any]:
        ...


class QuizGenerator:
    """Fire-and-forget prompt runner with idle/loading/done/error status."""

    def __init__(self, client: IChatClient, model: str, default_prompt: str = "") -> None:
        self._client = client
        self._model = model
        self.prompt = default_prompt
        self.status = QuizStatus.IDLE
        self.result = ""

    async def generate(self, prompt: str | None = None) -> str:
        """Run the prompt and return the model's text, or an error line."""
        if prompt is not None:
            self.prompt = prompt
        self.status = QuizStatus.LOADING
        self.result = ""
        try:
            data = await self._client.chat(self.prompt, self._model)
            content = _first_choice_content(data)
        except Exception as e:
            message = e.message if isinstance(e, AppException) else str(e)
            logger.warning("quiz_generation_failed", model=self._model, error=message)
            self.result = f"Error: {message}"
            self.status = QuizStatus.ERROR
            return self.result

        self.result = NO_RESPONSE_MESSAGE if content is None else content
        self.status = QuizStatus.DONE
        logger.info("quiz_generated", model=self._model, empty=content is None)
        return self.result


def _first_choice_content(data: Any) -> str | None:
    """Text of the first choice, or None when the model returned no choices.

    Raises:
        QuizGenerationError: the payload is not a chat completion
    """
    if not isinstance(data, dict):
        raise QuizGenerationError("Malformed response from model")
    choices = data.get("choices") or []
    if not choices:
        return None
    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    if not isinstance(message, dict):
        raise QuizGenerationError("Malformed response from model")
    content = message.get("content")
    return content if isinstance(content, str) else ""
