"""OpenRouter chat-completions client."""

from typing import Any

import httpx
import structlog

from core.config import settings
from core.exceptions import QuizGenerationError

logger = structlog.get_logger()


class OpenRouterClient:
    """Thin async wrapper over the OpenAI-compatible OpenRouter API."""

    def __init__(
        self,
        api_key: str = settings.openrouter_api_key,
        base_url: str = settings.openrouter_base_url,
        timeout: float = settings.quiz_timeout_seconds,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def chat(self, prompt: str, model: str) -> dict[str, Any]:
        """
        Send a single user message and return the decoded completion payload.

        Raises:
            QuizGenerationError: if the API key is missing or the request fails
        """
        if not self._api_key:
            raise QuizGenerationError("OpenRouter API key is not configured")

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }
        body = {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    f"{self._base_url}/chat/completions", headers=headers, json=body
                )
                response.raise_for_status()
                data: dict[str, Any] = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "openrouter_request_failed",
                status_code=e.response.status_code,
                model=model,
            )
            raise QuizGenerationError(
                f"OpenRouter returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("openrouter_unreachable", error=str(e), model=model)
            raise QuizGenerationError(f"OpenRouter request failed: {e}") from e

        logger.debug("openrouter_completion_received", model=model)
        return data
