"""Gemini provider calling the generateContent REST endpoint."""

from typing import Any

import httpx
from loguru import logger

from lectureqa.exceptions import ExternalServiceError
from lectureqa.services.providers.base import AnswerProvider, ProviderKind


class GeminiProvider(AnswerProvider):
    """Single-shot generation against the Gemini API."""

    kind = ProviderKind.GEMINI
    display_name = "Gemini"
    api_key_env = "GEMINI_API_KEY"

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def generate(self, prompt: str, course_name: str) -> str:
        """Send the prompt as one user turn and return the first candidate text."""
        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

        async with httpx.AsyncClient(
            timeout=self.timeout_seconds,
            transport=self._transport,
        ) as client:
            response = await client.post(
                f"{self.base_url}/models/{self.model}:generateContent",
                headers={"x-goog-api-key": self.api_key},
                json=payload,
            )

        if response.is_error:
            raise ExternalServiceError(
                service=self.display_name,
                message=f"HTTP {response.status_code}: {response.text}",
                details={"status_code": response.status_code},
            )

        data = response.json()
        logger.debug("Gemini raw response", provider="gemini", response=data)

        text = self._extract_text(data)
        if not text:
            logger.error(
                "Gemini returned no answer text", provider="gemini", response=data
            )
            raise ExternalServiceError(
                service=self.display_name,
                message="empty response from provider",
            )
        return text

    @staticmethod
    def _extract_text(data: Any) -> str | None:
        """Pull candidates[0].content.parts[0].text out of a response body."""
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None
        return text if isinstance(text, str) else None
