"""DeepSeek provider via the OpenAI-compatible chat API."""

from loguru import logger
from openai import AsyncOpenAI

from lectureqa.exceptions import ExternalServiceError
from lectureqa.services.prompt import build_system_prompt
from lectureqa.services.providers.base import AnswerProvider, ProviderKind


class DeepSeekProvider(AnswerProvider):
    """Chat completion against DeepSeek's reasoning model."""

    kind = ProviderKind.DEEPSEEK
    display_name = "DeepSeek"
    api_key_env = "DEEPSEEK_API_KEY"

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout_seconds: float,
        temperature: float,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self.model = model
        self.temperature = temperature
        self.client = client or AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout_seconds,
            max_retries=0,
        )

    async def generate(self, prompt: str, course_name: str) -> str:
        """Ask the reasoning model with a persona system message."""
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": build_system_prompt(course_name)},
                {"role": "user", "content": prompt},
            ],
            temperature=self.temperature,
        )
        raw = response.model_dump()
        logger.debug("DeepSeek raw response", provider="deepseek", response=raw)

        content = response.choices[0].message.content if response.choices else None
        if not content:
            logger.error(
                "DeepSeek returned no answer text", provider="deepseek", response=raw
            )
            raise ExternalServiceError(
                service=self.display_name,
                message="empty response from provider",
            )
        return content
