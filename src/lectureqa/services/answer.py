"""Answer service: validate, dispatch to a provider and bound the wait."""

import asyncio
import time

from loguru import logger

from lectureqa.exceptions import (
    DomainValidationError,
    ExternalServiceError,
    LectureQAException,
    ProviderTimeoutError,
)
from lectureqa.services.prompt import build_answer_prompt
from lectureqa.services.providers import ProviderFactory, ProviderKind


class AnswerService:
    """Turn a question into an AI answer through the selected provider."""

    def __init__(self, factory: ProviderFactory, timeout_seconds: float) -> None:
        self.factory = factory
        self.timeout_seconds = timeout_seconds

    async def answer(
        self,
        question: str | None,
        model: str | None,
        course_name: str | None,
    ) -> str:
        """Return the provider's answer text for a question.

        Raises:
            DomainValidationError: A required field is missing or the model
                is not a known provider.
            ConfigurationError: The selected provider has no API key.
            ExternalServiceError: The provider failed or returned no text.
            ProviderTimeoutError: The provider did not answer in time.
        """
        required = {"question": question, "model": model, "courseName": course_name}
        missing = [
            name for name, value in required.items() if not (value or "").strip()
        ]
        if missing:
            raise DomainValidationError(
                f"必須パラメータが不足しています: {', '.join(missing)}",
                field=missing[0],
                details={"missing": missing},
            )

        try:
            kind = ProviderKind(model.strip().lower())
        except ValueError as exc:
            raise DomainValidationError(
                f"サポートされていないモデルです: {model}",
                field="model",
                details={"supported": [k.value for k in ProviderKind]},
            ) from exc

        provider = self.factory.create(kind)
        prompt = build_answer_prompt(question, course_name)

        logger.info(
            "Requesting answer",
            provider=kind.value,
            course_name=course_name,
            prompt_length=len(prompt),
        )

        start_time = time.perf_counter()
        try:
            # wait_for cancels the provider coroutine when the deadline passes
            answer = await asyncio.wait_for(
                provider.generate(prompt, course_name),
                timeout=self.timeout_seconds,
            )
        except TimeoutError as exc:
            logger.error(
                "Provider timed out",
                provider=kind.value,
                timeout_seconds=self.timeout_seconds,
            )
            raise ProviderTimeoutError(
                service=provider.display_name,
                timeout_seconds=self.timeout_seconds,
            ) from exc
        except LectureQAException:
            raise
        except Exception as exc:
            logger.error("Provider call failed", provider=kind.value, error=str(exc))
            raise ExternalServiceError(
                service=provider.display_name,
                message=str(exc) or type(exc).__name__,
            ) from exc

        if not answer:
            raise ExternalServiceError(
                service=provider.display_name,
                message="empty response from provider",
            )

        logger.info(
            "Answer generated",
            provider=kind.value,
            answer_length=len(answer),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return answer
