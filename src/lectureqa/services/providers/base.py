"""Base interface for answer providers."""

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import ClassVar


class ProviderKind(StrEnum):
    """LLM backends a question can be answered by."""

    GEMINI = "gemini"
    DEEPSEEK = "deepseek"


class AnswerProvider(ABC):
    """Abstract base class for answer providers."""

    kind: ClassVar[ProviderKind]
    display_name: ClassVar[str]
    api_key_env: ClassVar[str]

    @abstractmethod
    async def generate(self, prompt: str, course_name: str) -> str:
        """Generate an answer for a rendered prompt.

        Args:
            prompt: Fully rendered instruction prompt.
            course_name: Course used for the persona where the provider
                accepts a separate system message.

        Returns:
            Non-empty answer text.

        Raises:
            ExternalServiceError: If the provider returns no extractable text.
        """
