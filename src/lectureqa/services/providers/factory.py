"""Construction of answer providers from settings."""

from fastapi import Depends

from lectureqa.config import Settings, get_settings
from lectureqa.exceptions import ConfigurationError
from lectureqa.services.providers.base import AnswerProvider, ProviderKind
from lectureqa.services.providers.deepseek import DeepSeekProvider
from lectureqa.services.providers.gemini import GeminiProvider


class ProviderFactory:
    """Build a provider per request from explicit settings."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def create(self, kind: ProviderKind) -> AnswerProvider:
        """Create the provider for ``kind``.

        Raises:
            ConfigurationError: If the provider's API key is not configured.
        """
        if kind is ProviderKind.GEMINI:
            if not self.settings.gemini_api_key:
                raise ConfigurationError(GeminiProvider.api_key_env)
            return GeminiProvider(
                api_key=self.settings.gemini_api_key,
                model=self.settings.gemini_model,
                base_url=self.settings.gemini_base_url,
                timeout_seconds=self.settings.provider_client_timeout_seconds,
            )

        if kind is ProviderKind.DEEPSEEK:
            if not self.settings.deepseek_api_key:
                raise ConfigurationError(DeepSeekProvider.api_key_env)
            return DeepSeekProvider(
                api_key=self.settings.deepseek_api_key,
                model=self.settings.deepseek_model,
                base_url=self.settings.deepseek_base_url,
                timeout_seconds=self.settings.provider_client_timeout_seconds,
                temperature=self.settings.llm_temperature,
            )

        raise ValueError(f"Unhandled provider kind: {kind}")


def get_provider_factory(settings: Settings = Depends(get_settings)) -> ProviderFactory:
    """Provide a ProviderFactory for FastAPI dependency injection."""
    return ProviderFactory(settings)
