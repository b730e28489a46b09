"""Answer provider abstraction layer.

Supports Gemini and DeepSeek behind one interface.
"""

from lectureqa.services.providers.base import AnswerProvider, ProviderKind
from lectureqa.services.providers.deepseek import DeepSeekProvider
from lectureqa.services.providers.factory import ProviderFactory, get_provider_factory
from lectureqa.services.providers.gemini import GeminiProvider

__all__ = [
    "AnswerProvider",
    "DeepSeekProvider",
    "GeminiProvider",
    "ProviderFactory",
    "ProviderKind",
    "get_provider_factory",
]
