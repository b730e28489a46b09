"""Tests for the Gemini and DeepSeek providers and their factory."""

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from loguru import logger

from lectureqa.config import Settings
from lectureqa.exceptions import ConfigurationError, ExternalServiceError
from lectureqa.services.providers import (
    DeepSeekProvider,
    GeminiProvider,
    ProviderFactory,
    ProviderKind,
)


@pytest.fixture
def log_records() -> list[dict]:
    """Collect loguru records emitted at DEBUG and above."""
    records: list[dict] = []
    handler_id = logger.add(
        lambda message: records.append(message.record), level="DEBUG"
    )
    yield records
    logger.remove(handler_id)


def _gemini(handler) -> GeminiProvider:
    return GeminiProvider(
        api_key="test-key",
        model="gemini-1.5-flash",
        base_url="https://gemini.test/v1beta/",
        timeout_seconds=5.0,
        transport=httpx.MockTransport(handler),
    )


def _candidate(text: str) -> dict:
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


def _mock_completion(content: str | None) -> MagicMock:
    """Build a mock ChatCompletion response."""
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _deepseek(create: AsyncMock) -> DeepSeekProvider:
    client = MagicMock()
    client.chat.completions.create = create
    return DeepSeekProvider(
        api_key="test-key",
        model="deepseek-reasoner",
        base_url="https://deepseek.test",
        timeout_seconds=5.0,
        temperature=0.3,
        client=client,
    )


class TestGeminiProvider:
    """Tests for GeminiProvider.generate."""

    async def test_extracts_first_candidate_text(self) -> None:
        """The first candidate's first part text should be returned."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=_candidate("A derivative measures..."))

        answer = await _gemini(handler).generate("PROMPT", "Calculus I")

        assert answer == "A derivative measures..."
        request = seen[0]
        assert request.url.path == "/v1beta/models/gemini-1.5-flash:generateContent"
        assert request.headers["x-goog-api-key"] == "test-key"
        assert json.loads(request.content) == {
            "contents": [{"role": "user", "parts": [{"text": "PROMPT"}]}]
        }

    @pytest.mark.parametrize(
        "body",
        [
            {"candidates": []},
            {},
            {"candidates": [{"content": {"parts": []}}]},
            {"candidates": [{"finishReason": "SAFETY"}]},
            _candidate(""),
        ],
    )
    async def test_no_text_is_an_error(self, body: dict) -> None:
        """Responses without extractable text should raise."""
        provider = _gemini(lambda request: httpx.Response(200, json=body))

        with pytest.raises(ExternalServiceError) as exc_info:
            await provider.generate("PROMPT", "Physics")

        assert exc_info.value.message == "Gemini APIエラー: empty response from provider"

    async def test_http_error_is_attributed(self) -> None:
        """Non-2xx responses should raise with the status code."""
        provider = _gemini(
            lambda request: httpx.Response(403, json={"error": {"message": "bad key"}})
        )

        with pytest.raises(ExternalServiceError) as exc_info:
            await provider.generate("PROMPT", "Physics")

        assert exc_info.value.details["status_code"] == 403
        assert exc_info.value.message.startswith("Gemini APIエラー: HTTP 403")

    async def test_raw_response_logged_at_debug(self, log_records: list[dict]) -> None:
        """The raw response body should be logged for diagnostics."""
        body = _candidate("ok")
        provider = _gemini(lambda request: httpx.Response(200, json=body))

        await provider.generate("PROMPT", "Physics")

        raw = [r for r in log_records if r["message"] == "Gemini raw response"]
        assert raw[0]["level"].name == "DEBUG"
        assert raw[0]["extra"]["response"] == body


class TestDeepSeekProvider:
    """Tests for DeepSeekProvider.generate."""

    async def test_returns_first_choice_content(self) -> None:
        """The first choice's message content should be returned."""
        create = AsyncMock(return_value=_mock_completion("Recursion is..."))

        answer = await _deepseek(create).generate("PROMPT", "CS101")

        assert answer == "Recursion is..."

    async def test_sends_system_and_user_messages(self) -> None:
        """A persona system message and the prompt should be sent."""
        create = AsyncMock(return_value=_mock_completion("ok"))

        await _deepseek(create).generate("PROMPT", "CS101")

        kwargs = create.call_args.kwargs
        assert kwargs["model"] == "deepseek-reasoner"
        messages = kwargs["messages"]
        assert messages[0]["role"] == "system"
        assert "CS101" in messages[0]["content"]
        assert messages[1] == {"role": "user", "content": "PROMPT"}

    @pytest.mark.parametrize("content", [None, ""])
    async def test_empty_content_is_an_error(self, content: str | None) -> None:
        """Missing message content should raise."""
        create = AsyncMock(return_value=_mock_completion(content))

        with pytest.raises(ExternalServiceError) as exc_info:
            await _deepseek(create).generate("PROMPT", "CS101")

        assert exc_info.value.details["service"] == "DeepSeek"

    async def test_no_choices_is_an_error(self) -> None:
        """An empty choices list should raise."""
        response = MagicMock()
        response.choices = []
        create = AsyncMock(return_value=response)

        with pytest.raises(ExternalServiceError):
            await _deepseek(create).generate("PROMPT", "CS101")

    async def test_raw_response_logged_at_debug(self, log_records: list[dict]) -> None:
        """The raw completion should be logged for diagnostics."""
        completion = _mock_completion("ok")
        completion.model_dump.return_value = {"id": "cmpl-1", "choices": []}
        create = AsyncMock(return_value=completion)

        await _deepseek(create).generate("PROMPT", "CS101")

        raw = [r for r in log_records if r["message"] == "DeepSeek raw response"]
        assert raw[0]["level"].name == "DEBUG"
        assert raw[0]["extra"]["response"] == {"id": "cmpl-1", "choices": []}


class TestProviderFactory:
    """Tests for ProviderFactory.create."""

    def _settings(self, **values) -> Settings:
        return Settings(_env_file=None, **values)

    def test_missing_gemini_key(self) -> None:
        """A missing Gemini key should raise ConfigurationError."""
        factory = ProviderFactory(self._settings(gemini_api_key=""))

        with pytest.raises(ConfigurationError) as exc_info:
            factory.create(ProviderKind.GEMINI)

        assert exc_info.value.message == "GEMINI_API_KEYが設定されていません"

    def test_missing_deepseek_key(self) -> None:
        """A missing DeepSeek key should raise ConfigurationError."""
        factory = ProviderFactory(self._settings(deepseek_api_key=""))

        with pytest.raises(ConfigurationError) as exc_info:
            factory.create(ProviderKind.DEEPSEEK)

        assert exc_info.value.details["setting"] == "DEEPSEEK_API_KEY"

    def test_builds_gemini_from_settings(self) -> None:
        """The Gemini provider should take model and timeout from settings."""
        factory = ProviderFactory(
            self._settings(
                gemini_api_key="g-key",
                gemini_model="gemini-test",
                provider_client_timeout_seconds=7.0,
            )
        )

        provider = factory.create(ProviderKind.GEMINI)

        assert isinstance(provider, GeminiProvider)
        assert provider.model == "gemini-test"
        assert provider.timeout_seconds == 7.0

    def test_builds_deepseek_from_settings(self) -> None:
        """The DeepSeek provider should use the reasoning model by default."""
        factory = ProviderFactory(self._settings(deepseek_api_key="d-key"))

        provider = factory.create(ProviderKind.DEEPSEEK)

        assert isinstance(provider, DeepSeekProvider)
        assert provider.model == "deepseek-reasoner"

    def test_client_timeout_below_handler_deadline(self) -> None:
        """Default provider client timeout should be shorter than the deadline."""
        settings = self._settings()

        assert settings.provider_client_timeout_seconds < settings.answer_timeout_seconds
