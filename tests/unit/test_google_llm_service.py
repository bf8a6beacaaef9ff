"""
Name: Google LLM Service Unit Tests

Responsibilities:
  - Verify request translation (system instruction, roles, image parts)
  - Verify JSON mode configuration for structured calls
  - Verify provider failures surface as LLMError

Constraints:
  - The genai client is always a Mock (no network)
"""

from unittest.mock import Mock

import pytest
from pydantic import BaseModel

from studio.domain.entities import LLMMessage
from studio.exceptions import LLMError
from studio.infrastructure.services.google_llm_service import (
    GoogleLLMService,
    build_contents,
)

pytestmark = pytest.mark.unit


class Verdict(BaseModel):
    score: int
    feedback: str


def _no_retry(fn):
    return fn


@pytest.fixture
def client() -> Mock:
    mock = Mock()
    mock.models.generate_content.return_value = Mock(text="  Hello there  ", parsed=None)
    return mock


@pytest.fixture
def service(client) -> GoogleLLMService:
    return GoogleLLMService(
        client=client, model_id="gemini-test", retry_decorator=_no_retry
    )


class TestInit:
    def test_requires_key_or_client(self, monkeypatch):
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)

        with pytest.raises(LLMError):
            GoogleLLMService()

    def test_model_id(self, service):
        assert service.model_id == "gemini-test"


class TestBuildContents:
    def test_plain_prompt_passes_through(self):
        assert build_contents("hi") == ("hi", None)

    def test_messages_map_roles_and_images(self, sample_image):
        contents, system = build_contents(
            [
                LLMMessage(role="system", text="SYS"),
                LLMMessage(role="user", text="Q1"),
                LLMMessage(role="assistant", text="A1"),
                LLMMessage(role="user", text="look", images=[sample_image]),
            ]
        )

        assert system == "SYS"
        assert [c.role for c in contents] == ["user", "model", "user"]
        last_parts = contents[-1].parts
        assert last_parts[0].text == "look"
        assert last_parts[1].inline_data.mime_type == "image/png"
        assert last_parts[1].inline_data.data.startswith(b"\x89PNG")

    def test_invalid_image_raises_llm_error(self):
        from studio.domain.notes import ImageAttachment

        with pytest.raises(LLMError):
            build_contents(
                [LLMMessage(role="user", text="x", images=[ImageAttachment("i", "nope")])]
            )


class TestGenerateText:
    def test_returns_stripped_text(self, service, client):
        assert service.generate_text("prompt") == "Hello there"

        kwargs = client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-test"
        assert kwargs["contents"] == "prompt"
        assert kwargs["config"] is None

    def test_system_instruction_and_token_limit(self, service, client):
        service.generate_text(
            [LLMMessage(role="system", text="SYS"), LLMMessage(role="user", text="hi")],
            max_output_tokens=128,
        )

        config = client.models.generate_content.call_args.kwargs["config"]
        assert config.system_instruction == "SYS"
        assert config.max_output_tokens == 128

    def test_empty_prompt_rejected(self, service, client):
        with pytest.raises(LLMError):
            service.generate_text("   ")
        client.models.generate_content.assert_not_called()

    def test_provider_error_wrapped(self, service, client):
        boom = RuntimeError("boom")
        client.models.generate_content.side_effect = boom

        with pytest.raises(LLMError) as exc_info:
            service.generate_text("prompt")

        assert exc_info.value.original_error is boom


class TestGenerateStructured:
    def test_requests_json_and_parses(self, service, client):
        client.models.generate_content.return_value = Mock(
            text='{"score": 80, "feedback": "good"}', parsed=None
        )

        result = service.generate_structured("grade", Verdict)

        assert result == Verdict(score=80, feedback="good")
        config = client.models.generate_content.call_args.kwargs["config"]
        assert config.response_mime_type == "application/json"
        assert config.response_schema is not None

    def test_uses_sdk_parsed_object(self, service, client):
        parsed = Verdict(score=1, feedback="x")
        client.models.generate_content.return_value = Mock(text="", parsed=parsed)

        assert service.generate_structured("grade", Verdict) is parsed

    def test_invalid_json_raises_llm_error(self, service, client):
        client.models.generate_content.return_value = Mock(text="not json", parsed=None)

        with pytest.raises(LLMError):
            service.generate_structured("grade", Verdict)


class TestRetryIntegration:
    def test_transient_error_retried(self, client):
        from studio.infrastructure.services.retry import create_retry_decorator

        client.models.generate_content.side_effect = [
            TimeoutError("slow"),
            Mock(text="ok", parsed=None),
        ]
        service = GoogleLLMService(
            client=client,
            retry_decorator=create_retry_decorator(max_attempts=2, base_delay=0, max_delay=1),
        )

        assert service.generate_text("prompt") == "ok"
        assert client.models.generate_content.call_count == 2
