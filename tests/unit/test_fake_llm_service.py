"""
Name: Fake LLM Service Unit Tests

Responsibilities:
  - Verify deterministic output
  - Verify structured output satisfies each application schema
"""

import pytest

from studio.application.schemas import Analysis, IdealSummary, Reanalysis, Thread
from studio.domain.entities import LLMMessage
from studio.infrastructure.services import FakeLLMService

pytestmark = pytest.mark.unit


def test_text_is_deterministic():
    service = FakeLLMService()
    assert service.generate_text("a") == service.generate_text("a")
    assert service.generate_text("a") != service.generate_text("b")


def test_accepts_message_requests(sample_image):
    text = FakeLLMService().generate_text(
        [LLMMessage(role="system", text="s"), LLMMessage(role="user", images=[sample_image])]
    )
    assert text.startswith("Simulated response")


@pytest.mark.parametrize("schema", [Analysis, Reanalysis, IdealSummary, Thread])
def test_structured_output_validates(schema):
    result = FakeLLMService().generate_structured("prompt", schema)
    assert isinstance(result, schema)


def test_analysis_score_in_range():
    result = FakeLLMService().generate_structured("prompt", Analysis)
    assert 0 <= result.score <= 100
    assert len(result.strengths) == 1


def test_ping_and_model_id():
    service = FakeLLMService()
    assert service.ping() is True
    assert service.model_id == "fake-llm-v1"
