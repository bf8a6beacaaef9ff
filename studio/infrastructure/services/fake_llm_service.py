"""
Name: Fake LLM Service (Deterministic)

Responsibilities:
  - Provide deterministic text and structured output for testing/CI
  - Fill any pydantic schema from a digest of the request
  - Avoid external dependencies (no API calls)
"""

from __future__ import annotations

import hashlib
import typing

from pydantic import BaseModel

from ...domain.services import GenerationRequest, ModelT
from ...logger import logger


def _request_text(request: GenerationRequest) -> str:
    if isinstance(request, str):
        return request
    return "\n".join(
        f"{message.role}:{message.text}:{len(message.images)}" for message in request
    )


def _digest(request: GenerationRequest) -> str:
    return hashlib.sha256(_request_text(request).encode("utf-8")).hexdigest()[:16]


def _fill(schema: type[BaseModel], digest: str) -> dict:
    payload: dict = {}
    for name, field in schema.model_fields.items():
        payload[name] = _fake_value(name, field.annotation, digest)
    return payload


def _fake_value(name: str, annotation, digest: str):
    origin = typing.get_origin(annotation)
    if origin in (list, typing.List):
        (item_type,) = typing.get_args(annotation) or (str,)
        return [_fake_value(f"{name}_1", item_type, digest)]
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return _fill(annotation, digest)
    if annotation in (int, float):
        return int(digest[:2], 16) % 101
    return f"Simulated {name} ({digest})"


class FakeLLMService:
    """R: Deterministic LLMService for tests/CI."""

    MODEL_ID = "fake-llm-v1"

    def __init__(self) -> None:
        logger.info("FakeLLMService initialized")

    @property
    def model_id(self) -> str:
        return self.MODEL_ID

    def ping(self) -> bool:
        return True

    def generate_text(
        self, request: GenerationRequest, *, max_output_tokens: int | None = None
    ) -> str:
        return f"Simulated response ({_digest(request)})"

    def generate_structured(
        self,
        request: GenerationRequest,
        schema: type[ModelT],
        *,
        max_output_tokens: int | None = None,
    ) -> ModelT:
        return schema.model_validate(_fill(schema, _digest(request)))
