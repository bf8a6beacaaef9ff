"""
Name: Domain Service Interfaces

Responsibilities:
  - Define the text-generation port used by every use case
  - Keep application code independent of the Gemini SDK

Collaborators:
  - infrastructure.services: GoogleLLMService, FakeLLMService
  - application.use_cases: depend on LLMService only

Constraints:
  - Interfaces only, no implementation
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, Union

from pydantic import BaseModel

from .entities import LLMMessage

ModelT = TypeVar("ModelT", bound=BaseModel)

# R: A bare prompt string, or a chat transcript (system/user/assistant + images)
GenerationRequest = Union[str, Sequence[LLMMessage]]


class LLMService(Protocol):
    """R: Interface for text generation."""

    @property
    def model_id(self) -> str: ...

    def ping(self) -> bool:
        """Return True when the provider is reachable."""
        ...

    def generate_text(
        self, request: GenerationRequest, *, max_output_tokens: int | None = None
    ) -> str:
        """Generate free text."""
        ...

    def generate_structured(
        self,
        request: GenerationRequest,
        schema: type[ModelT],
        *,
        max_output_tokens: int | None = None,
    ) -> ModelT:
        """Generate JSON matching `schema` and return the parsed model."""
        ...
