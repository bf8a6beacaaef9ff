"""
Name: Google Gemini LLM Service Implementation (Adapter)

Responsibilities:
  - Implement domain.services.LLMService with the google-genai SDK
  - Translate prompts / chat transcripts (system, user, assistant, images)
    into Gemini contents and config
  - Request JSON output for structured calls and validate it with pydantic
  - Retry transient provider errors with exponential backoff + jitter

Collaborators:
  - google.genai.Client: external SDK (one shared instance, owned by container)
  - retry.create_retry_decorator: resilience policy
  - domain.entities.LLMMessage / domain.notes.ImageAttachment

Constraints:
  - Provider failures surface as LLMError; nothing is swallowed
  - No post-processing of generated text (tweet truncation lives in use cases)
"""

from __future__ import annotations

import os
from google import genai
from google.genai import types
from pydantic import ValidationError

from ...domain.entities import LLMMessage
from ...domain.services import GenerationRequest, ModelT
from ...exceptions import LLMError
from ...logger import logger
from .retry import create_retry_decorator

# R: Gemini names the assistant role "model"
_ROLE_MAP = {"user": "user", "assistant": "model"}


def _image_part(image) -> types.Part:
    try:
        mime_type, payload = image.decode()
    except ValueError as exc:
        raise LLMError(f"Invalid image attachment '{image.id}'") from exc
    return types.Part.from_bytes(data=payload, mime_type=mime_type)


def _message_parts(message: LLMMessage) -> list[types.Part]:
    parts: list[types.Part] = []
    if message.text:
        parts.append(types.Part.from_text(text=message.text))
    parts.extend(_image_part(image) for image in message.images)
    return parts


def build_contents(
    request: GenerationRequest,
) -> tuple[str | list[types.Content], str | None]:
    """
    R: Convert a generation request into (contents, system_instruction).

    A bare string is passed through. System messages are joined into the
    system instruction; every other message becomes a Content turn.
    """
    if isinstance(request, str):
        return request, None

    system_texts: list[str] = []
    contents: list[types.Content] = []
    for message in request:
        if message.role == "system":
            system_texts.append(message.text)
            continue
        contents.append(
            types.Content(role=_ROLE_MAP[message.role], parts=_message_parts(message))
        )

    system_instruction = "\n\n".join(system_texts) if system_texts else None
    return contents, system_instruction


def _count_images(request: GenerationRequest) -> int:
    if isinstance(request, str):
        return 0
    return sum(len(message.images) for message in request)


class GoogleLLMService:
    """
    R: Google Gemini implementation of LLMService.

    The SDK client is injectable so tests never touch the network.
    """

    DEFAULT_MODEL_ID = "gemini-2.5-flash"

    def __init__(
        self,
        api_key: str | None = None,
        *,
        client: genai.Client | None = None,
        model_id: str | None = None,
        retry_decorator=None,
    ) -> None:
        """
        R: Initialize the service (normally via container.get_llm_service).

        Args:
            api_key: Google API key (defaults to GOOGLE_API_KEY env var)
            client: Prebuilt genai client (tests)
            model_id: Model override (default: gemini-2.5-flash)
            retry_decorator: tenacity decorator override (tests)

        Raises:
            LLMError: If no API key and no client were provided
        """
        resolved_key = (api_key or os.getenv("GOOGLE_API_KEY") or "").strip()
        if not resolved_key and client is None:
            logger.error("GoogleLLMService: GOOGLE_API_KEY not configured")
            raise LLMError("GOOGLE_API_KEY not configured")

        self._client = client or genai.Client(api_key=resolved_key)
        self._model_id = (model_id or self.DEFAULT_MODEL_ID).strip()

        decorator = retry_decorator or create_retry_decorator()
        self._generate_content = decorator(self._client.models.generate_content)

        logger.info("GoogleLLMService initialized", extra={"model_id": self._model_id})

    @property
    def model_id(self) -> str:
        return self._model_id

    def ping(self) -> bool:
        """R: Cheap connectivity probe (model metadata lookup)."""
        return self._client.models.get(model=self._model_id) is not None

    def _call(
        self,
        request: GenerationRequest,
        *,
        max_output_tokens: int | None,
        schema: type[ModelT] | None = None,
    ):
        if isinstance(request, str):
            if not request.strip():
                raise LLMError("Prompt must not be empty")
        elif not request:
            raise LLMError("Messages must not be empty")

        contents, system_instruction = build_contents(request)

        config_kwargs: dict = {}
        if system_instruction:
            config_kwargs["system_instruction"] = system_instruction
        if max_output_tokens:
            config_kwargs["max_output_tokens"] = max_output_tokens
        if schema is not None:
            config_kwargs["response_mime_type"] = "application/json"
            config_kwargs["response_schema"] = schema

        config = types.GenerateContentConfig(**config_kwargs) if config_kwargs else None

        try:
            return self._generate_content(
                model=self._model_id, contents=contents, config=config
            )
        except LLMError:
            raise
        except Exception as exc:
            logger.error(
                "GoogleLLMService: Generation failed",
                exc_info=True,
                extra={
                    "model_id": self._model_id,
                    "structured": schema is not None,
                    "error_type": type(exc).__name__,
                },
            )
            raise LLMError("Failed to generate response", original_error=exc) from exc

    def generate_text(
        self, request: GenerationRequest, *, max_output_tokens: int | None = None
    ) -> str:
        response = self._call(request, max_output_tokens=max_output_tokens)
        text = (getattr(response, "text", "") or "").strip()

        logger.info(
            "GoogleLLMService: Text generated",
            extra={
                "model_id": self._model_id,
                "image_count": _count_images(request),
                "text_chars": len(text),
            },
        )
        return text

    def generate_structured(
        self,
        request: GenerationRequest,
        schema: type[ModelT],
        *,
        max_output_tokens: int | None = None,
    ) -> ModelT:
        response = self._call(request, max_output_tokens=max_output_tokens, schema=schema)

        parsed = getattr(response, "parsed", None)
        if isinstance(parsed, schema):
            result = parsed
        else:
            raw = (getattr(response, "text", "") or "").strip()
            try:
                result = schema.model_validate_json(raw)
            except ValidationError as exc:
                logger.error(
                    "GoogleLLMService: Structured output did not match schema",
                    extra={
                        "model_id": self._model_id,
                        "schema": schema.__name__,
                        "raw_chars": len(raw),
                    },
                )
                raise LLMError(
                    f"Model returned invalid {schema.__name__} payload",
                    original_error=exc,
                ) from exc

        logger.info(
            "GoogleLLMService: Structured output generated",
            extra={
                "model_id": self._model_id,
                "schema": schema.__name__,
                "image_count": _count_images(request),
            },
        )
        return result
