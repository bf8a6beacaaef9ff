"""
Name: Custom Exceptions

Responsibilities:
  - Define the studio's application-specific exceptions
  - Attach a unique error_id to every failure for log correlation

Collaborators:
  - exception_handlers.py: maps these errors to problem+json responses
  - infrastructure.services: raise LLMError on provider failures
  - infrastructure.prompts: raises PromptTemplateError

Notes:
  - error_id is a UUID echoed in the response "errors" list
  - Use these exceptions instead of generic Exception
"""

from uuid import uuid4


class StudioError(Exception):
    """Base exception for the writing studio."""

    error_code: str = "STUDIO_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class LLMError(StudioError):
    """LLM generation error (Gemini API, quota, malformed structured output)."""

    error_code: str = "LLM_ERROR"


class PromptTemplateError(StudioError):
    """Packaged prompt fragment missing or malformed."""

    error_code: str = "PROMPT_TEMPLATE_ERROR"
