"""
Name: FastAPI Exception Handlers

Responsibilities:
  - Convert application exceptions to HTTP responses
  - Structured error responses (RFC 7807 style)
  - Centralized logging of errors with correlation IDs

Collaborators:
  - main.py: Registers these handlers
  - exceptions.py: StudioError, LLMError
  - error_responses.py: AppHTTPException + problem+json rendering

Constraints:
  - HTTP status codes: 503 for provider errors, 500 for generic errors
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .error_responses import (
    AppHTTPException,
    ErrorCode,
    app_exception_handler,
    generic_exception_handler,
    request_validation_handler,
)
from .exceptions import LLMError, StudioError
from .logger import logger


async def llm_error_handler(request: Request, exc: LLMError) -> JSONResponse:
    """Handle text generation failures."""
    logger.error(
        "LLM error", extra={"error_id": exc.error_id, "error_message": exc.message}
    )
    app_exc = AppHTTPException(
        status_code=503,
        code=ErrorCode.LLM_ERROR,
        detail=exc.message,
        errors=[{"error_id": exc.error_id}],
    )
    return await app_exception_handler(request, app_exc)


async def studio_error_handler(request: Request, exc: StudioError) -> JSONResponse:
    """Handle generic application errors."""
    logger.error(
        "Studio error",
        extra={
            "error_id": exc.error_id,
            "error_code": exc.error_code,
            "error_message": exc.message,
        },
    )
    app_exc = AppHTTPException(
        status_code=500,
        code=ErrorCode.INTERNAL_ERROR,
        detail=exc.message,
        errors=[{"error_id": exc.error_id}],
    )
    return await app_exception_handler(request, app_exc)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log and hide unexpected failures."""
    logger.error("Unhandled error", exc_info=exc)
    return await generic_exception_handler(request, exc)


def register_exception_handlers(app) -> None:
    """
    Register all exception handlers on the FastAPI app.

    Usage:
        from .exception_handlers import register_exception_handlers
        register_exception_handlers(app)
    """
    app.add_exception_handler(LLMError, llm_error_handler)
    app.add_exception_handler(StudioError, studio_error_handler)
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
