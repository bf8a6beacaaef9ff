"""
Name: Retry Helper with Exponential Backoff + Jitter

Responsibilities:
  - Classify errors as transient (retry) or permanent (fail fast)
  - Provide a tenacity decorator with exponential backoff + jitter
  - Log retry attempts with request correlation

Collaborators:
  - tenacity (retry engine)
  - config.get_settings (attempts and delays)
  - logger (structured logging)

Constraints:
  - Retry ONLY transient errors (429, 5xx, timeouts, connection issues)
  - Never retry permanent errors (400, 401, 403, 404)
"""

from __future__ import annotations

from typing import Callable, TypeVar

from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from ...config import get_settings
from ...context import request_id_var
from ...logger import logger

T = TypeVar("T")


# R: HTTP status codes that indicate transient failures (retryable)
TRANSIENT_HTTP_CODES: frozenset[int] = frozenset(
    {
        408,  # Request Timeout
        429,  # Too Many Requests (rate limit)
        500,  # Internal Server Error
        502,  # Bad Gateway
        503,  # Service Unavailable
        504,  # Gateway Timeout
    }
)

# R: HTTP status codes that indicate permanent failures (do not retry)
PERMANENT_HTTP_CODES: frozenset[int] = frozenset(
    {
        400,  # Bad Request
        401,  # Unauthorized
        403,  # Forbidden
        404,  # Not Found
    }
)


def get_http_status_code(exception: BaseException) -> int | None:
    """
    R: Extract an HTTP status code from different exception shapes.

    Supports:
      - google.genai.errors.APIError (attribute `code`)
      - httpx.HTTPStatusError (exception.response.status_code)
      - SDK exceptions exposing `status_code`
    """
    code = getattr(exception, "code", None)
    # R: some SDKs put gRPC status numbers in `code`; keep only HTTP-range values
    if isinstance(code, int) and code >= 100:
        return code

    resp = getattr(exception, "response", None)
    if resp is not None:
        status_code = getattr(resp, "status_code", None)
        if isinstance(status_code, int):
            return status_code

    status_code = getattr(exception, "status_code", None)
    if isinstance(status_code, int):
        return status_code

    return None


def is_transient_error(exception: BaseException) -> bool:
    """
    R: Decide whether an error is transient (retry) or permanent (fail fast).

    Rules (in order):
      1) HTTP status code: permanent -> False, transient -> True
      2) Built-in timeout/connection exceptions -> True
      3) Class-name heuristics for SDKs without typed errors
      4) Message heuristics
      5) Default: False
    """
    status_code = get_http_status_code(exception)
    if status_code is not None:
        if status_code in PERMANENT_HTTP_CODES:
            return False
        if status_code in TRANSIENT_HTTP_CODES:
            return True

    if isinstance(exception, (TimeoutError, ConnectionError)):
        return True

    exception_name = type(exception).__name__.lower()
    transient_name_patterns = (
        "timeout",
        "connection",
        "temporary",
        "unavailable",
        "resourceexhausted",
        "deadline",
    )
    if any(p in exception_name for p in transient_name_patterns):
        return True

    message = str(exception).lower()
    transient_message_patterns = (
        "rate limit",
        "too many requests",
        "quota exceeded",
        "resource exhausted",
        "temporarily unavailable",
        "service unavailable",
        "model is overloaded",
        "connection reset",
        "timed out",
        "deadline exceeded",
    )
    return any(p in message for p in transient_message_patterns)


def _log_retry(retry_state: RetryCallState) -> None:
    """R: Log each attempt before sleeping (before_sleep hook)."""
    fn = getattr(retry_state, "fn", None)
    wait_time = retry_state.next_action.sleep if retry_state.next_action else 0

    exc = retry_state.outcome.exception() if retry_state.outcome else None

    logger.warning(
        "Retrying external call",
        extra={
            "function": getattr(fn, "__name__", "unknown"),
            "attempt": retry_state.attempt_number,
            "wait_seconds": round(float(wait_time), 2),
            "request_id": request_id_var.get() or None,
            "error": str(exc) if exc else None,
            "error_type": type(exc).__name__ if exc else None,
        },
    )


def create_retry_decorator(
    max_attempts: int | None = None,
    base_delay: float | None = None,
    max_delay: float | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    R: Build a tenacity decorator with exponential backoff + jitter.

    Explicit arguments override Settings (retry_max_attempts,
    retry_base_delay_seconds, retry_max_delay_seconds).
    """
    settings = get_settings()

    _max_attempts = settings.retry_max_attempts if max_attempts is None else max_attempts
    _base_delay = (
        settings.retry_base_delay_seconds if base_delay is None else float(base_delay)
    )
    _max_delay = settings.retry_max_delay_seconds if max_delay is None else float(max_delay)

    if _max_attempts <= 0:
        raise ValueError("max_attempts must be > 0")
    if _base_delay < 0:
        raise ValueError("base_delay must be >= 0")
    if _max_delay <= 0:
        raise ValueError("max_delay must be > 0")

    return retry(
        stop=stop_after_attempt(_max_attempts),
        wait=wait_exponential_jitter(initial=_base_delay, max=_max_delay, jitter=_base_delay),
        retry=retry_if_exception(is_transient_error),
        before_sleep=_log_retry,
        reraise=True,
    )
