"""
Name: Request Context Middleware

Responsibilities:
  - Assign every tweet/tutor call a correlation id (X-Request-Id)
  - Accept a caller's id only when it is a short token, else mint a UUID
  - Log one "request completed" line per call with its latency

Collaborators:
  - context.py: bind_request_context / clear_context
  - logger.py: JSON log lines enriched with the bound context
  - main.py: /healthz reports request.state.request_id

Constraints:
  - Context is cleared after every response, including failures
  - Gemini calls can take seconds, so latency is logged in ms
"""

import re
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .context import bind_request_context, clear_context
from .logger import logger

REQUEST_ID_HEADER = "X-Request-Id"
MAX_REQUEST_ID_LENGTH = 128
_REQUEST_ID_PATTERN = re.compile(r"[\w-]+", re.ASCII)


def resolve_request_id(candidate: str | None) -> str:
    """
    R: Reuse the caller's request id if it is safe to log and echo.

    Ids longer than MAX_REQUEST_ID_LENGTH or containing anything other than
    ASCII letters, digits, "_" or "-" are replaced with a fresh UUID4.
    """
    if (
        candidate
        and len(candidate) <= MAX_REQUEST_ID_LENGTH
        and _REQUEST_ID_PATTERN.fullmatch(candidate)
    ):
        return candidate
    return str(uuid.uuid4())


class RequestContextMiddleware(BaseHTTPMiddleware):
    """R: Binds request context for the studio endpoints and logs latency."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        bind_request_context(request_id, request.method, request.url.path)
        request.state.request_id = request_id

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception(
                "request failed",
                extra={"latency_ms": _elapsed_ms(started), "error": str(exc)},
            )
            raise
        else:
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "request completed",
                extra={
                    "status_code": response.status_code,
                    "latency_ms": _elapsed_ms(started),
                },
            )
            return response
        finally:
            clear_context()


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
