"""
Name: Structured Logger Configuration

Responsibilities:
  - Configure JSON-structured logging
  - Automatically include request context (request_id, path, method)
  - Redact secrets and clip oversized values (chapters, drafts, images)
  - Include stack traces for exceptions

Collaborators:
  - context.py: Request-scoped context vars
  - config.py: log_level / log_json
  - Python logging module (stdlib)

Constraints:
  - JSON format for log aggregation compatibility
  - Never log secrets (API keys, tokens)

Notes:
  - Import as: from studio.logger import logger
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any

# R: LogRecord attributes that are never copied as extra fields
_INTERNAL_LOGRECORD_KEYS = {
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "taskName", "message",
}


class _Redactor:
    """R: Redact sensitive keys and clip large strings before serialization."""

    SENSITIVE_KEYS = {
        "password",
        "secret",
        "token",
        "authorization",
        "api_key",
        "apikey",
        "google_api_key",
    }

    def __init__(self, max_str: int = 4_000):
        self._max_str = max_str

    def sanitize(self, value: Any, *, key: str | None = None) -> Any:
        if key and key.lower() in self.SENSITIVE_KEYS:
            return "***REDACTED***"

        if isinstance(value, str):
            if len(value) <= self._max_str:
                return value
            return value[: self._max_str] + "…(truncated)"

        if isinstance(value, (bytes, bytearray)):
            return f"<bytes {len(value)}B>"

        if isinstance(value, dict):
            return {str(k): self.sanitize(v, key=str(k)) for k, v in value.items()}

        if isinstance(value, (list, tuple)):
            return [self.sanitize(v, key=key) for v in value]

        return value


class JSONFormatter(logging.Formatter):
    """
    R: Format logs as JSON with automatic context enrichment.

    Includes:
      - timestamp (ISO 8601)
      - level, logger, message
      - module, function, line
      - request_id, method, path (from context)
      - exception stack trace (if present)
      - extra fields from log call
    """

    def __init__(self):
        super().__init__()
        self._redactor = _Redactor()

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # R: Request context (imported lazily to avoid circular imports)
        from .context import get_context_dict

        ctx = get_context_dict()
        if ctx:
            log_obj.update(ctx)

        for key, value in record.__dict__.items():
            if key in _INTERNAL_LOGRECORD_KEYS:
                continue
            log_obj[key] = self._redactor.sanitize(value, key=key)

        if record.exc_info:
            log_obj["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "stacktrace": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_obj, ensure_ascii=False, default=str)


def _resolve_logging_options() -> tuple[str, bool]:
    """R: Read level/format from Settings; env may be incomplete at import time."""
    from pydantic import ValidationError

    from .config import get_settings

    try:
        settings = get_settings()
    except ValidationError:
        return "INFO", True
    return settings.log_level, settings.log_json


def setup_logger(name: str = "studio") -> logging.Logger:
    """
    R: Configure and return structured logger.

    Args:
        name: Logger name (default: "studio")

    Returns:
        Configured logger with JSON formatting
    """
    log = logging.getLogger(name)

    level, use_json = _resolve_logging_options()
    log.setLevel(getattr(logging, level, logging.INFO))

    # R: Avoid duplicate handlers on reimport
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            JSONFormatter()
            if use_json
            else logging.Formatter("%(levelname)s %(message)s")
        )
        log.addHandler(handler)

    return log


# R: Global logger instance
logger = setup_logger()
