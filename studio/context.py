"""
Name: Request Context (ContextVars)

Responsibilities:
  - Hold the correlation id, method and path of the studio request in flight
  - Let use cases and the retry logger tag records without threading ids through

Collaborators:
  - middleware.py: binds the context when a request arrives, clears it after
  - logger.py: JSONFormatter merges get_context_dict() into every record
  - infrastructure.services.retry: tags Gemini retry warnings with request_id

Constraints:
  - Values are plain strings; "" means unset
"""

from contextvars import ContextVar

request_id_var: ContextVar[str] = ContextVar("request_id", default="")
http_method_var: ContextVar[str] = ContextVar("http_method", default="")
http_path_var: ContextVar[str] = ContextVar("http_path", default="")

_CONTEXT_FIELDS = (
    ("request_id", request_id_var),
    ("method", http_method_var),
    ("path", http_path_var),
)


def bind_request_context(request_id: str, method: str, path: str) -> None:
    """R: Bind the current request so log records can be correlated."""
    request_id_var.set(request_id)
    http_method_var.set(method)
    http_path_var.set(path)


def get_context_dict() -> dict:
    """R: Non-empty context values, keyed the way they appear in JSON logs."""
    return {key: value for key, var in _CONTEXT_FIELDS if (value := var.get())}


def clear_context() -> None:
    for _, var in _CONTEXT_FIELDS:
        var.set("")
