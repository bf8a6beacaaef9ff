"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Configure middleware (CORS, request context)
  - Mount router with tweet and tutor endpoints under /v1 prefix
  - Expose health check endpoint

Collaborators:
  - FastAPI: ASGI web framework
  - CORSMiddleware: Cross-Origin Resource Sharing handler
  - RequestContextMiddleware: Request ID and logging context
  - routes.router: Business logic endpoints (tweets, tutor)

Constraints:
  - CORS configurable via ALLOWED_ORIGINS env var (comma-separated)
  - No authentication or rate limiting

Notes:
  - Middleware order matters: RequestContext → CORS → routes
  - /v1 prefix allows API versioning
  - /healthz follows Kubernetes health check convention
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import get_settings
from .exception_handlers import register_exception_handlers
from .logger import logger
from .middleware import RequestContextMiddleware
from .routes import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Validates settings."""
    # This will raise ValidationError if env vars are missing/invalid
    settings = get_settings()

    logger.info(
        "Writing Studio API starting up",
        extra={
            "app_env": settings.app_env,
            "model_id": settings.gemini_model_id,
            "fake_llm": settings.fake_llm,
            "retry_max_attempts": settings.retry_max_attempts,
        },
    )
    yield
    logger.info("Writing Studio API shutting down")


# R: Create FastAPI application instance with API metadata
app = FastAPI(
    title="Writing Studio API",
    version=__version__,
    lifespan=lifespan,
    openapi_tags=[
        {"name": "tweets", "description": "Tweet drafting with locked substrings"},
        {"name": "tutor", "description": "Chapter summary grading and Q&A"},
    ],
)

# R: Add request context middleware
app.add_middleware(RequestContextMiddleware)

# R: Configure CORS with secure defaults
_cors_settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_settings.get_allowed_origins_list(),
    allow_credentials=_cors_settings.cors_allow_credentials,  # R: Secure default: False
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Request-Id"],
)

# R: Register API routes under /v1 prefix for versioning
app.include_router(router, prefix="/v1")

# R: Register exception handlers for structured error responses
register_exception_handlers(app)


@app.get("/healthz")
def healthz(request: Request, full: bool = False):
    """
    R: Liveness check, optionally probing Gemini.

    Args:
        full: If True, also check Google API connectivity (slower)
              Respects HEALTHCHECK_GOOGLE_ENABLED setting

    Returns:
        ok: True if all checked systems operational
        llm: "fake" or the Gemini model id in use
        google: "available", "unavailable", "disabled", or "skipped" (only with full=true)
        request_id: Correlation ID for this request
    """
    settings = get_settings()
    result = {
        "ok": True,
        "llm": "fake" if settings.fake_llm else settings.gemini_model_id,
        "request_id": getattr(request.state, "request_id", None),
    }

    if full:
        if settings.healthcheck_google_enabled and not settings.fake_llm:
            google_status = _check_google_api(settings.google_api_key)
            result["google"] = google_status
            if google_status == "unavailable":
                result["ok"] = False
        else:
            result["google"] = "skipped"

    return result


def _check_google_api(api_key: str) -> str:
    """
    R: Check Google API connectivity by fetching the model metadata.

    Returns:
        "available": API is responding
        "unavailable": API is not responding or erroring
        "disabled": No API key configured
    """
    if not api_key:
        return "disabled"

    try:
        from .container import get_llm_service

        return "available" if get_llm_service().ping() else "unavailable"
    except Exception as e:
        logger.warning("Health check: Google API unavailable", extra={"error": str(e)})
        return "unavailable"
