"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults that match current behavior

Collaborators:
  - main.py: reads settings for CORS and startup validation
  - container.py: chooses the LLM adapter (Gemini or fake)
  - routes.py: reads settings for request validation limits
  - infrastructure.services.retry: attempts and delays

Constraints:
  - No business logic, configuration only

Notes:
  - Uses pydantic-settings for env parsing and validation
  - Singleton via lru_cache for performance
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        google_api_key: Google Gemini API key
        gemini_model_id: Gemini model used for every generation call
        fake_llm: Use the deterministic fake LLM (tests/CI)
        app_env: Application environment (development/test/production)
        log_level: Root log level for the "studio" logger
        log_json: Emit JSON logs (False = plain text)
        allowed_origins: Comma-separated CORS origins
        cors_allow_credentials: Allow cookies cross-origin (default: False)
        max_idea_chars: Maximum tweet idea length (default: 2_000)
        max_draft_chars: Maximum draft/target length (default: 5_000)
        max_chapter_chars: Maximum chapter text length (default: 200_000)
        max_notes_chars: Maximum notes/question length (default: 50_000)
        max_images: Maximum images attached to notes (default: 10)
        extended_summary_max_tokens: Output token budget for extended summaries
        retry_max_attempts: Attempts for transient provider errors
        retry_base_delay_seconds: Initial backoff delay
        retry_max_delay_seconds: Backoff ceiling
        healthcheck_google_enabled: Include Gemini in /healthz?full=true
    """

    google_api_key: str = ""
    gemini_model_id: str = "gemini-2.5-flash"

    # Testing/CI
    fake_llm: bool = False

    # Environment
    app_env: str = "development"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # CORS configuration
    allowed_origins: str = "http://localhost:3000"
    cors_allow_credentials: bool = False

    # API limits
    max_idea_chars: int = 2_000
    max_draft_chars: int = 5_000
    max_chapter_chars: int = 200_000
    max_notes_chars: int = 50_000
    max_images: int = 10

    # Generation
    extended_summary_max_tokens: int = 8192

    # Retry/Resilience
    retry_max_attempts: int = 3
    retry_base_delay_seconds: float = 1.0
    retry_max_delay_seconds: float = 30.0

    # Health Check Configuration
    healthcheck_google_enabled: bool = True

    @field_validator(
        "max_idea_chars",
        "max_draft_chars",
        "max_chapter_chars",
        "max_notes_chars",
        "extended_summary_max_tokens",
    )
    @classmethod
    def limit_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("limits must be greater than 0")
        return v

    @field_validator("max_images")
    @classmethod
    def max_images_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_images must be >= 0")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_upper(cls, v: str) -> str:
        return (v or "INFO").strip().upper()

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    @model_validator(mode="after")
    def validate_ai_requirements(self):
        if not self.google_api_key and not self.fake_llm:
            raise ValueError("GOOGLE_API_KEY is required unless FAKE_LLM=1")
        if self.fake_llm and self.is_production():
            raise ValueError("FAKE_LLM must not be enabled in production")
        return self

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If required env vars are missing or invalid
    """
    return Settings()
