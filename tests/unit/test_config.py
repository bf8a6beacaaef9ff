"""
Unit tests for studio/config.py (Settings validation).

Tests:
  - Defaults are applied correctly
  - GOOGLE_API_KEY required unless FAKE_LLM=1
  - FAKE_LLM rejected in production
  - Limit validation
  - get_allowed_origins_list parsing

Note:
  - Uses monkeypatch to set environment variables
"""

import pytest
from pydantic import ValidationError

from studio.config import Settings, get_settings

pytestmark = pytest.mark.unit


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_API_KEY", "test-api-key")
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = Settings()

        assert settings.gemini_model_id == "gemini-2.5-flash"
        assert settings.max_images == 10
        assert settings.extended_summary_max_tokens == 8192
        assert settings.retry_max_attempts == 3
        assert settings.log_level == "INFO"

    def test_api_key_required_without_fake_llm(self, monkeypatch):
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        monkeypatch.setenv("FAKE_LLM", "0")

        with pytest.raises(ValidationError, match="GOOGLE_API_KEY"):
            Settings()

    def test_fake_llm_allows_missing_key(self, monkeypatch):
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        monkeypatch.setenv("FAKE_LLM", "1")

        assert Settings().fake_llm is True

    def test_fake_llm_forbidden_in_production(self, monkeypatch):
        monkeypatch.setenv("FAKE_LLM", "1")
        monkeypatch.setenv("APP_ENV", "production")

        with pytest.raises(ValidationError, match="production"):
            Settings()

    @pytest.mark.parametrize(
        "env_var", ["MAX_IDEA_CHARS", "MAX_CHAPTER_CHARS", "EXTENDED_SUMMARY_MAX_TOKENS"]
    )
    def test_limits_must_be_positive(self, monkeypatch, env_var):
        monkeypatch.setenv(env_var, "0")

        with pytest.raises(ValidationError):
            Settings()

    def test_negative_max_images_rejected(self, monkeypatch):
        monkeypatch.setenv("MAX_IMAGES", "-1")

        with pytest.raises(ValidationError):
            Settings()

    def test_log_level_is_uppercased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert Settings().log_level == "DEBUG"

    def test_allowed_origins_list(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test ,")

        assert Settings().get_allowed_origins_list() == ["http://a.test", "http://b.test"]

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
