"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Provide reusable test fixtures
  - Mock the text-generation port (no Google API calls)
  - Configure test environment (FAKE_LLM=1, no .env file)

Collaborators:
  - pytest: Test framework
  - unittest.mock: Mocking library
  - studio.domain: Domain entities and protocols

Notes:
  - Env vars are set BEFORE importing studio modules; routes.py reads
    Settings at import time
"""

import os
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("FAKE_LLM", "1")
os.environ.setdefault("LOG_JSON", "1")

from studio import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from studio.application.tutor_prompts import TutorPrompts  # noqa: E402
from studio.domain.notes import ImageAttachment  # noqa: E402
from studio.domain.services import LLMService  # noqa: E402

# R: 1x1 transparent PNG
PNG_DATA_URL = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Clear settings cache around each test."""
    app_config.get_settings.cache_clear()
    yield
    app_config.get_settings.cache_clear()


# ============================================================================
# Domain Fixtures
# ============================================================================


@pytest.fixture
def png_data_url() -> str:
    return PNG_DATA_URL


@pytest.fixture
def sample_image() -> ImageAttachment:
    return ImageAttachment(id="img-1", data=PNG_DATA_URL, name="page.png", size=68)


@pytest.fixture
def chapter_text() -> str:
    return (
        "Morse code encodes letters with two states: dots and dashes. "
        "Two elements combine into many codes; n elements give 2^n combinations."
    )


# ============================================================================
# Mock Service Fixtures
# ============================================================================


class _StaticFragments:
    """R: Fragment source with fixed bodies (no filesystem)."""

    def fragment(self, capability: str, name: str) -> str:
        return {"role": "ROLE TEXT", "rubric": "RUBRIC TEXT"}[name]


@pytest.fixture
def tutor_prompts() -> TutorPrompts:
    return TutorPrompts(_StaticFragments())


@pytest.fixture
def mock_llm_service() -> Mock:
    """
    R: Create a mock LLMService.

    Pre-configured behaviors:
    - generate_text() returns a short tweet
    - generate_structured() must be configured per test
    """
    mock = Mock(spec=LLMService)
    mock.model_id = "mock-llm"
    mock.generate_text.return_value = "Generated tweet."
    return mock
