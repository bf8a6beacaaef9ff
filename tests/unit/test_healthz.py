"""
Name: Health Check Endpoint Unit Tests

Responsibilities:
  - Test /healthz basic mode
  - Test /healthz?full=true mode
  - Test Google API check helper

Constraints:
  - Tests must not make real API calls
"""

from unittest.mock import Mock, patch

import pytest
from fastapi.testclient import TestClient

from studio.main import _check_google_api, app

pytestmark = pytest.mark.unit


def test_basic_healthz():
    res = TestClient(app).get("/healthz")

    assert res.status_code == 200
    body = res.json()
    assert body["ok"] is True
    assert body["llm"] == "fake"
    assert body["request_id"]
    assert "google" not in body


def test_full_healthz_skips_google_with_fake_llm():
    res = TestClient(app).get("/healthz", params={"full": "true"})

    assert res.json()["google"] == "skipped"


class TestCheckGoogleApi:
    def test_disabled_without_api_key(self):
        assert _check_google_api("") == "disabled"

    @patch("studio.container.get_llm_service")
    def test_available_when_ping_succeeds(self, mock_get_service):
        mock_get_service.return_value = Mock(ping=Mock(return_value=True))

        assert _check_google_api("test-key") == "available"

    @patch("studio.container.get_llm_service")
    def test_unavailable_on_error(self, mock_get_service):
        mock_get_service.return_value = Mock(ping=Mock(side_effect=RuntimeError("down")))

        assert _check_google_api("test-key") == "unavailable"
