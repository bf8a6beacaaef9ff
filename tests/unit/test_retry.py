"""
Name: Retry Helper Unit Tests

Responsibilities:
  - Test transient vs permanent error classification
  - Verify retry decorator configuration
  - Test logging of retry attempts

Collaborators:
  - studio.infrastructure.services.retry: Module under test
  - unittest.mock: Mocking external dependencies

Constraints:
  - Tests must not make real API calls
  - Must run fast (zero delays)
"""

from unittest.mock import Mock

import pytest

from studio.infrastructure.services.retry import (
    PERMANENT_HTTP_CODES,
    TRANSIENT_HTTP_CODES,
    create_retry_decorator,
    get_http_status_code,
    is_transient_error,
)

pytestmark = pytest.mark.unit


class TestGetHttpStatusCode:
    def test_extracts_code_attribute(self):
        exc = Mock()
        exc.code = 429
        assert get_http_status_code(exc) == 429

    def test_ignores_grpc_style_code(self):
        exc = Mock(spec=["code"])
        exc.code = 8
        assert get_http_status_code(exc) is None

    def test_extracts_from_response_attribute(self):
        exc = Mock()
        exc.code = None
        exc.response = Mock()
        exc.response.status_code = 503
        assert get_http_status_code(exc) == 503

    def test_returns_none_for_unknown_exception(self):
        assert get_http_status_code(ValueError("some error")) is None


class TestIsTransientError:
    @pytest.mark.parametrize("code", sorted(TRANSIENT_HTTP_CODES))
    def test_transient_http_codes(self, code):
        exc = Mock()
        exc.code = code
        assert is_transient_error(exc) is True

    @pytest.mark.parametrize("code", sorted(PERMANENT_HTTP_CODES))
    def test_permanent_http_codes(self, code):
        exc = Mock()
        exc.code = code
        assert is_transient_error(exc) is False

    def test_builtin_timeout(self):
        assert is_transient_error(TimeoutError("slow")) is True

    def test_overloaded_message(self):
        assert is_transient_error(Exception("The model is overloaded.")) is True

    def test_unknown_error_not_transient(self):
        assert is_transient_error(ValueError("Invalid argument provided")) is False


class TestCreateRetryDecorator:
    def test_retries_transient_then_succeeds(self):
        calls = Mock(side_effect=[TimeoutError("t1"), "ok"])
        wrapped = create_retry_decorator(max_attempts=3, base_delay=0, max_delay=1)(calls)

        assert wrapped() == "ok"
        assert calls.call_count == 2

    def test_permanent_error_not_retried(self):
        calls = Mock(side_effect=ValueError("bad request"))
        wrapped = create_retry_decorator(max_attempts=3, base_delay=0, max_delay=1)(calls)

        with pytest.raises(ValueError):
            wrapped()
        assert calls.call_count == 1

    def test_reraises_after_last_attempt(self):
        calls = Mock(side_effect=TimeoutError("always"))
        wrapped = create_retry_decorator(max_attempts=2, base_delay=0, max_delay=1)(calls)

        with pytest.raises(TimeoutError):
            wrapped()
        assert calls.call_count == 2

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_attempts": 0}, {"base_delay": -1}, {"max_delay": 0}],
    )
    def test_invalid_configuration(self, kwargs):
        with pytest.raises(ValueError):
            create_retry_decorator(**kwargs)
