"""Tests for API request logger."""

from unittest.mock import patch

import pytest

from wl_trip_planner.adapters.api_request_logger import (
    build_request_url,
    log_api_request,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given WL_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("WL_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    def test_when_env_set_to_true_then_returns_true(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given WL_LOG_REQUESTS=True (capitalized), when checking, then returns True."""
        monkeypatch.setenv("WL_LOG_REQUESTS", "True")

        assert should_log_requests() is True

    def test_when_env_set_to_other_value_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given WL_LOG_REQUESTS=1, when checking, then returns False."""
        monkeypatch.setenv("WL_LOG_REQUESTS", "1")

        assert should_log_requests() is False


class TestBuildRequestUrl:
    """Tests for build_request_url function."""

    def test_when_no_params_then_url_is_unchanged(self) -> None:
        """Given no params, when building, then the URL is returned as is."""
        assert build_request_url("http://example.com/trip", None) == "http://example.com/trip"

    def test_when_params_given_then_they_keep_their_order(self) -> None:
        """Given params, when building, then they are appended in insertion order."""
        url = build_request_url(
            "http://example.com/trip", {"type_origin": "stopID", "name_origin": 60201198}
        )

        assert url == "http://example.com/trip?type_origin=stopID&name_origin=60201198"

    def test_when_url_has_query_then_params_are_appended(self) -> None:
        """Given a URL with a query, when building, then params are joined with '&'."""
        url = build_request_url("http://example.com/trip?language=de", {"itdTime": "0830"})

        assert url == "http://example.com/trip?language=de&itdTime=0830"


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("wl_trip_planner.adapters.api_request_logger.should_log_requests")
    @patch("wl_trip_planner.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        mock_should_log.return_value = False

        log_api_request("GET", "http://example.com/trip")

        mock_logger.info.assert_not_called()

    @patch("wl_trip_planner.adapters.api_request_logger.should_log_requests")
    @patch("wl_trip_planner.adapters.api_request_logger.logger")
    def test_when_logging_enabled_with_params_then_logs_full_url(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging enabled with params, when calling, then logs URL with params."""
        mock_should_log.return_value = True

        log_api_request("GET", "http://example.com/trip", params={"itdDate": "20240315"})

        mock_logger.info.assert_called_once()
        call_args = mock_logger.info.call_args[0][0]
        assert "GET http://example.com/trip?itdDate=20240315" in call_args

    @patch("wl_trip_planner.adapters.api_request_logger.should_log_requests")
    @patch("wl_trip_planner.adapters.api_request_logger.logger")
    def test_when_logging_enabled_with_headers_then_logs_headers(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging enabled with headers, when calling, then logs headers."""
        mock_should_log.return_value = True

        log_api_request("GET", "http://example.com/trip", headers={"Accept": "text/xml"})

        call_args = mock_logger.info.call_args[0][0]
        assert "Headers:" in call_args
        assert "text/xml" in call_args

    @patch("wl_trip_planner.adapters.api_request_logger.should_log_requests")
    @patch("wl_trip_planner.adapters.api_request_logger.logger")
    def test_when_logging_with_authorization_header_then_redacts_it(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given Authorization header, when logging, then redacts the value."""
        mock_should_log.return_value = True

        log_api_request(
            "GET", "http://example.com/trip", headers={"Authorization": "Bearer secret-token"}
        )

        call_args = mock_logger.info.call_args[0][0]
        assert "Authorization" in call_args
        assert "***REDACTED***" in call_args
        assert "secret-token" not in call_args
