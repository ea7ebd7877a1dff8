"""Tests for logging setup (google_search_mcp/core/logging.py)."""

import logging

import pytest

from google_search_mcp.core.logging import (
    PACKAGE_LOGGER,
    RequestIdFilter,
    configure_logging,
    request_id_ctx,
)


@pytest.fixture(autouse=True)
def restore_level():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level = package_logger.level
    yield
    package_logger.setLevel(level)


class TestConfigureLogging:
    def test_debug_flag_sets_level(self):
        assert configure_logging(debug=True).level == logging.DEBUG
        assert configure_logging(debug=False).level == logging.INFO

    def test_debug_env_ignored_without_flag(self, monkeypatch):
        monkeypatch.setenv("MCP_DEBUG", "true")

        assert configure_logging().level == logging.INFO

    def test_repeat_calls_add_one_filter(self):
        configure_logging()
        configure_logging(debug=True)

        for handler in logging.root.handlers:
            filters = [f for f in handler.filters if isinstance(f, RequestIdFilter)]
            assert len(filters) <= 1


class TestRequestIdFilter:
    def test_prefix_when_set(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        token = request_id_ctx.set("abc12345")
        try:
            RequestIdFilter().filter(record)
        finally:
            request_id_ctx.reset(token)

        assert record.request_id == "[abc12345] "

    def test_empty_when_unset(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

        RequestIdFilter().filter(record)

        assert record.request_id == ""
