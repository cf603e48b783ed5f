"""
Unit tests for logging setup and formatters.
"""

import json
import logging
import sys

import pytest

from pharmalink.core.shared.logger import (
    ColoredFormatter,
    CorrelationIdFilter,
    JSONFormatter,
    build_formatter,
    configure_logging,
    correlation_id_var,
)


def make_record(msg: str = "request %s accepted", *args, level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="pharmalink.requests",
        level=level,
        pathname=__file__,
        lineno=42,
        msg=msg,
        args=args or ("req-1",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
class TestJSONFormatter:
    def test_renders_one_json_object(self):
        line = JSONFormatter().format(make_record())
        data = json.loads(line)

        assert data["message"] == "request req-1 accepted"
        assert data["level"] == "INFO"
        assert data["service"] == "pharmalink"
        assert data["logger"] == "pharmalink.requests"
        assert data["line"] == 42
        assert "environment" not in data
        assert "correlation_id" not in data

    def test_includes_environment_and_correlation_id(self):
        line = JSONFormatter(environment="production").format(make_record(correlation_id="abc-123"))
        data = json.loads(line)

        assert data["environment"] == "production"
        assert data["correlation_id"] == "abc-123"

    def test_includes_exception_text(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record(level=logging.ERROR)
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exception"]


@pytest.mark.unit
class TestCorrelationIdFilter:
    def test_stamps_current_correlation_id(self):
        record = make_record()
        token = correlation_id_var.set("req-abc")
        try:
            assert CorrelationIdFilter().filter(record) is True
        finally:
            correlation_id_var.reset(token)

        assert record.correlation_id == "req-abc"

    def test_keeps_explicit_correlation_id(self):
        record = make_record(correlation_id="explicit")
        token = correlation_id_var.set("req-abc")
        try:
            CorrelationIdFilter().filter(record)
        finally:
            correlation_id_var.reset(token)

        assert record.correlation_id == "explicit"

    def test_outside_a_request_leaves_none(self):
        record = make_record()
        CorrelationIdFilter().filter(record)
        assert record.correlation_id is None


@pytest.mark.unit
class TestColoredFormatter:
    def test_colors_level_without_touching_record(self):
        record = make_record(level=logging.WARNING)
        line = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert line.startswith("\033[33mWARNING\033[0m")
        assert record.levelname == "WARNING"


@pytest.mark.unit
class TestConfigureLogging:
    @pytest.mark.parametrize(
        "format_type, expected",
        [("json", JSONFormatter), ("colored", ColoredFormatter), ("plain", logging.Formatter)],
    )
    def test_build_formatter(self, format_type, expected):
        assert type(build_formatter(format_type)) is expected

    def test_installs_single_stdout_handler(self, restore_root_logger):
        configure_logging(level="debug", format_type="json", environment="test")
        configure_logging(level="WARNING", format_type="json", environment="test")

        root = restore_root_logger
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
        formatter = root.handlers[0].formatter
        assert isinstance(formatter, JSONFormatter)
        assert formatter.environment == "test"

    def test_routes_uvicorn_loggers_to_root(self, restore_root_logger):
        access = logging.getLogger("uvicorn.access")
        access.addHandler(logging.NullHandler())

        configure_logging(format_type="plain")

        assert access.handlers == []
        assert access.propagate is True
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
