"""
Tests for logging infrastructure.
"""

import logging
import json
import sys

import pytest

from zurestore.core.logging_config import (
    setup_logging,
    log_with_context,
    JSONFormatter,
    TextFormatter,
    RequestIdFilter,
    SensitiveDataFilter,
    _parse_size
)
from zurestore.core.operation_context import OperationContext


def _record(msg: str, level: int = logging.INFO, exc_info=None, args=()) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=exc_info
    )


class TestLoggingSetup:
    """Test suite for logging setup."""

    def test_setup_logging_defaults(self):
        """Test setting up logging with defaults."""
        setup_logging()

        root_logger = logging.getLogger()
        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 1

    def test_handlers_carry_filters(self):
        """Test every handler stamps request ids and redacts credentials."""
        setup_logging()

        filters = logging.getLogger().handlers[0].filters
        assert any(isinstance(f, RequestIdFilter) for f in filters)
        assert any(isinstance(f, SensitiveDataFilter) for f in filters)

    def test_setup_logging_with_level(self):
        """Test setting up logging with custom level."""
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_with_file(self, tmp_path):
        """Test setting up logging with file output."""
        log_file = tmp_path / "logs" / "zurestore.log"
        setup_logging(log_file=str(log_file))

        with OperationContext(client_request_id="file-req-1").activate():
            logging.getLogger(__name__).info("Test message")

        lines = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert lines[-1]["message"] == "Test message"
        assert lines[-1]["client_request_id"] == "file-req-1"

    def test_setup_logging_with_module_levels(self):
        """Test setting up logging with per-module log levels."""
        setup_logging(
            level="INFO",
            module_levels={"zurestore.models": "DEBUG", "zurestore.core": "ERROR"}
        )

        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger("zurestore.models").level == logging.DEBUG
        assert logging.getLogger("zurestore.core").level == logging.ERROR


class TestJSONFormatter:
    """Test suite for JSON formatter."""

    def test_format_basic_message(self):
        """Test formatting a basic log message."""
        data = json.loads(JSONFormatter().format(_record("Test message")))

        assert data["level"] == "INFO"
        assert data["module"] == "test"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert "client_request_id" not in data

    def test_format_inside_operation_context(self):
        """Test the client request id is included while an operation is active."""
        with OperationContext(client_request_id="request-abc").activate():
            data = json.loads(JSONFormatter().format(_record("Test message")))

        assert data["client_request_id"] == "request-abc"

    def test_placeholder_request_id_is_omitted(self):
        """Test a record stamped outside any operation has no request id field."""
        record = _record("Test message")
        RequestIdFilter().filter(record)

        assert "client_request_id" not in json.loads(JSONFormatter().format(record))

    def test_format_with_exception(self):
        """Test formatting with exception info."""
        try:
            raise ValueError("Test error")
        except ValueError:
            record = _record("Error occurred", logging.ERROR, sys.exc_info())

        data = json.loads(JSONFormatter().format(record))

        assert "ValueError" in data["exception"]
        assert "Test error" in data["exception"]


class TestTextFormatter:
    """Test suite for text formatter."""

    def test_request_id_in_text(self):
        """Test the request id appears in text output."""
        with OperationContext(client_request_id="text-req-7").activate():
            line = TextFormatter().format(_record("Read container"))

        assert "(text-req-7): Read container" in line

    def test_placeholder_without_operation(self):
        """Test a dash stands in for the request id outside an operation."""
        assert "test (-): hello" in TextFormatter().format(_record("hello"))


class TestRequestIdFilter:
    """Test suite for the request id filter."""

    def test_stamps_active_request_id(self):
        """Test the filter copies the bound request id onto the record."""
        record = _record("msg")

        with OperationContext(client_request_id="stamp-1").activate():
            assert RequestIdFilter().filter(record) is True

        assert record.client_request_id == "stamp-1"

    def test_keeps_existing_request_id(self):
        """Test an id already on the record is not overwritten."""
        record = _record("msg")
        record.client_request_id = "explicit"

        with OperationContext(client_request_id="other").activate():
            RequestIdFilter().filter(record)

        assert record.client_request_id == "explicit"


class TestSensitiveDataFilter:
    """Test suite for sensitive data filter."""

    def test_redact_shared_key_authorization(self):
        """Test redacting a SharedKey Authorization header."""
        record = _record("Authorization: SharedKey myaccount:c2lnbmF0dXJl")
        SensitiveDataFilter().filter(record)

        assert "c2lnbmF0dXJl" not in record.msg
        assert "***REDACTED***" in record.msg

    def test_redact_account_key(self):
        """Test redacting account key from connection string."""
        record = _record("DefaultEndpointsProtocol=https;AccountName=test;AccountKey=secretkey123;")
        SensitiveDataFilter().filter(record)

        assert "secretkey123" not in record.msg
        assert "AccountName=test" in record.msg

    def test_redact_sas_signature(self):
        """Test redacting SAS signature."""
        record = _record("https://a.blob.core.windows.net/c?sv=2021-08-06&sig=base64signature&se=2025-12-31")
        SensitiveDataFilter().filter(record)

        assert "base64signature" not in record.msg
        assert "se=2025-12-31" in record.msg

    def test_redact_string_arguments(self):
        """Test credentials passed as %-style arguments are redacted too."""
        record = _record("Request to %s returned %d", args=("https://a.blob.core.windows.net/c?sig=secretsig", 200))
        SensitiveDataFilter().filter(record)

        message = record.getMessage()
        assert "secretsig" not in message
        assert message.endswith("returned 200")


class TestLogWithContext:
    """Test suite for contextual logging."""

    def test_log_with_context(self, caplog):
        """Test the context is attached to the record."""
        logger = logging.getLogger("zurestore.test")

        with caplog.at_level(logging.INFO, logger="zurestore.test"):
            log_with_context(logger, logging.INFO, "Parsed response", request_id="req456")

        assert caplog.records[-1].context == {"request_id": "req456"}


class TestParseSize:
    """Test suite for size parsing."""

    def test_parse_units(self):
        """Test parsing each unit."""
        assert _parse_size("100") == 100
        assert _parse_size("100B") == 100
        assert _parse_size("10KB") == 10240
        assert _parse_size("10MB") == 10485760
        assert _parse_size("1GB") == 1073741824
        assert _parse_size("1.5KB") == 1536

    def test_parse_lowercase_and_whitespace(self):
        """Test parsing with lowercase units and whitespace."""
        assert _parse_size("5kb") == 5120
        assert _parse_size(" 10 MB ") == 10485760

    @pytest.mark.parametrize("value", ["", "ten MB", "10TB", "MB"])
    def test_parse_invalid(self, value):
        """Test unusable sizes are rejected."""
        with pytest.raises(ValueError):
            _parse_size(value)
