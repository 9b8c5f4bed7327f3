"""Unit tests for JSON log formatting and redaction."""

from __future__ import annotations

import json
import logging
import sys

from corekit.logging_config import JsonFormatter, configure_logging


def _make_record(message: str, level: int = logging.INFO, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="corekit.test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    def test_basic_fields(self):
        parsed = json.loads(JsonFormatter().format(_make_record("hello")))
        assert parsed["message"] == "hello"
        assert parsed["level"] == "INFO"
        assert parsed["logger"] == "corekit.test"
        assert "timestamp" in parsed

    def test_trace_fields_are_copied(self):
        record = _make_record(
            "[RESPONSE]",
            method="GET",
            url="https://mock.api.com/user",
            status_code=200,
            duration_ms=12.5,
        )
        parsed = json.loads(JsonFormatter().format(record))
        assert parsed["method"] == "GET"
        assert parsed["url"] == "https://mock.api.com/user"
        assert parsed["status_code"] == 200
        assert parsed["duration_ms"] == 12.5
        assert "trace_id" not in parsed

    def test_redacts_authorization_header_in_curl(self):
        message = 'curl -v \\\n\t-X GET \\\n\t-H "Authorization: Bearer abc.def" \\\n\t"https://x"'
        parsed = json.loads(JsonFormatter().format(_make_record(message)))
        assert "abc.def" not in parsed["message"]
        assert "[REDACTED]" in parsed["message"]

    def test_redacts_token_in_json_body(self):
        message = 'Data: {"token": "mock_token_string", "role": 1}'
        parsed = json.loads(JsonFormatter().format(_make_record(message)))
        assert "mock_token_string" not in parsed["message"]
        assert '"role": 1' in parsed["message"]

    def test_redacts_query_token(self):
        record = _make_record("GET", url="https://x/api?access_token=s3cr3t&id=1")
        parsed = json.loads(JsonFormatter().format(record))
        assert "s3cr3t" not in parsed["url"]

    def test_exception_is_included(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = _make_record("failed", level=logging.ERROR)
            record.exc_info = sys.exc_info()
        parsed = json.loads(JsonFormatter().format(record))
        assert "ValueError: bad" in parsed["exception"]


def test_configure_logging_installs_json_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
