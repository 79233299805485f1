"""
Tests for structured logging.
"""

import json
import logging
import sys

from contacts_api.shared.correlation import correlation_id_var
from contacts_api.shared.logging import JSONFormatter


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord("contacts_api.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_basic_fields(self) -> None:
        payload = json.loads(JSONFormatter().format(_record()))

        assert payload["message"] == "hello world"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "contacts_api.test"
        assert "correlation_id" not in payload

    def test_extra_fields_and_correlation(self) -> None:
        token = correlation_id_var.set("abc-123")
        try:
            payload = json.loads(JSONFormatter().format(_record(contact_id="42", level="x")))
        finally:
            correlation_id_var.reset(token)

        assert payload["correlation_id"] == "abc-123"
        assert payload["contact_id"] == "42"
        assert payload["level"] == "INFO"
        assert payload["extra_level"] == "x"

    def test_exception_text(self) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord("t", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

        payload = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: boom" in payload["exception"]
