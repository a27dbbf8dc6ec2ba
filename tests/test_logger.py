"""
Structured log formatting tests.
"""
import json
import logging

from snapshare.utils.logger import JsonLinesFormatter, request_id_var, set_request_id


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("snapshare", logging.INFO, __file__, 1, "Login", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonLinesFormatter:

    def test_fields(self):
        token = request_id_var.set("abc123")
        try:
            line = JsonLinesFormatter().format(_record(event="auth", photographer_id=3))
        finally:
            request_id_var.reset(token)

        payload = json.loads(line)
        assert payload["level"] == "INFO"
        assert payload["rid"] == "abc123"
        assert payload["event"] == "auth"
        assert payload["msg"] == "Login"
        assert payload["ctx"] == {"photographer_id": 3}
        assert payload["ts"].endswith("Z")

    def test_sensitive_fields_dropped(self):
        line = JsonLinesFormatter().format(_record(email="a@a.com", password="p", reason="x"))

        payload = json.loads(line)
        assert payload["ctx"] == {"reason": "x"}


def test_set_request_id_generates_when_missing():
    token = request_id_var.set(None)
    try:
        rid = set_request_id()
        assert len(rid) == 12
        assert set_request_id("given") == "given"
    finally:
        request_id_var.reset(token)
