"""Structured Logging — verifies JSONFormatter output fields."""

import json
import logging
import sys

from hardball.infrastructure.observability import JSONFormatter


def _record(msg="hello", exc_info=None, **extra):
    record = logging.LogRecord(
        "hardball.test", logging.INFO, __file__, 1, msg, None, exc_info,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "hardball.test"
    assert out["message"] == "hello"
    assert "timestamp" in out


def test_json_formatter_surfaces_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(username="bob", error_code="UNAUTHORIZED", password="pw"),
    ))
    assert out["username"] == "bob"
    assert out["error_code"] == "UNAUTHORIZED"
    assert "password" not in out


def test_json_formatter_skips_none_extras():
    out = json.loads(JSONFormatter().format(_record(username=None)))
    assert "username" not in out


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record(exc_info=sys.exc_info())
    out = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in out["exception"]
