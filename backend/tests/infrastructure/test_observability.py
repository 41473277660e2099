"""Structured logging — JSON records and idempotent setup."""

import json
import logging

from blogcart.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "blogcart.test", logging.WARNING, __file__, 1, "Deleted %s rows", (2,), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "blogcart.test"
    assert log["message"] == "Deleted 2 rows"
    assert "timestamp" in log


def test_json_formatter_surfaces_extra_fields():
    log = json.loads(JSONFormatter().format(
        _record(error_code="RESOURCE_NOT_FOUND", path="/article/9", count=2),
    ))
    assert log["error_code"] == "RESOURCE_NOT_FOUND"
    assert log["path"] == "/article/9"
    assert log["count"] == 2
    assert "operation" not in log


def test_setup_logging_is_idempotent():
    try:
        setup_logging("DEBUG", "json")
        setup_logging("INFO", "text")
        ours = [h for h in logging.root.handlers if h.get_name() == "blogcart"]
        assert len(ours) == 1
        assert not isinstance(ours[0].formatter, JSONFormatter)
        assert logging.root.level == logging.INFO
    finally:
        for handler in list(logging.root.handlers):
            if handler.get_name() == "blogcart":
                logging.root.removeHandler(handler)
