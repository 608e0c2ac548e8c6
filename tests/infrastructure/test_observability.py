"""Structured Logging — JSON formatter fields and idempotent setup."""

import json
import logging

from parcel_ledger.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "parcel_ledger.test", logging.INFO, __file__, 1, "Advanced package", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    data = json.loads(JSONFormatter().format(_record()))
    assert data["level"] == "INFO"
    assert data["logger"] == "parcel_ledger.test"
    assert data["message"] == "Advanced package"
    assert "timestamp" in data


def test_json_formatter_surfaces_ledger_extras():
    data = json.loads(JSONFormatter().format(
        _record(package_id="p1", holder_id="h1", status="delivered", unrelated="x"),
    ))
    assert data["package_id"] == "p1"
    assert data["holder_id"] == "h1"
    assert data["status"] == "delivered"
    assert "unrelated" not in data


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    level = logging.root.level
    setup_logging("DEBUG", "text")
    setup_logging("WARNING", "json")
    try:
        assert len(logging.root.handlers) == before + 1
        assert logging.root.level == logging.WARNING
    finally:
        for h in list(logging.root.handlers):
            if h.get_name() == "parcel_ledger":
                logging.root.removeHandler(h)
        logging.root.setLevel(level)
