"""Structured Logging - JSON formatter output."""

import json
import logging

from products_api.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "products_api.api.routes.products", logging.INFO, __file__, 1,
        "Product created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "products_api.api.routes.products"
    assert log["message"] == "Product created"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras():
    log = json.loads(JSONFormatter().format(
        _record(product_id=7, status_code=404, unrelated="x"),
    ))
    assert log["product_id"] == 7
    assert log["status_code"] == 404
    assert "unrelated" not in log
