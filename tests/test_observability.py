# tests/test_observability.py
import json
import logging
import sys

import pytest
from fastapi.testclient import TestClient

from catalog.observability import JSONFormatter, setup_logging


def _catalog_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, "_catalog_handler", False)]


@pytest.fixture
def clean_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    for h in _catalog_handlers():
        root.removeHandler(h)
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_request_logged_on_entry_and_exit(client, caplog):
    with caplog.at_level(logging.INFO, logger="catalog.requests"):
        r = client.get("/api/products/1", params={"x": "1"})
    assert r.status_code == 200

    recs = [rec for rec in caplog.records if rec.name == "catalog.requests"]
    assert len(recs) == 2
    entry, exit_ = recs
    assert entry.getMessage() == "GET /api/products/1?x=1"
    assert entry.method == "GET"
    assert "-> 200" in exit_.getMessage()
    assert exit_.status_code == 200
    assert exit_.path == "/api/products/1"
    assert isinstance(exit_.duration_ms, float)


def test_failed_request_exit_line_carries_status(client, caplog):
    with caplog.at_level(logging.INFO, logger="catalog.requests"):
        client.delete("/api/products/1")
    exit_ = [rec for rec in caplog.records if rec.name == "catalog.requests"][-1]
    assert exit_.status_code == 401


def test_json_formatter_includes_extras():
    record = logging.makeLogRecord({
        "name": "catalog.requests",
        "levelname": "INFO",
        "levelno": logging.INFO,
        "msg": "%s %s -> %s",
        "args": ("GET", "/api/products", 200),
        "method": "GET",
        "path": "/api/products",
        "status_code": 200,
        "duration_ms": 1.5,
        "error_kind": "not_found",
    })
    out = json.loads(JSONFormatter().format(record))
    assert out["message"] == "GET /api/products -> 200"
    assert out["level"] == "INFO"
    assert out["logger"] == "catalog.requests"
    assert out["method"] == "GET"
    assert out["path"] == "/api/products"
    assert out["status_code"] == 200
    assert out["duration_ms"] == 1.5
    assert out["error_kind"] == "not_found"
    assert "timestamp" in out
    assert "exception" not in out


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        exc_info = sys.exc_info()
    record = logging.makeLogRecord({"name": "catalog", "msg": "failed", "exc_info": exc_info})
    out = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in out["exception"]
    assert "method" not in out


def test_setup_logging_is_idempotent(clean_root):
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    handlers = _catalog_handlers()
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, JSONFormatter)
    assert clean_root.level == logging.WARNING


def test_logging_configured_on_startup_not_import(app, clean_root):
    assert _catalog_handlers() == []
    with TestClient(app):
        assert len(_catalog_handlers()) == 1
