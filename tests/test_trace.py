"""trace_id propagation through middleware, error bodies and log records."""

import logging

from lms.common.logging import TraceIdFilter, setup_logging
from lms.common.trace import get_trace_id, new_trace_id, set_trace_id


def test_request_id_is_echoed(client):
    res = client.get("/api/users", headers={"X-Request-Id": "abc-123"})
    assert res.headers["X-Trace-Id"] == "abc-123"


def test_trace_id_generated_when_missing(client):
    first = client.get("/api/users").headers["X-Trace-Id"]
    second = client.get("/api/users").headers["X-Trace-Id"]
    assert len(first) == 32
    assert first != second


def test_error_body_carries_same_trace_id(client):
    res = client.get("/api/users/999", headers={"X-Request-Id": "trace-404"})
    assert res.json()["trace_id"] == "trace-404"
    assert res.headers["X-Trace-Id"] == "trace-404"


def test_set_trace_id_blank_falls_back():
    set_trace_id("   ")
    assert get_trace_id() == "-"
    set_trace_id(None)
    assert get_trace_id() == "-"


def test_new_trace_id_is_hex():
    tid = new_trace_id()
    int(tid, 16)
    assert len(tid) == 32


def test_filter_stamps_record():
    set_trace_id("log-trace")
    record = logging.LogRecord("lms", logging.INFO, __file__, 1, "hello", None, None)
    assert TraceIdFilter().filter(record) is True
    assert record.trace_id == "log-trace"


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    old_level = root.level
    try:
        setup_logging("debug")
        setup_logging("DEBUG")
        assert root.level == logging.DEBUG
        for h in root.handlers:
            assert sum(isinstance(f, TraceIdFilter) for f in h.filters) == 1
    finally:
        root.setLevel(old_level)


def test_setup_logging_unknown_level_defaults_to_info():
    root = logging.getLogger()
    old_level = root.level
    try:
        setup_logging("chatty")
        assert root.level == logging.INFO
    finally:
        root.setLevel(old_level)


def test_setup_logging_accepts_aliases_and_padding():
    root = logging.getLogger()
    old_level = root.level
    try:
        setup_logging(" warn ")
        assert root.level == logging.WARNING
        setup_logging(logging.ERROR)
        assert root.level == logging.ERROR
    finally:
        root.setLevel(old_level)
