"""Structured Logging: formatter enrichment, path exclusion, idempotent setup."""

import json
import logging
import sys

import pytest

from employee_service.infrastructure.observability import (
    CorrelationIdFilter, ExcludePathsFilter, JSONFormatter,
    correlation_id_var, setup_logging, teardown_logging,
)


def _record(msg="hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "employee_service.test", logging.INFO, __file__, 1, msg, None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_level():
    level = logging.root.level
    yield
    teardown_logging()
    logging.root.setLevel(level)


def test_json_formatter_includes_enrichment():
    token = correlation_id_var.set("cid-9")
    try:
        record = _record(request_path="/x", status_code=200)
        CorrelationIdFilter().filter(record)
        log = json.loads(JSONFormatter("Development").format(record))
    finally:
        correlation_id_var.reset(token)
    assert log["message"] == "hello"
    assert log["level"] == "INFO"
    assert log["correlation_id"] == "cid-9"
    assert log["environment"] == "Development"
    assert log["machine_name"]
    assert log["process_id"] == record.process
    assert log["request_path"] == "/x"
    assert log["status_code"] == 200


def test_json_formatter_renders_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            "t", logging.ERROR, __file__, 1, "failed", None, sys.exc_info(),
        )
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in log["exception"]


def test_correlation_filter_defaults_to_dash():
    record = _record()
    CorrelationIdFilter().filter(record)
    assert record.correlation_id == "-"


def test_exclude_paths_filter():
    excluded = ExcludePathsFilter(["/employees/liveness", "/metrics"])
    assert not excluded.filter(_record(request_path="/employees/liveness"))
    assert not excluded.filter(_record(request_path="/metrics/prometheus"))
    assert excluded.filter(_record(request_path="/employees/v1/validate"))
    assert excluded.filter(_record())


def test_setup_logging_is_idempotent(restore_root_level):
    setup_logging("DEBUG", "text")
    count = len(logging.root.handlers)
    setup_logging("DEBUG", "text")
    assert len(logging.root.handlers) == count
    assert logging.root.level == logging.DEBUG


def test_setup_logging_with_file_sink(tmp_path, restore_root_level):
    log_file = tmp_path / "employee-service.log"
    handlers = setup_logging("INFO", "json", log_file=str(log_file))
    assert len(handlers) == 2
    logging.getLogger("employee_service.test").info("to file")
    for handler in handlers:
        handler.flush()
    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    assert json.loads(line)["message"] == "to file"
