"""Structured Logging: JSON formatter, enrichment and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, message and the request's
      correlation id ("-" outside a request)
    - Enrichment (environment, machine, process, thread) attached to every JSON record
    - Request-log records for excluded paths (health probes, metrics) are dropped
    - setup_logging is idempotent: it replaces the handlers it installed previously

Design Decisions:
    - Standard-library logging with a JSONFormatter: zero dependencies, full control
    - correlation_id_var is a ContextVar so concurrent requests never share state
    - Daily file rotation keeps 31 files (ADR: one month of local history)
"""

import json
import logging
import socket
from contextvars import ContextVar
from datetime import datetime, timezone
from logging.handlers import TimedRotatingFileHandler
from typing import Iterable

correlation_id_var: ContextVar[str | None] = ContextVar(
    "correlation_id", default=None,
)

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(correlation_id)s %(name)s %(message)s"
LOG_FILE_BACKUP_COUNT = 31

_SURFACED_EXTRAS = (
    "request_path", "path", "method", "status_code", "duration_ms",
    "error_code", "category", "api_version",
)

_installed_handlers: list[logging.Handler] = []


class CorrelationIdFilter(logging.Filter):
    """Stamp every record with the correlation id of the current request."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id_var.get() or "-"
        return True


class ExcludePathsFilter(logging.Filter):
    """Drop request-log records whose request_path starts with an excluded prefix."""

    def __init__(self, prefixes: Iterable[str]):
        super().__init__()
        self.prefixes = tuple(prefixes)

    def filter(self, record: logging.LogRecord) -> bool:
        path = getattr(record, "request_path", None)
        if path and self.prefixes and path.startswith(self.prefixes):
            return False
        return True


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def __init__(self, environment: str = "Production"):
        super().__init__()
        self.environment = environment
        self.machine_name = socket.gethostname()

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "correlation_id": getattr(record, "correlation_id", None)
            or correlation_id_var.get(),
            "environment": self.environment,
            "machine_name": self.machine_name,
            "process_id": record.process,
            "thread_id": record.thread,
        }
        for key in _SURFACED_EXTRAS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def _build_formatter(fmt: str, environment: str) -> logging.Formatter:
    if fmt == "json":
        return JSONFormatter(environment)
    return logging.Formatter(TEXT_FORMAT)


def setup_logging(
    level: str = "INFO",
    fmt: str = "json",
    *,
    environment: str = "Production",
    log_file: str | None = None,
    excluded_paths: Iterable[str] = (),
) -> list[logging.Handler]:
    """Configure root logging for the application. Returns the installed handlers."""
    teardown_logging()
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(TimedRotatingFileHandler(
            log_file, when="midnight", backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        ))
    excluded = ExcludePathsFilter(excluded_paths)
    for handler in handlers:
        handler.setFormatter(_build_formatter(fmt, environment))
        handler.addFilter(CorrelationIdFilter())
        handler.addFilter(excluded)
        logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _installed_handlers.extend(handlers)
    return handlers


def teardown_logging() -> None:
    """Remove and close handlers installed by setup_logging."""
    while _installed_handlers:
        handler = _installed_handlers.pop()
        logging.root.removeHandler(handler)
        handler.close()
