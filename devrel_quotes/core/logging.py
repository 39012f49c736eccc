"""Structured logging helpers with request and conversation metadata."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, ContextManager, Iterator, Optional

from pythonjsonlogger import jsonlogger

from devrel_quotes.core.config import settings

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
_client_ip: ContextVar[Optional[str]] = ContextVar("client_ip", default=None)
_session_id: ContextVar[Optional[str]] = ContextVar("session_id", default=None)

LEVEL_NAME = str(getattr(settings, "QUOTES_LOG_LEVEL", "info")).upper()
LOG_LEVEL = getattr(logging, LEVEL_NAME, logging.INFO)

BASE_DIR = Path(__file__).resolve().parent.parent
ROOT_DIR = BASE_DIR.parent


def _resolve_logs_dir() -> Path:
    """Select a writable logs directory honoring configuration overrides."""

    configured_dir = getattr(settings, "QUOTES_LOG_DIR", None)
    candidates = []
    if configured_dir:
        candidates.append(Path(configured_dir))

    data_dir = Path(getattr(settings, "DATA_DIR", Path("/data")))
    # Precedence: explicit override → repo root logs → DATA_DIR/logs → package-local logs
    candidates.append(ROOT_DIR / "logs")
    candidates.append(data_dir / "logs")
    candidates.append(BASE_DIR / "logs")

    for candidate in candidates:
        try:
            candidate.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            continue
        return candidate

    raise PermissionError("Unable to create a writable logs directory")


LOGS_DIR = _resolve_logs_dir()
LOG_SCHEMA_VERSION = "1.0.0"
LOG_FILE_PATH = LOGS_DIR / "devrel_quotes.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5


class VersionedJsonFormatter(jsonlogger.JsonFormatter):
    """Inject a schema version into each structured log entry."""

    def __init__(self, *args, schema_version: str, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._schema_version = schema_version

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("schema_version", self._schema_version)


class CorrelationIdFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Attach request and conversation metadata to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        record.client_ip = get_client_ip() or "-"
        record.session_id = get_session_id() or "-"
        return True


@contextmanager
def _bound(var: ContextVar[Optional[str]], value: Optional[str]) -> Iterator[None]:
    token = var.set(value)
    try:
        yield
    finally:
        var.reset(token)


def get_correlation_id() -> Optional[str]:
    """Return the current correlation id if bound."""

    return _correlation_id.get()


def get_client_ip() -> Optional[str]:
    """Return the current client IP if bound."""

    return _client_ip.get()


def get_session_id() -> Optional[str]:
    """Return the Dialogflow session of the conversation being served, if bound."""

    return _session_id.get()


def correlation_id_context(value: Optional[str]) -> ContextManager[None]:
    """Temporarily bind the correlation id of the current HTTP request."""

    return _bound(_correlation_id, value)


def client_ip_context(value: Optional[str]) -> ContextManager[None]:
    """Temporarily bind the client IP address of the current HTTP request."""

    return _bound(_client_ip, value)


def session_id_context(value: Optional[str]) -> ContextManager[None]:
    """Temporarily bind the Dialogflow session id so handler logs carry it.

    Empty strings are stored as ``None`` and render as ``-``.
    """

    return _bound(_session_id, value or None)


def _ensure_handlers(logger: logging.Logger) -> None:
    # Handlers are shared via the root logger; install them exactly once.
    if any(getattr(handler, "_devrel_quotes", False) for handler in logger.handlers):
        return

    formatter = VersionedJsonFormatter(
        " ".join(
            [
                "%(asctime)s",
                "%(levelname)s",
                "%(name)s",
                "%(message)s",
                "%(correlation_id)s",
                "%(client_ip)s",
                "%(session_id)s",
            ]
        ),
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
            "correlation_id": "cid",
            "session_id": "session",
        },
        datefmt="%Y-%m-%d %H:%M:%S",
        json_ensure_ascii=False,
        schema_version=LOG_SCHEMA_VERSION,
    )
    correlation_filter = CorrelationIdFilter()

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.addFilter(correlation_filter)
    stream_handler.setFormatter(formatter)
    setattr(stream_handler, "_devrel_quotes", True)
    logger.addHandler(stream_handler)

    file_handler = RotatingFileHandler(
        LOG_FILE_PATH, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.addFilter(correlation_filter)
    file_handler.setFormatter(formatter)
    setattr(file_handler, "_devrel_quotes", True)
    logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger that writes through the shared JSON handlers."""

    root_logger = logging.getLogger()
    _ensure_handlers(root_logger)
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)
    return logger


__all__ = [
    "CorrelationIdFilter",
    "VersionedJsonFormatter",
    "get_correlation_id",
    "get_client_ip",
    "get_session_id",
    "correlation_id_context",
    "client_ip_context",
    "session_id_context",
    "get_logger",
    "LOG_FILE_PATH",
    "LOG_SCHEMA_VERSION",
]
