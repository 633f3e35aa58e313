"""Loguru setup with per-request correlation ids."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_NO_CORRELATION = "-"
_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default=_NO_CORRELATION)

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_DEFAULT_LOG_FILE = Path(__file__).resolve().parents[2] / "instance" / "app.log"

# stdlib loggers that are too chatty at DEBUG
_QUIET_LOGGERS = {
    "werkzeug": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
}


class _InterceptHandler(logging.Handler):
    """Route stdlib ``logging`` records (werkzeug, sqlalchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.bind(correlation_id=_CORRELATION_ID.get()).opt(
            depth=6, exception=record.exc_info
        ).log(level, record.getMessage())


class ContextualLogger:
    """Loguru proxy; every call is bound to the current correlation id."""

    def __getattr__(self, name):  # pragma: no cover
        return getattr(_logger.bind(correlation_id=_CORRELATION_ID.get()), name)


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or _NO_CORRELATION)


def get_correlation_id() -> str:
    return _CORRELATION_ID.get()


def clear_correlation_id() -> None:
    _CORRELATION_ID.set(_NO_CORRELATION)


def setup_logging(level: str = "INFO", log_file: str | Path | None = None) -> Path:
    """(Re)install the stderr and file sinks and return the log file path.

    Safe to call more than once; previous sinks are removed first.
    """

    level = level.upper()
    path = Path(log_file) if log_file else _DEFAULT_LOG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)

    common = {
        "level": level,
        "format": _FMT,
        "filter": sanitize_record,
        "backtrace": False,
        "diagnose": False,
    }
    _logger.remove()
    _logger.configure(extra={"correlation_id": _NO_CORRELATION})
    _logger.add(sys.stderr, colorize=True, **common)
    _logger.add(str(path), colorize=False, enqueue=True, mode="w", encoding="utf-8", **common)

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)
    return path


logger = ContextualLogger()

__all__ = [
    "logger",
    "setup_logging",
    "set_correlation_id",
    "clear_correlation_id",
    "get_correlation_id",
]
