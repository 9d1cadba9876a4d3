"""Logging helpers for sqlvars.

Every logger handed out by :func:`get_logger` lives under the ``sqlvars``
namespace. The library never installs handlers by itself; applications opt in
with :func:`configure_logging` and scope a correlation ID around the work that
renders or expands queries with :func:`correlation_context`.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from sqlvars._serialization import encode_json

if TYPE_CHECKING:
    from collections.abc import Iterator
    from logging import LogRecord

__all__ = (
    "CorrelationIDFilter",
    "StructuredFormatter",
    "configure_logging",
    "correlation_context",
    "get_correlation_id",
    "get_logger",
    "log_with_context",
)

_ROOT_LOGGER_NAME = "sqlvars"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_correlation_id: ContextVar[str | None] = ContextVar("sqlvars_correlation_id", default=None)


def get_correlation_id() -> str | None:
    return _correlation_id.get()


@contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Tag every sqlvars log record emitted inside the block with an ID.

    Contexts nest; leaving a block restores the enclosing ID.

    Args:
        correlation_id: ID to use. A random one is generated when omitted.

    Yields:
        The active correlation ID.
    """
    active = correlation_id or uuid4().hex
    token = _correlation_id.set(active)
    try:
        yield active
    finally:
        _correlation_id.reset(token)


class CorrelationIDFilter(logging.Filter):
    """Stamps ``record.correlation_id`` at emit time, ``None`` outside a context."""

    def filter(self, record: LogRecord) -> bool:
        record.correlation_id = get_correlation_id()  # type: ignore[attr-defined]
        return True


class StructuredFormatter(logging.Formatter):
    """One JSON object per record.

    Fields passed through :func:`log_with_context` are merged into the top
    level of the object.
    """

    def format(self, record: LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "source": f"{record.module}:{record.lineno}",
        }
        correlation_id = getattr(record, "correlation_id", None) or get_correlation_id()
        if correlation_id is not None:
            entry["correlation_id"] = correlation_id
        entry.update(getattr(record, "extra_fields", {}))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return encode_json(entry)


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the ``sqlvars`` namespace.

    Args:
        name: Dotted name relative to ``sqlvars``. Names already under the
            namespace are used as given.

    Returns:
        The logger, carrying exactly one :class:`CorrelationIDFilter`.
    """
    if name is None or name == _ROOT_LOGGER_NAME:
        full_name = _ROOT_LOGGER_NAME
    elif name.startswith(f"{_ROOT_LOGGER_NAME}."):
        full_name = name
    else:
        full_name = f"{_ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(full_name)
    if not any(isinstance(f, CorrelationIDFilter) for f in logger.filters):
        logger.addFilter(CorrelationIDFilter())
    return logger


def configure_logging(
    level: str = "INFO",
    format_style: str = "structured",
    extra_handlers: list[logging.Handler] | None = None,
) -> None:
    """Configure the ``sqlvars`` logger tree.

    Replaces any handlers installed by an earlier call and stops records from
    propagating to the root logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format_style: ``"structured"`` for JSON lines, anything else for plain text.
        extra_handlers: Additional handlers to attach.
    """
    root_logger = get_logger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        StructuredFormatter() if format_style == "structured" else logging.Formatter(_PLAIN_FORMAT)
    )
    for handler in (console_handler, *(extra_handlers or ())):
        root_logger.addHandler(handler)
    root_logger.propagate = False


def log_with_context(logger: logging.Logger, level: int, message: str, **extra_fields: Any) -> None:
    """Log ``message`` with fields that :class:`StructuredFormatter` emits as JSON keys."""
    if not logger.isEnabledFor(level):
        return
    logger.log(level, message, extra={"extra_fields": extra_fields})
