"""Structured logging helpers for configuration resolution.

Purpose
    Keep every diagnostic emitted while resolving configuration predictable and
    contextual, without forcing a logging backend on applications that import
    ``myprog`` as a library.

Contents
    - ``TRACE_ID``: context variable storing the active trace identifier.
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``bind_trace_id``: binds or clears the active trace identifier.
    - ``log_debug`` / ``log_info`` / ``log_warning`` / ``log_error``: emit
      structured entries via a single private emitter.
    - ``make_event``: convenience builder for structured event payloads.
    - ``stderr_logging``: temporarily routes the package logger to stderr.

System Integration
    Used by adapters and the composition root. The CLI wraps each invocation in
    :func:`stderr_logging` so malformed-file diagnostics reach standard error.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Final, Iterator, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("myprog_trace_id", default=None)
"""Current trace identifier propagated through logging helpers."""

_LOGGER: Final[logging.Logger] = logging.getLogger("myprog")
_LOGGER.addHandler(logging.NullHandler())


class ContextFormatter(logging.Formatter):
    """Render ``level name: message`` followed by the structured context as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = getattr(record, "context", None)
        if not context:
            return line
        fields = " ".join(f"{key}={value}" for key, value in context.items() if value is not None)
        return f"{line} {fields}" if fields else line


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Bind or clear the active trace identifier.

    Examples
    --------
    >>> bind_trace_id('abc123')
    >>> TRACE_ID.get()
    'abc123'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug log entry that includes the trace context."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info log entry that includes the trace context."""

    _emit(logging.INFO, message, fields)


def log_warning(message: str, **fields: Any) -> None:
    """Emit a structured warning log entry that includes the trace context."""

    _emit(logging.WARNING, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Emit a structured error log entry that includes the trace context."""

    _emit(logging.ERROR, message, fields)


def make_event(
    layer: str,
    path: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a structured logging payload for configuration lifecycle events.

    Examples
    --------
    >>> make_event('candidate', None, {'count': 3})
    {'layer': 'candidate', 'path': None, 'count': 3}
    """

    event: dict[str, Any] = {"layer": layer, "path": path}
    if payload:
        event |= dict(payload)
    return event


def verbosity_level(count: int) -> int:
    """Map the number of ``-v`` flags onto a logging level.

    Examples
    --------
    >>> [logging.getLevelName(verbosity_level(n)) for n in (0, 1, 2, 5)]
    ['WARNING', 'INFO', 'DEBUG', 'DEBUG']
    """

    if count <= 0:
        return logging.WARNING
    if count == 1:
        return logging.INFO
    return logging.DEBUG


@contextmanager
def stderr_logging(level: int = logging.WARNING) -> Iterator[logging.Handler]:
    """Attach a stderr handler to the package logger for the duration of the block.

    The handler binds to ``sys.stderr`` as it is when the block starts, so
    captured streams (``CliRunner``, ``capsys``) see the output. The previous
    logger level is restored on exit.
    """

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(ContextFormatter("%(levelname)s %(name)s: %(message)s"))
    previous_level = _LOGGER.level
    _LOGGER.addHandler(handler)
    _LOGGER.setLevel(level)
    try:
        yield handler
    finally:
        _LOGGER.removeHandler(handler)
        _LOGGER.setLevel(previous_level)


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a log entry through the shared logger with contextual metadata."""

    _LOGGER.log(level, message, extra={"context": _with_trace(fields)})


def _with_trace(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Attach the current trace identifier to the provided structured fields."""

    context = {"trace_id": TRACE_ID.get()}
    context.update(fields)
    return context
