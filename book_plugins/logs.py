"""Diagnostic logging sink used by the plugin handlers.

Handlers never talk to :mod:`logging` directly; they receive a ``LogSink``
(any ``str -> None`` callable) from the build session. The default sink writes
INFO records to the ``book_plugins`` logger. Sink failures are swallowed by
:func:`safe_log` so diagnostics can never break a build.
"""

from __future__ import annotations

import logging
import typing as typ

LogSink = typ.Callable[[str], None]

logger = logging.getLogger("book_plugins")


def default_log_sink() -> LogSink:
    """Return the sink that forwards messages to the package logger."""
    return logger.info


def safe_log(sink: LogSink | None, message: str) -> None:
    """Send ``message`` to ``sink``, ignoring any failure raised by the sink."""
    if sink is None:
        return
    try:
        sink(message)
    except Exception:  # noqa: BLE001 - logging must never propagate
        logger.debug("Log sink rejected message %r", message, exc_info=True)


__all__ = ["LogSink", "default_log_sink", "logger", "safe_log"]
