"""Log events emitted while tier chains are expanded, loaded and validated.

Every event goes to the ``lib_tiered_config`` logger under a short snake_case
message (``config_chain_built``, ``env_override_applied`` ...). Its fields
travel in ``record.context`` together with the trace id of the surrounding
:func:`lib_tiered_config.build` call, so a handler can group the events of one
build even though its configs load concurrently. The logger stays silent until
the application attaches a handler.

Environment values never reach a record; overlay events name the variable only.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

LOGGER_NAME: Final = "lib_tiered_config"

TRACE_ID: ContextVar[str | None] = ContextVar("lib_tiered_config_trace_id", default=None)
"""Trace id stamped on every event; tasks spawned by a build inherit it."""

_LOGGER: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the logger that carries every build event."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Set the trace id for events emitted from the current context.

    :func:`lib_tiered_config.build` passes ``None`` at start-up.

    Examples
    --------
    >>> bind_trace_id('build-7')
    >>> TRACE_ID.get()
    'build-7'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    _emit(logging.ERROR, message, fields)


def make_event(
    file_name: str,
    path: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Return the fields of an event about one logical config.

    ``file_name`` and ``path`` always come from the arguments; *payload* adds
    detail but cannot rename the config an event belongs to.

    Examples
    --------
    >>> make_event('pg', None, {'candidates': 9})
    {'candidates': 9, 'file_name': 'pg', 'path': None}
    >>> make_event('pg', None, {'file_name': 'redis'})['file_name']
    'pg'
    """

    return {**(payload or {}), "file_name": file_name, "path": path}


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    if not _LOGGER.isEnabledFor(level):
        return
    context = {"trace_id": TRACE_ID.get(), **fields}
    _LOGGER.log(level, message, extra={"context": context})
