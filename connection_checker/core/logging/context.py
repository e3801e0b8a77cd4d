from __future__ import annotations

import contextvars
import logging
import uuid
from typing import Any, Dict

_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


def new_run_id() -> str:
    return uuid.uuid4().hex[:12]


class context(object):
    """Temporarily bind values for the current task.

    Tasks created inside the block (e.g. by ``asyncio.gather``) copy the
    context at creation time, so concurrent probes all see the same run id.
    """

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token: contextvars.Token | None = None

    def __enter__(self) -> Dict[str, Any]:
        current = dict(_context.get())
        current.update({k: v for k, v in self._values.items() if v is not None})
        self._token = _context.set(current)
        return current

    def __exit__(self, exc_type, exc, tb):
        if self._token is not None:
            _context.reset(self._token)
            self._token = None
        return False


class ContextFilter(logging.Filter):
    """Copy the bound context onto the record in the emitting task.

    Records handed to a ``QueueListener`` are formatted on another thread
    where the caller's context variables are not visible.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = get_context()
        return True
