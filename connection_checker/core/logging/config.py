from __future__ import annotations

import logging
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .context import ContextFilter
from .formatter import ConsoleFormatter, JSONFormatter
from .logger import register_levels, to_level

_listener: QueueListener | None = None
_handlers: list[logging.Handler] = []

PACKAGE_LOGGER = "connection_checker"


def bootstrap_logging(
    *,
    level: str | int | None = None,
    console: Optional[bool] = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "connection_checker.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> logging.Logger:
    """Attach handlers to the package logger.

    Unset arguments fall back to ``settings`` (``LOG_LEVEL``, ``LOG_CONSOLE``,
    ``LOG_DIR``). File output is JSON lines written from a background
    ``QueueListener`` so probes never block on disk I/O. Calling again
    replaces the handlers installed by the previous call.
    """
    global _listener
    from ...config import settings

    shutdown_logging()
    register_levels()
    pkg = logging.getLogger(PACKAGE_LOGGER)
    lvl = to_level(level if level is not None else settings.LOG_LEVEL)
    pkg.setLevel(lvl)

    enable_console = settings.LOG_CONSOLE if console is None else console
    if enable_console:
        stream = logging.StreamHandler()
        stream.setLevel(lvl)
        stream.setFormatter(ConsoleFormatter())
        _install(pkg, stream)

    target_dir = log_dir if log_dir is not None else settings.LOG_DIR
    if target_dir:
        target_dir = Path(target_dir)
        target_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(target_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        _install(pkg, QueueHandler(q))
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()
    return pkg


def _install(logger: logging.Logger, handler: logging.Handler) -> None:
    handler.addFilter(ContextFilter())
    logger.addHandler(handler)
    _handlers.append(handler)


def shutdown_logging() -> None:
    """Stop the file listener and detach handlers added by ``bootstrap_logging``."""
    global _listener
    if _listener is not None:
        try:
            _listener.stop()
        finally:
            for h in _listener.handlers:
                h.close()
            _listener = None
    pkg = logging.getLogger(PACKAGE_LOGGER)
    while _handlers:
        pkg.removeHandler(_handlers.pop())
