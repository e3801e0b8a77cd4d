from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict

from .context import get_context

_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"

# Extra fields attached by the prober and checker, in display order.
PROBE_FIELDS = ("address", "port", "timeout_s", "failure", "latency_ms", "error", "targets", "reachable", "connected", "elapsed_ms")


def _record_metadata(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created)),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "logger": record.name,
        "function": record.funcName,
        "line_number": record.lineno,
    }


def _record_context(record: logging.LogRecord) -> Dict[str, Any]:
    ctx = getattr(record, "context", None)
    return ctx if isinstance(ctx, dict) else get_context()


def _probe_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: getattr(record, k) for k in PROBE_FIELDS if getattr(record, k, None) is not None}


class ConsoleFormatter(logging.Formatter):
    def __init__(self, *, color: bool = True) -> None:
        super().__init__()
        self._color = color

    def format(self, record: logging.LogRecord) -> str:
        try:
            md = _record_metadata(record)
            parts = [
                md["timestamp"],
                md["level"],
                md["service"] or "-",
                f"{md['logger']}:{md['function']}:{md['line_number']}",
                record.getMessage(),
            ]
            fields = _probe_fields(record)
            if fields:
                parts.append(" ".join(f"{k}={v}" for k, v in fields.items()))
            ctx = _record_context(record)
            if ctx:
                parts.append(" ".join(f"{k}={v}" for k, v in ctx.items()))
            if record.exc_info:
                parts.append(self.formatException(record.exc_info))
            line = " | ".join(parts)
            if not self._color:
                return line
            return f"{_LEVEL_COLORS.get(md['level'], '')}{line}{_RESET}"
        except Exception:
            try:
                return record.getMessage()
            except Exception:
                return "<log format error>"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        try:
            payload: Dict[str, Any] = _record_metadata(record)
            payload["message"] = record.getMessage()
            payload.update(_probe_fields(record))
            ctx = _record_context(record)
            if ctx:
                payload["context"] = ctx
            if record.exc_info:
                try:
                    payload["exception"] = self.formatException(record.exc_info)
                except Exception:
                    payload["exception"] = "unavailable"
            return json.dumps(payload, default=str, separators=(",", ":"))
        except Exception:
            return json.dumps({"message": "log format error"}, separators=(",", ":"))
