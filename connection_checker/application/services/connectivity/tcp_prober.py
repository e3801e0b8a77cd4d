from __future__ import annotations

import asyncio
import time
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

from ....core.logging.logger import StructuredLogger, get_logger
from ....domain.entities import ProbeOutcome, ProbeTarget
from ....domain.enums import FailureKind

Streams = Tuple[asyncio.StreamReader, asyncio.StreamWriter]
Connector = Callable[[str, int], Awaitable[Streams]]


class TCPProber:
    """TCP connect probe strategy.

    Opens a connection, sends and reads nothing, and closes it again.
    Network failures of any kind become a negative outcome; only task
    cancellation propagates.
    """

    def __init__(self, logger: Optional[StructuredLogger] = None, *, connector: Optional[Connector] = None) -> None:
        """Initialize prober with an injected logger and optional connector."""
        self.logger = logger or get_logger(__name__)
        self._connector = connector

    async def probe(self, target: ProbeTarget) -> ProbeOutcome:
        """Attempt one connection to ``target`` bounded by its timeout."""
        start = time.perf_counter()
        fields: Dict[str, Any] = {"address": target.address, "port": target.port, "timeout_s": target.timeout}
        self.logger.debug(lambda: "probe-start", extra=fields)
        try:
            _, writer = await asyncio.wait_for(self._open(target), timeout=target.timeout)
        except (asyncio.TimeoutError, OSError) as e:
            self._log_failure(fields, start, FailureKind.classify(e), e)
            return ProbeOutcome(target, False)
        except Exception as e:
            self._log_failure(fields, start, FailureKind.OTHER, e)
            return ProbeOutcome(target, False)

        latency_ms = _elapsed_ms(start)
        await self._release(writer, target.timeout - (time.perf_counter() - start), fields)
        self.logger.success(lambda: "probe-ok", extra={**fields, "latency_ms": latency_ms})
        return ProbeOutcome(target, True)

    def _open(self, target: ProbeTarget) -> Awaitable[Streams]:
        if self._connector is not None:
            return self._connector(target.address, target.port)
        return asyncio.open_connection(target.address, target.port)

    async def _release(self, writer: asyncio.StreamWriter, remaining: float, fields: Dict[str, Any]) -> None:
        # Teardown is best-effort and only gets what is left of the target's timeout.
        try:
            writer.close()
            if remaining > 0:
                await asyncio.wait_for(writer.wait_closed(), timeout=remaining)
        except Exception as e:
            self.logger.debug(lambda: "probe-teardown-failed", extra={**fields, "error": _describe(e)})

    def _log_failure(self, fields: Dict[str, Any], start: float, kind: FailureKind, exc: BaseException) -> None:
        extra = {**fields, "latency_ms": _elapsed_ms(start), "failure": kind.value, "error": _describe(exc)}
        if kind is FailureKind.OTHER:
            self.logger.error(lambda: "probe-exception", extra=extra)
        else:
            self.logger.warning(lambda: f"probe-{kind.value}", extra=extra)


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000.0)


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__
