from __future__ import annotations

import asyncio
import threading
import time
from typing import Any, Callable, ClassVar, Dict, Iterable, List, Optional, Tuple

from ....core.logging.context import context as log_context, new_run_id
from ....core.logging.logger import StructuredLogger, get_logger
from ....domain.entities import ProbeOutcome, ProbeTarget
from ....domain.enums import ConnectionStatus
from ....domain.exceptions import InvalidConfiguration
from .defaults import DEFAULT_ADDRESSES
from .tcp_prober import TCPProber


MetricsHook = Callable[[str, Dict[str, Any]], None]


class ConnectivityChecker:
    """Decides whether the host is online by probing a list of targets.

    Every call to :meth:`has_connection` probes all ``targets`` concurrently,
    waits for every probe to finish and reports ``True`` if at least one
    connected. The outcomes of the most recent run are kept in
    :attr:`last_results`, in target order.

    ``targets`` may be replaced or edited between runs. Editing the list
    while a run is in flight is not supported; a run works on the snapshot
    it took when it started.
    """

    _shared: ClassVar[Optional["ConnectivityChecker"]] = None
    _shared_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        targets: Optional[Iterable[ProbeTarget]] = None,
        *,
        prober: Optional[TCPProber] = None,
        logger: Optional[StructuredLogger] = None,
        metrics_hook: Optional[MetricsHook] = None,
    ) -> None:
        """Initialize checker with targets (defaults to the built-in resolvers) and strategies."""
        self.logger = logger or get_logger(__name__)
        self.prober = prober or TCPProber(self.logger)
        self.metrics_hook = metrics_hook
        self.targets = DEFAULT_ADDRESSES if targets is None else targets
        self._last_results: Optional[Tuple[ProbeOutcome, ...]] = None

    @classmethod
    def shared(cls) -> "ConnectivityChecker":
        """Return the process-wide default checker, creating it on first use.

        Safe to call from several threads; the checker itself should still be
        driven from one event loop at a time.
        """
        if cls._shared is None:
            with cls._shared_lock:
                if cls._shared is None:
                    cls._shared = cls()
        return cls._shared

    @property
    def targets(self) -> List[ProbeTarget]:
        return self._targets

    @targets.setter
    def targets(self, value: Iterable[ProbeTarget]) -> None:
        targets = list(value)
        _require_targets(targets)
        self._targets = targets

    @property
    def last_results(self) -> Optional[Tuple[ProbeOutcome, ...]]:
        """Outcomes of the last completed run, or ``None`` before the first one."""
        return self._last_results

    async def is_host_reachable(self, target: ProbeTarget) -> ProbeOutcome:
        """Probe a single target without touching ``last_results``."""
        return await self.prober.probe(target)

    async def has_connection(self) -> bool:
        """Probe every target and return ``True`` if any of them connected."""
        targets = tuple(self._targets)
        _require_targets(targets)
        start = time.perf_counter()
        with log_context(run_id=new_run_id()):
            self.logger.info(lambda: "check-start", extra={"targets": len(targets)})
            outcomes = await self._probe_all(targets)
            self._last_results = outcomes

            reachable = sum(1 for o in outcomes if o.success)
            connected = reachable > 0
            summary = {
                "targets": len(targets),
                "reachable": reachable,
                "connected": connected,
                "elapsed_ms": int((time.perf_counter() - start) * 1000.0),
            }
            self.logger.info(lambda: "check-done", extra=summary)
            self._metric("check_completed", summary)
        return connected

    async def connection_status(self) -> ConnectionStatus:
        """Same as :meth:`has_connection`, expressed as a status."""
        return ConnectionStatus.from_bool(await self.has_connection())

    async def _probe_all(self, targets: Tuple[ProbeTarget, ...]) -> Tuple[ProbeOutcome, ...]:
        if not targets:
            return ()
        # gather keeps input order regardless of completion order
        results = await asyncio.gather(*(self.prober.probe(t) for t in targets), return_exceptions=True)
        outcomes: List[ProbeOutcome] = []
        for target, result in zip(targets, results):
            if isinstance(result, ProbeOutcome):
                outcomes.append(result)
                continue
            self.logger.error(
                lambda: "probe-raised",
                extra={"address": target.address, "port": target.port, "error": repr(result)},
            )
            outcomes.append(ProbeOutcome(target, False))
        return tuple(outcomes)

    def _metric(self, name: str, payload: Dict[str, Any]) -> None:
        if self.metrics_hook:
            try:
                self.metrics_hook(name, payload)
            except Exception as e:
                self.logger.warning(lambda: f"metrics-hook-failed {name}", extra={"error": str(e)})


def _require_targets(targets: Iterable[Any]) -> None:
    for t in targets:
        if not isinstance(t, ProbeTarget):
            raise InvalidConfiguration(f"Expected ProbeTarget, got {type(t).__name__}")


def get_checker() -> ConnectivityChecker:
    return ConnectivityChecker.shared()


async def probe(target: ProbeTarget) -> ProbeOutcome:
    """Probe one target with the shared checker's prober."""
    return await get_checker().is_host_reachable(target)


async def check(checker: Optional[ConnectivityChecker] = None) -> bool:
    """Run a check on ``checker`` (the shared one when omitted)."""
    return await (checker or get_checker()).has_connection()


async def status(checker: Optional[ConnectivityChecker] = None) -> ConnectionStatus:
    return await (checker or get_checker()).connection_status()
