from __future__ import annotations

import asyncio
import errno
import logging
import time

import pytest

from connection_checker import FailureKind, ProbeOutcome, ProbeTarget, TCPProber

from conftest import BLACKHOLE, FakeWriter, start_listener


def test_probe_connects_to_loopback_listener():
    async def scenario():
        server, port = await start_listener()
        async with server:
            return await TCPProber().probe(ProbeTarget("127.0.0.1", port=port, timeout=2))

    outcome = asyncio.run(scenario())
    assert outcome.success is True
    assert outcome.target.port > 0


def test_probe_refused_port_is_negative(closed_port):
    target = ProbeTarget("127.0.0.1", port=closed_port, timeout=2)
    outcome = asyncio.run(TCPProber().probe(target))
    assert outcome == ProbeOutcome(target, False)


def test_probe_timeout_is_bounded_and_negative(fake_network):
    _, prober = fake_network({"192.0.2.1": (0, BLACKHOLE)})
    target = ProbeTarget("192.0.2.1", port=9999, timeout=0.2)

    start = time.perf_counter()
    outcome = asyncio.run(prober.probe(target))
    elapsed = time.perf_counter() - start

    assert outcome.success is False
    assert 0.15 <= elapsed < 1.0


@pytest.mark.parametrize(
    "exc,kind",
    [
        (ConnectionRefusedError(errno.ECONNREFUSED, "refused"), FailureKind.REFUSED),
        (OSError(errno.ENETUNREACH, "Network is unreachable"), FailureKind.UNREACHABLE),
        (OSError(errno.EHOSTUNREACH, "No route to host"), FailureKind.UNREACHABLE),
        (ConnectionResetError(errno.ECONNRESET, "reset"), FailureKind.RESET),
        (OSError(errno.EACCES, "denied"), FailureKind.OTHER),
        (RuntimeError("boom"), FailureKind.OTHER),
    ],
)
def test_failures_are_absorbed_and_classified(fake_network, caplog, exc, kind):
    caplog.set_level(logging.DEBUG, logger="connection_checker")
    _, prober = fake_network({"192.0.2.7": (0, exc)})

    outcome = asyncio.run(prober.probe(ProbeTarget("192.0.2.7", timeout=1)))

    assert outcome.success is False
    failures = [r for r in caplog.records if getattr(r, "failure", None)]
    assert [r.failure for r in failures] == [kind.value]
    assert failures[0].address == "192.0.2.7"


def test_timeout_is_logged_as_timeout(fake_network, caplog):
    caplog.set_level(logging.DEBUG, logger="connection_checker")
    _, prober = fake_network({"192.0.2.9": (0, BLACKHOLE)})

    asyncio.run(prober.probe(ProbeTarget("192.0.2.9", timeout=0.05)))

    assert any(getattr(r, "failure", None) == "timeout" for r in caplog.records)
    assert any(r.getMessage() == "probe-timeout" for r in caplog.records)


def test_connection_is_closed_without_sending_data(fake_network):
    network, prober = fake_network({"192.0.2.3": (0, True)})

    outcome = asyncio.run(prober.probe(ProbeTarget("192.0.2.3", timeout=1)))

    assert outcome.success is True
    assert network.calls == [("192.0.2.3", 53)]
    [writer] = network.writers
    assert writer.closed is True
    assert writer.written == b""


def test_teardown_failure_does_not_flip_success():
    async def connector(host, port):
        return None, FakeWriter(fail_close=True)

    outcome = asyncio.run(TCPProber(connector=connector).probe(ProbeTarget("192.0.2.4", timeout=1)))
    assert outcome.success is True


def test_cancellation_propagates(fake_network):
    _, prober = fake_network({"192.0.2.5": (0, BLACKHOLE)})

    async def scenario():
        task = asyncio.ensure_future(prober.probe(ProbeTarget("192.0.2.5", timeout=30)))
        await asyncio.sleep(0.05)
        task.cancel()
        await task

    with pytest.raises(asyncio.CancelledError):
        asyncio.run(scenario())


def test_slow_teardown_stays_within_target_timeout():
    class HangingWriter(FakeWriter):
        async def wait_closed(self) -> None:
            await asyncio.sleep(3600)

    writers = []

    async def connector(host, port):
        await asyncio.sleep(0.25)
        writer = HangingWriter()
        writers.append(writer)
        return None, writer

    start = time.perf_counter()
    outcome = asyncio.run(TCPProber(connector=connector).probe(ProbeTarget("192.0.2.6", timeout=0.3)))
    elapsed = time.perf_counter() - start

    assert outcome.success is True
    assert writers[0].closed is True
    assert elapsed < 0.45


def test_connect_finishing_after_deadline_leaves_no_open_writer(fake_network):
    network, prober = fake_network({"192.0.2.8": (0.3, True)})

    outcome = asyncio.run(prober.probe(ProbeTarget("192.0.2.8", timeout=0.1)))

    assert outcome.success is False
    assert network.writers == []
    assert network.completed == []
