from __future__ import annotations

import asyncio
import logging
import socket
from typing import Dict, Optional, Tuple, Union

import pytest

from connection_checker import TCPProber
from connection_checker.core.logging import shutdown_logging

BLACKHOLE = None


class FakeWriter:
    """Stands in for ``asyncio.StreamWriter`` in connector-based tests."""

    def __init__(self, fail_close: bool = False) -> None:
        self.fail_close = fail_close
        self.closed = False
        self.written = b""

    def write(self, data: bytes) -> None:
        self.written += data

    def close(self) -> None:
        if self.fail_close:
            raise OSError("close failed")
        self.closed = True

    async def wait_closed(self) -> None:
        return None


Behaviour = Tuple[float, Union[None, bool, BaseException]]


class FakeNetwork:
    """Connector whose behaviour is scripted per address.

    Each address maps to ``(delay, result)``: ``True`` connects after the
    delay, an exception is raised after the delay, ``BLACKHOLE`` never
    answers.
    """

    def __init__(self, behaviour: Dict[str, Behaviour]) -> None:
        self.behaviour = behaviour
        self.calls: list[Tuple[str, int]] = []
        self.writers: list[FakeWriter] = []
        self.completed: list[str] = []

    async def __call__(self, host: str, port: int):
        self.calls.append((host, port))
        delay, result = self.behaviour[host]
        await asyncio.sleep(delay)
        if result is BLACKHOLE:
            await asyncio.sleep(3600)
        if isinstance(result, BaseException):
            self.completed.append(host)
            raise result
        writer = FakeWriter()
        self.writers.append(writer)
        self.completed.append(host)
        return None, writer


@pytest.fixture
def fake_network():
    def _factory(behaviour: Dict[str, Behaviour]) -> Tuple[FakeNetwork, TCPProber]:
        network = FakeNetwork(behaviour)
        return network, TCPProber(connector=network)

    return _factory


@pytest.fixture
def closed_port() -> int:
    """A loopback port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


async def start_listener() -> Tuple[asyncio.AbstractServer, int]:
    """Loopback listener that accepts and immediately drops connections."""
    async def _handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        writer.close()

    server = await asyncio.start_server(_handle, "127.0.0.1", 0)
    return server, server.sockets[0].getsockname()[1]


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    shutdown_logging()
    logging.getLogger("connection_checker").setLevel(logging.NOTSET)
