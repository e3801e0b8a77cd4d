from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Tuple

from ....domain.entities import ProbeTarget
from ....domain.exceptions import InvalidConfiguration
from .defaults import DEFAULT_ADDRESSES, DEFAULT_PORT, DEFAULT_TIMEOUT

ENV_ADDRESSES = "CONNECTION_CHECKER_ADDRESSES"
ENV_PORT = "CONNECTION_CHECKER_PORT"
ENV_TIMEOUT = "CONNECTION_CHECKER_TIMEOUT_S"


@dataclass(slots=True)
class TargetConfig:
    """Target list described as address strings plus shared port/timeout defaults.

    Address entries are ``ip``, ``ip:port`` or ``[ipv6]:port``; a bare IPv6
    literal takes the default port.
    """
    addresses: Tuple[str, ...] = tuple(t.address for t in DEFAULT_ADDRESSES)
    port: int = DEFAULT_PORT
    timeout_s: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "TargetConfig":
        """Build TargetConfig from environment variables.

        Unset or blank variables keep the defaults; malformed values raise
        ``InvalidConfiguration``.
        """
        def _value(name: str) -> str:
            return os.getenv(name, "").strip()

        raw_port = _value(ENV_PORT)
        raw_timeout = _value(ENV_TIMEOUT)
        raw_addresses = _value(ENV_ADDRESSES)
        port = _parse_port(raw_port) if raw_port else DEFAULT_PORT
        timeout_s = _parse_timeout(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        addresses = _split(raw_addresses) if raw_addresses else tuple(t.address for t in DEFAULT_ADDRESSES)
        return cls(addresses=addresses, port=port, timeout_s=timeout_s)

    @classmethod
    def parse(cls, spec: str, *, port: int = DEFAULT_PORT, timeout_s: float = DEFAULT_TIMEOUT) -> "TargetConfig":
        """Parse a comma-separated address list."""
        addresses = _split(spec)
        if not addresses:
            raise InvalidConfiguration("Empty address list")
        return cls(addresses=addresses, port=port, timeout_s=timeout_s)

    def targets(self) -> List[ProbeTarget]:
        """Validate every entry and return the probe targets in order."""
        return [_parse_entry(entry, self.port, self.timeout_s) for entry in self.addresses]


def _split(spec: str) -> Tuple[str, ...]:
    return tuple(part.strip() for part in spec.split(",") if part.strip())


def _parse_port(value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise InvalidConfiguration(f"Invalid port: {value!r}") from e


def _parse_timeout(value: str) -> float:
    try:
        return float(value)
    except ValueError as e:
        raise InvalidConfiguration(f"Invalid timeout: {value!r}") from e


def _parse_entry(entry: str, port: int, timeout_s: float) -> ProbeTarget:
    if entry.startswith("["):
        host, closed, rest = entry[1:].partition("]")
        if not closed:
            raise InvalidConfiguration(f"Unterminated IPv6 literal: {entry!r}")
        if rest:
            if not rest.startswith(":"):
                raise InvalidConfiguration(f"Invalid address entry: {entry!r}")
            port = _parse_port(rest[1:])
        return ProbeTarget(host, port=port, timeout=timeout_s)
    if entry.count(":") == 1:
        host, port_s = entry.split(":")
        return ProbeTarget(host, port=_parse_port(port_s), timeout=timeout_s)
    return ProbeTarget(entry, port=port, timeout=timeout_s)
