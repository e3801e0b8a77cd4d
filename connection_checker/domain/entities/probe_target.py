"""Probe target entity describing one endpoint to test."""
from __future__ import annotations

import ipaddress
import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Union

from ..exceptions import InvalidConfiguration

DEFAULT_PORT = 53
DEFAULT_TIMEOUT = 10.0

AddressLike = Union[str, ipaddress.IPv4Address, ipaddress.IPv6Address]
TimeoutLike = Union[float, int, timedelta]


@dataclass(frozen=True)
class ProbeTarget:
    """An address, port and timeout for one TCP connection attempt.

    ``address`` must be an IP literal; hostnames are rejected because no
    name resolution is performed. ``timeout`` is in seconds (a ``timedelta``
    is converted). Invalid values raise ``InvalidConfiguration`` here rather
    than at probe time.
    """

    address: str
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", _normalize_address(self.address))
        object.__setattr__(self, "port", _validate_port(self.port))
        object.__setattr__(self, "timeout", _validate_timeout(self.timeout))

    def to_dict(self) -> dict:
        """Convert target to dictionary."""
        return {
            'address': self.address,
            'port': self.port,
            'timeout': self.timeout,
        }

    def __str__(self) -> str:
        return f"ProbeTarget({self.address}, {self.port}, {self.timeout:g}s)"


def _normalize_address(value: AddressLike) -> str:
    if isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return str(value)
    if not isinstance(value, str):
        raise InvalidConfiguration(f"Address must be an IP literal, got {type(value).__name__}")
    try:
        return str(ipaddress.ip_address(value.strip()))
    except ValueError as e:
        raise InvalidConfiguration(f"Address '{value}' is not an IP literal") from e


def _validate_port(value: int) -> int:
    # bool is an int subclass; True is not a port
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"Port must be an integer, got {value!r}")
    if value < 1 or value > 65535:
        raise InvalidConfiguration(f"Port {value} is outside 1-65535")
    return value


def _validate_timeout(value: TimeoutLike) -> float:
    if isinstance(value, timedelta):
        seconds = value.total_seconds()
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        seconds = float(value)
    else:
        raise InvalidConfiguration(f"Timeout must be seconds or a timedelta, got {value!r}")
    if not (seconds > 0 and math.isfinite(seconds)):
        raise InvalidConfiguration(f"Timeout must be a positive finite number, got {seconds}")
    return seconds
