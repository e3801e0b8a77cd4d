"""Built-in probe targets."""
from __future__ import annotations

from typing import Tuple

from ....domain.entities import DEFAULT_PORT, DEFAULT_TIMEOUT, ProbeTarget

# Public anycast DNS resolvers. Port 53 is served over TCP as well as UDP.
DEFAULT_ADDRESSES: Tuple[ProbeTarget, ...] = (
    ProbeTarget("1.1.1.1", port=DEFAULT_PORT, timeout=DEFAULT_TIMEOUT),         # Cloudflare
    ProbeTarget("8.8.4.4", port=DEFAULT_PORT, timeout=DEFAULT_TIMEOUT),         # Google
    ProbeTarget("208.67.222.222", port=DEFAULT_PORT, timeout=DEFAULT_TIMEOUT),  # OpenDNS
)

__all__ = ["DEFAULT_PORT", "DEFAULT_TIMEOUT", "DEFAULT_ADDRESSES"]
