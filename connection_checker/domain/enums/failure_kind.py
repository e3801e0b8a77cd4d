"""Failure categories for a single probe."""
from __future__ import annotations

import asyncio
import errno
from enum import Enum


_UNREACHABLE_ERRNOS = {
    errno.ENETUNREACH,
    errno.EHOSTUNREACH,
    errno.ENETDOWN,
    errno.EHOSTDOWN,
    errno.EADDRNOTAVAIL,
}


class FailureKind(Enum):
    """Why a probe did not connect.

    Only used for diagnostics (log records). Probe outcomes expose
    nothing but the success flag.
    """

    TIMEOUT = "timeout"
    REFUSED = "refused"
    UNREACHABLE = "unreachable"
    RESET = "reset"
    OTHER = "other"

    @classmethod
    def classify(cls, exc: BaseException) -> 'FailureKind':
        """Map a connect-time exception onto a failure category."""
        if isinstance(exc, (asyncio.TimeoutError, TimeoutError)):
            return cls.TIMEOUT
        if isinstance(exc, ConnectionRefusedError):
            return cls.REFUSED
        if isinstance(exc, (ConnectionResetError, ConnectionAbortedError)):
            return cls.RESET
        if isinstance(exc, OSError) and exc.errno in _UNREACHABLE_ERRNOS:
            return cls.UNREACHABLE
        return cls.OTHER
