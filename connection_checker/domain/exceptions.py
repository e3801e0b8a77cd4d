from __future__ import annotations


class ConnectionCheckerError(Exception):
    """Base error for connection checker operations."""


class InvalidConfiguration(ConnectionCheckerError, ValueError):
    """Raised when a probe target or target list is malformed."""
