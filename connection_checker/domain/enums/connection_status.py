"""Overall connectivity status enumeration."""
from enum import Enum


class ConnectionStatus(Enum):
    """Two-valued connectivity status derived from a check result."""

    DISCONNECTED = "disconnected"
    CONNECTED = "connected"

    @property
    def is_connected(self) -> bool:
        return self is ConnectionStatus.CONNECTED

    @classmethod
    def from_bool(cls, connected: bool) -> 'ConnectionStatus':
        """Map a check result onto a status."""
        return cls.CONNECTED if connected else cls.DISCONNECTED

    def __str__(self) -> str:
        return self.value
