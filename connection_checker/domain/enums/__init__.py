"""Domain enumerations."""
from .connection_status import ConnectionStatus
from .failure_kind import FailureKind

__all__ = [
    'ConnectionStatus',
    'FailureKind',
]
