"""Domain layer - Probe entities, enums, and errors."""
from .entities import ProbeTarget, ProbeOutcome
from .enums import ConnectionStatus, FailureKind
from .exceptions import ConnectionCheckerError, InvalidConfiguration

__all__ = [
    # Entities
    'ProbeTarget',
    'ProbeOutcome',
    # Enums
    'ConnectionStatus',
    'FailureKind',
    # Errors
    'ConnectionCheckerError',
    'InvalidConfiguration',
]
