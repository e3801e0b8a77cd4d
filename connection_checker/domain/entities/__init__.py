"""Domain entities."""
from .probe_target import DEFAULT_PORT, DEFAULT_TIMEOUT, ProbeTarget
from .probe_outcome import ProbeOutcome

__all__ = [
    'DEFAULT_PORT',
    'DEFAULT_TIMEOUT',
    'ProbeTarget',
    'ProbeOutcome',
]
