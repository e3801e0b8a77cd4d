"""Application layer - Probing and aggregation services."""
from .services import ConnectivityChecker, TargetConfig, TCPProber

__all__ = [
    'ConnectivityChecker',
    'TargetConfig',
    'TCPProber',
]
