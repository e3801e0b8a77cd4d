"""Application services root exports."""
from .connectivity import ConnectivityChecker, TargetConfig, TCPProber

__all__ = [
    "ConnectivityChecker",
    "TargetConfig",
    "TCPProber",
]
