from .defaults import DEFAULT_ADDRESSES, DEFAULT_PORT, DEFAULT_TIMEOUT
from .target_config import TargetConfig
from .tcp_prober import TCPProber
from .connectivity_checker import ConnectivityChecker, check, get_checker, probe, status

__all__ = [
    "DEFAULT_ADDRESSES",
    "DEFAULT_PORT",
    "DEFAULT_TIMEOUT",
    "TargetConfig",
    "TCPProber",
    "ConnectivityChecker",
    "get_checker",
    "probe",
    "check",
    "status",
]
