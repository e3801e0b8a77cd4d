"""
Connection Checker
==================

Best-effort "am I online" signal for Python applications.

A check opens TCP connections to a handful of public DNS resolvers at the
same time and reports the host as connected if any of them answers within
its timeout. No data is exchanged and no names are resolved.

    import asyncio
    from connection_checker import ConnectivityChecker

    checker = ConnectivityChecker()
    online = asyncio.run(checker.has_connection())
    for outcome in checker.last_results:
        print(outcome)

Version: 1.0.0
"""

__version__ = "1.0.0"

from .domain import (
    ProbeTarget, ProbeOutcome,
    ConnectionStatus, FailureKind,
    ConnectionCheckerError, InvalidConfiguration,
)

from .application.services.connectivity import (
    DEFAULT_ADDRESSES,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT,
    ConnectivityChecker,
    TargetConfig,
    TCPProber,
    get_checker,
    probe,
    check,
    status,
)

from .core.logging import bootstrap_logging, shutdown_logging

__all__ = [
    # Version info
    '__version__',

    # Domain
    'ProbeTarget',
    'ProbeOutcome',
    'ConnectionStatus',
    'FailureKind',
    'ConnectionCheckerError',
    'InvalidConfiguration',

    # Application
    'DEFAULT_ADDRESSES',
    'DEFAULT_PORT',
    'DEFAULT_TIMEOUT',
    'ConnectivityChecker',
    'TargetConfig',
    'TCPProber',
    'get_checker',
    'probe',
    'check',
    'status',

    # Logging
    'bootstrap_logging',
    'shutdown_logging',
]
