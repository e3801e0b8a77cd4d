"""Structured logging for the connection checker."""
from .config import bootstrap_logging, shutdown_logging
from .context import context, get_context
from .logger import LogLevel, StructuredLogger, get_logger

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "context",
    "get_context",
    "LogLevel",
    "StructuredLogger",
    "get_logger",
]
