"""
Core data models API surface for spotlog.

This file re-exports model classes from domain-specific modules so callers
can write ``from spotlog.models import X``.
"""

from .record import (
    NO_FAULT,
    Severity,
    Action,
    LogRecord,
    format_fault,
    timestamp_now,
)
from .config import LogConfig, DEFAULT_FILENAME

__all__ = [
    # Record models
    "NO_FAULT",
    "Severity",
    "Action",
    "LogRecord",
    "format_fault",
    "timestamp_now",
    # Config models
    "LogConfig",
    "DEFAULT_FILENAME",
]
