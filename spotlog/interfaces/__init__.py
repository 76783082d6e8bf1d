"""
User-facing interfaces for spotlog.
"""

from .api import (
    Logger,
    get_logger,
    configure,
    simple,
    status,
    message,
    fault,
    complete,
    start_log_file,
    find_log_file,
)

__all__ = [
    "Logger",
    "get_logger",
    "configure",
    "simple",
    "status",
    "message",
    "fault",
    "complete",
    "start_log_file",
    "find_log_file",
]
