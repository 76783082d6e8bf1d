"""
Infrastructure layer for spotlog: errors, internal logging and the log file.
"""

from .logger import logger
from .error_handler import (
    SpotlogError,
    WorkingDirectoryError,
    LogFileError,
    LogFileNotFoundError,
    SerializationError,
    CallerResolutionError,
    PanicAbort,
)
from .log_file import find_log_file, persist, read_records, start_log_file

__all__ = [
    "logger",
    "SpotlogError",
    "WorkingDirectoryError",
    "LogFileError",
    "LogFileNotFoundError",
    "SerializationError",
    "CallerResolutionError",
    "PanicAbort",
    "find_log_file",
    "persist",
    "read_records",
    "start_log_file",
]
