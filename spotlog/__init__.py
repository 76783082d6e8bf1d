"""
spotlog: call-site logging for small command-line programs.

Each call records where it was made and when, prints a colored block to the
console and can append a JSON record to ``spotlog.log``::

    import spotlog

    spotlog.start_log_file()
    spotlog.complete("success", "service is up", None, persist=True)
"""

from .interfaces import (
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
from .models import Action, LogConfig, LogRecord, Severity
from .infrastructure import (
    SpotlogError,
    WorkingDirectoryError,
    LogFileError,
    LogFileNotFoundError,
    SerializationError,
    CallerResolutionError,
    PanicAbort,
    read_records,
)

__version__ = "0.1.0"

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
    "Action",
    "LogConfig",
    "LogRecord",
    "Severity",
    "SpotlogError",
    "WorkingDirectoryError",
    "LogFileError",
    "LogFileNotFoundError",
    "SerializationError",
    "CallerResolutionError",
    "PanicAbort",
    "read_records",
]
