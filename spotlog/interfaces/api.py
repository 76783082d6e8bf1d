"""
Public API for spotlog.

``Logger`` bundles a configuration, a formatter and a dispatcher; the
module-level functions act on a process-wide default logger built from the
``SPOTLOG_*`` environment variables.
"""

import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from ..core import PLAIN_COLOR, RecordFormatter, SeverityDispatcher, locate_caller
from ..infrastructure import log_file
from ..infrastructure.error_handler import SpotlogError
from ..infrastructure.logger import logger
from ..models import LogConfig, LogRecord, format_fault


####
##      CALL-SITE LOGGER
#####
class Logger:
    """
    Call-site logger with five entry points.

    Every call builds a fresh record, optionally persists it, renders it and
    hands it to the severity dispatcher. Fatal-classed calls end the process
    and panic-classed calls raise ``PanicAbort`` once the block is printed.
    """

    def __init__(
        self,
        config: Optional[LogConfig] = None,
        verbose: Optional[bool] = None,
        exit_process: Optional[Callable[[int], None]] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize the logger.

        Args:
            config: Log configuration, defaults to ``LogConfig()``
            verbose: Enable or disable debug output of the internal
                diagnostics logger; None leaves its current level alone
            exit_process: Hook called with the exit status on fatal logs
            clock: Time source for record timestamps
        """
        self.config = config or LogConfig()
        self.formatter = RecordFormatter()
        self.dispatcher = SeverityDispatcher(
            stream=self.config.stream,
            colorize=self.config.colorize,
            exit_process=exit_process
        )
        self.clock = clock

        if verbose is None:
            self.verbose = logger.isEnabledFor(logging.DEBUG)
        else:
            self.set_verbose(verbose)

    def set_verbose(self, verbose: bool) -> None:
        """Switch the internal diagnostics logger between DEBUG and INFO."""

        self.verbose = verbose
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    def simple(self, persist: bool = False, *, stacklevel: int = 1) -> LogRecord:
        """Log file, line and timestamp only."""

        record = self._record(stacklevel)
        self._log(record, "", persist, color=PLAIN_COLOR)
        return record

    def status(self, label: str, persist: bool = False, *, stacklevel: int = 1) -> LogRecord:
        """Log a status label, dispatched according to its class."""

        record = self._record(stacklevel, status=label)
        self._log(record, label, persist)
        return record

    def message(self, text: str, persist: bool = False, *, stacklevel: int = 1) -> LogRecord:
        """Log a free-text message."""

        record = self._record(stacklevel, message=text)
        self._log(record, "", persist, color=PLAIN_COLOR)
        return record

    def fault(
        self,
        label: str,
        error: Optional[BaseException] = None,
        persist: bool = False,
        *,
        stacklevel: int = 1
    ) -> LogRecord:
        """Log an exception, dispatched according to ``label``."""

        record = self._record(stacklevel, fault=format_fault(error))
        self._log(record, label, persist)
        return record

    def complete(
        self,
        status: str,
        message: str,
        error: Optional[BaseException] = None,
        persist: bool = False,
        *,
        stacklevel: int = 1
    ) -> LogRecord:
        """Log status, message and fault together, dispatched by ``status``."""

        record = self._record(
            stacklevel,
            status=status,
            message=message,
            fault=format_fault(error)
        )
        self._log(record, status, persist)
        return record

    def start_log_file(self) -> Path:
        return log_file.start_log_file(self.config)

    def find_log_file(self) -> Path:
        return log_file.find_log_file(self.config)

    def _record(self, stacklevel: int, **fields: str) -> LogRecord:
        # Skip this helper and the public entry point
        caller = locate_caller(stacklevel + 1)
        return LogRecord.create(caller.file, caller.line, clock=self.clock, **fields)

    def _log(
        self,
        record: LogRecord,
        label: str,
        persist: bool,
        color: Optional[str] = None
    ) -> None:
        if persist:
            self._persist(record)

        text = self.formatter.render(record)
        self.dispatcher.dispatch(label, text, color)

    def _persist(self, record: LogRecord) -> None:
        try:
            log_file.persist(record, self.config)
        except SpotlogError as e:
            if self.config.strict_persistence:
                raise
            logger.warning(f"Unable to persist log record, console output only: {e}")


####
##      PROCESS DEFAULT LOGGER
#####
_default_logger: Optional[Logger] = None
_default_lock = threading.Lock()


def get_logger() -> Logger:
    """Return the process default logger, creating it on first use."""

    global _default_logger
    with _default_lock:
        if _default_logger is None:
            _default_logger = Logger(LogConfig.from_env())
        return _default_logger


def configure(config: Optional[LogConfig] = None, verbose: Optional[bool] = None) -> Logger:
    """Replace the process default logger."""

    global _default_logger
    with _default_lock:
        _default_logger = Logger(config, verbose=verbose)
        return _default_logger


def simple(persist: bool = False) -> LogRecord:
    return get_logger().simple(persist, stacklevel=2)


def status(label: str, persist: bool = False) -> LogRecord:
    return get_logger().status(label, persist, stacklevel=2)


def message(text: str, persist: bool = False) -> LogRecord:
    return get_logger().message(text, persist, stacklevel=2)


def fault(label: str, error: Optional[BaseException] = None, persist: bool = False) -> LogRecord:
    return get_logger().fault(label, error, persist, stacklevel=2)


def complete(
    status: str,
    message: str,
    error: Optional[BaseException] = None,
    persist: bool = False
) -> LogRecord:
    return get_logger().complete(status, message, error, persist, stacklevel=2)


def start_log_file() -> Path:
    """Ensure the default logger's log file exists."""
    return get_logger().start_log_file()


def find_log_file() -> Path:
    """Locate the default logger's log file."""
    return get_logger().find_log_file()


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
