"""
Error types and error-translation helpers for spotlog.
"""

from functools import wraps
from typing import Callable, Optional, TypeVar

from .logger import logger


T = TypeVar("T")


class SpotlogError(Exception):
    """Base error for every recoverable spotlog failure."""

    def __init__(self, message: str, original_error: Optional[BaseException] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(message)

    def __str__(self) -> str:
        if self.original_error is not None:
            return f"{self.message} (Original: {self.original_error})"
        return self.message


class WorkingDirectoryError(SpotlogError):
    """The working directory cannot be resolved."""


class LogFileError(SpotlogError):
    """The log file cannot be created, opened, written or closed."""


class LogFileNotFoundError(LogFileError):
    """Log file discovery matched zero or several files."""


class SerializationError(SpotlogError):
    """A record cannot be encoded to the persisted format."""


class CallerResolutionError(SpotlogError):
    """Call-site information is unavailable."""


class PanicAbort(BaseException):
    """
    Raised after a panic-classed block has been printed.

    Derives from BaseException so ordinary ``except Exception`` handlers do
    not swallow it; a recovery boundary must catch it by name.
    """

    def __init__(self, output: str):
        self.output = output
        super().__init__(output)


def handle_io_error(action: str) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator translating low-level failures into spotlog errors.

    ``OSError`` becomes ``LogFileError``; ``TypeError`` and ``ValueError``
    become ``SerializationError``. Spotlog errors pass through untouched.

    Args:
        action: Short description used as the error message prefix
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except SpotlogError:
                raise
            except OSError as e:
                logger.debug(f"I/O failure while trying to {action}: {e}")
                raise LogFileError(f"Unable to {action}", e) from e
            except (TypeError, ValueError) as e:
                logger.debug(f"Encoding failure while trying to {action}: {e}")
                raise SerializationError(f"Unable to {action}", e) from e

        return wrapper

    return decorator


__all__ = [
    "SpotlogError",
    "WorkingDirectoryError",
    "LogFileError",
    "LogFileNotFoundError",
    "SerializationError",
    "CallerResolutionError",
    "PanicAbort",
    "handle_io_error",
]
