"""
Call-site resolution for log records.
"""

import sys
from dataclasses import dataclass

from ..infrastructure.error_handler import CallerResolutionError


@dataclass(frozen=True)
class CallerInfo:
    """Source location of the code that issued a logging call."""

    file: str
    line: int


def locate_caller(skip: int = 0) -> CallerInfo:
    """
    Resolve the file and line of a frame above the caller.

    Args:
        skip: Frames to skip above the direct caller of this function;
            0 designates the direct caller itself

    Raises:
        CallerResolutionError: If the stack is too shallow or frame
            introspection is unavailable
    """
    if skip < 0:
        raise ValueError("skip cannot be negative")

    try:
        frame = sys._getframe(skip + 1)
    except (AttributeError, ValueError) as e:
        raise CallerResolutionError("Unable to recover caller information", e) from e

    try:
        return CallerInfo(file=frame.f_code.co_filename, line=frame.f_lineno or 0)
    finally:
        del frame


__all__ = [
    "CallerInfo",
    "locate_caller",
]
