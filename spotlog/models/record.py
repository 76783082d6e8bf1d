"""
Log record models for spotlog.

This module contains the immutable record built by every logging call and
the enums used to classify its severity.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Dict, FrozenSet, Optional


# Rendering of a missing exception for entry points that carry a fault
NO_FAULT = "<nil>"

OPTIONAL_FIELDS = ("status", "message", "fault")


class Severity(Enum):
    """Severity classes recognized by the dispatcher."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"
    PANIC = "panic"
    DEFAULT = "default"     # Empty or unrecognized labels

    @classmethod
    def classify(cls, label: Optional[str]) -> "Severity":
        """Map a free-form status label to a severity, case-insensitively."""

        normalized = (label or "").strip().lower()
        for severity in cls:
            if severity is not cls.DEFAULT and severity.value == normalized:
                return severity
        return cls.DEFAULT


class Action(Enum):
    """Terminal action taken after a block has been printed."""

    CONTINUE = "continue"
    TERMINATE = "terminate"
    ABORT = "abort"


def timestamp_now(clock: Optional[Callable[[], datetime]] = None) -> str:
    """RFC 3339 timestamp with the local UTC offset, seconds precision."""

    moment = clock() if clock else datetime.now()
    return moment.astimezone().isoformat(timespec="seconds")


def format_fault(error: Optional[BaseException]) -> str:
    """Textual rendering of an exception, or the absence marker."""

    if error is None:
        return NO_FAULT
    return str(error)


@dataclass(frozen=True)
class LogRecord:
    """Immutable description of a single log event."""

    file: str
    line: int
    timestamp: str
    status: str = ""
    message: str = ""
    fault: str = ""

    def __post_init__(self) -> None:
        if not self.file:
            raise ValueError("Record file is required")
        if isinstance(self.line, bool) or not isinstance(self.line, int):
            raise ValueError(f"Record line must be an integer: {self.line!r}")
        if self.line < 0:
            raise ValueError("Record line cannot be negative")
        if not self.timestamp:
            raise ValueError("Record timestamp is required")

        # Frozen dataclass, so normalization goes through object.__setattr__
        object.__setattr__(self, "status", (self.status or "").strip().lower())
        object.__setattr__(self, "message", (self.message or "").lower())
        object.__setattr__(self, "fault", self.fault or "")

    @classmethod
    def create(
        cls,
        file: str,
        line: int,
        status: str = "",
        message: str = "",
        fault: str = "",
        clock: Optional[Callable[[], datetime]] = None
    ) -> "LogRecord":
        """Build a record stamped with the current time."""

        return cls(
            file=file,
            line=line,
            timestamp=timestamp_now(clock),
            status=status,
            message=message,
            fault=fault
        )

    @property
    def severity(self) -> Severity:
        return Severity.classify(self.status)

    def populated_fields(self) -> FrozenSet[str]:
        return frozenset(name for name in OPTIONAL_FIELDS if getattr(self, name))

    def to_dict(self) -> Dict[str, object]:
        """Persisted shape of the record; empty optional fields are omitted."""

        data: Dict[str, object] = {
            "file": self.file,
            "line": self.line,
            "timestamp": self.timestamp,
        }
        for name in OPTIONAL_FIELDS:
            value = getattr(self, name)
            if value:
                data[name] = value
        return data


__all__ = [
    "NO_FAULT",
    "OPTIONAL_FIELDS",
    "Severity",
    "Action",
    "timestamp_now",
    "format_fault",
    "LogRecord",
]
