"""
Configuration models for spotlog.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO


DEFAULT_FILENAME = "spotlog.log"

FILE_FORMATS = ("ndjson", "concatenated")

_FALSY = ("0", "false", "no", "off")


@dataclass
class LogConfig:
    """
    Settings shared by the console and persistence paths.

    Directory and stream are resolved at call time so a change of working
    directory or a swapped ``sys.stderr`` is picked up by later calls.
    """

    # Log file settings
    filename: str = DEFAULT_FILENAME
    directory: Optional[Path] = None  # None means the working directory
    file_format: str = "ndjson"

    # Console settings
    colorize: bool = True
    stream: Optional[TextIO] = None  # None means sys.stderr

    # Raise persistence failures instead of degrading to console-only output
    strict_persistence: bool = False

    def __post_init__(self) -> None:
        if not self.filename:
            raise ValueError("Log filename is required")
        if Path(self.filename).name != self.filename:
            raise ValueError(f"Log filename must not contain a directory: {self.filename}")
        if self.file_format not in FILE_FORMATS:
            raise ValueError(f"Invalid file_format: {self.file_format}")
        if self.directory is not None:
            self.directory = Path(self.directory)

    @classmethod
    def from_env(cls) -> "LogConfig":
        """Build a configuration from ``SPOTLOG_*`` environment variables."""

        directory = os.environ.get("SPOTLOG_DIR")
        return cls(
            filename=os.environ.get("SPOTLOG_FILE", DEFAULT_FILENAME),
            directory=Path(directory) if directory else None,
            file_format=os.environ.get("SPOTLOG_FORMAT", "ndjson").lower(),
            colorize=os.environ.get("SPOTLOG_COLOR", "1").lower() not in _FALSY,
            strict_persistence=os.environ.get("SPOTLOG_STRICT", "0").lower() not in _FALSY
        )


__all__ = [
    "DEFAULT_FILENAME",
    "FILE_FORMATS",
    "LogConfig",
]
