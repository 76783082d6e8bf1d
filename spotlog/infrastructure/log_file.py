"""
Log file discovery, creation and append-only persistence.
"""

import glob
import json
import os
import threading
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..models import LogConfig, LogRecord
from .error_handler import (
    LogFileNotFoundError,
    WorkingDirectoryError,
    handle_io_error,
)
from .logger import logger


# Guards the open-append-close sequence across threads of this process
_write_lock = threading.Lock()


def resolve_directory(config: Optional[LogConfig] = None) -> Path:
    """Directory holding the log file: configured, or the working directory."""

    config = config or LogConfig()
    if config.directory is not None:
        return config.directory

    try:
        return Path(os.getcwd())
    except OSError as e:
        raise WorkingDirectoryError("Unable to get working directory", e) from e


def find_log_file(config: Optional[LogConfig] = None) -> Path:
    """
    Locate the log file.

    Returns:
        Path of the single matching file

    Raises:
        LogFileNotFoundError: If no file, or more than one, matches
        WorkingDirectoryError: If the working directory is inaccessible
    """
    config = config or LogConfig()
    directory = resolve_directory(config)

    matches = [
        path for path in directory.glob(glob.escape(config.filename))
        if path.is_file()
    ]
    if not matches:
        raise LogFileNotFoundError(f"Log file {config.filename} not found in {directory}")
    if len(matches) > 1:
        raise LogFileNotFoundError(
            f"Ambiguous log file {config.filename} in {directory}: {len(matches)} matches"
        )

    logger.debug(f"Found log file {matches[0]}")
    return matches[0]


@handle_io_error("create the log file")
def start_log_file(config: Optional[LogConfig] = None) -> Path:
    """Create the log file empty if absent and return its path."""

    config = config or LogConfig()
    path = resolve_directory(config) / config.filename

    fd = os.open(path, os.O_CREAT | os.O_APPEND | os.O_WRONLY, 0o600)
    os.close(fd)

    logger.debug(f"Log file ready at {path}")
    return path


@handle_io_error("serialize the log record")
def serialize_record(record: LogRecord, file_format: str = "ndjson") -> str:
    """
    Encode a record for appending.

    ``ndjson`` yields one compact line; ``concatenated`` yields an indented
    object with no separator, to be appended right after the previous one.
    """
    if file_format == "ndjson":
        return json.dumps(record.to_dict(), ensure_ascii=False) + "\n"
    if file_format == "concatenated":
        return json.dumps(record.to_dict(), ensure_ascii=False, indent=1)
    raise ValueError(f"Invalid file_format: {file_format}")


@handle_io_error("write to the log file")
def _append(path: Path, payload: str) -> None:
    fd = os.open(path, os.O_CREAT | os.O_APPEND | os.O_WRONLY, 0o600)
    with os.fdopen(fd, "a", encoding="utf-8") as handle:
        handle.write(payload)


def persist(record: LogRecord, config: Optional[LogConfig] = None) -> Path:
    """
    Append a record to the log file, creating the file if needed.

    Args:
        record: Record to store
        config: Log configuration (file name, directory, format)

    Returns:
        Path of the file written to

    Raises:
        WorkingDirectoryError, LogFileError, SerializationError
    """
    config = config or LogConfig()
    payload = serialize_record(record, config.file_format)

    with _write_lock:
        try:
            path = find_log_file(config)
        except LogFileNotFoundError:
            path = start_log_file(config)

        _append(path, payload)

    logger.debug(f"Persisted {config.file_format} record to {path}")
    return path


@handle_io_error("read the log file")
def read_records(path: Union[str, Path]) -> List[Dict[str, object]]:
    """Parse every record in a log file, whichever format wrote it."""

    text = Path(path).read_text(encoding="utf-8")
    decoder = json.JSONDecoder()

    records = []
    index = 0
    while True:
        while index < len(text) and text[index].isspace():
            index += 1
        if index >= len(text):
            break
        obj, index = decoder.raw_decode(text, index)
        records.append(obj)

    return records


__all__ = [
    "resolve_directory",
    "find_log_file",
    "start_log_file",
    "serialize_record",
    "persist",
    "read_records",
]
