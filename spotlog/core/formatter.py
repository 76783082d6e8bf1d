"""
Text rendering of log records.
"""

from enum import Enum
from typing import Dict, FrozenSet, List, Tuple

from ..models import LogRecord
from ..models.record import OPTIONAL_FIELDS


class Template(Enum):
    """Layouts selected from the optional fields a record carries."""

    MINIMAL = "minimal"
    STATUS = "status"
    MESSAGE = "message"
    FAULT = "fault"
    PARTIAL = "partial"     # Any two optional fields
    COMPLETE = "complete"


FIELD_LABELS: Tuple[Tuple[str, str], ...] = (
    ("file", "File"),
    ("line", "Line"),
    ("timestamp", "Timestamp"),
    ("status", "Status"),
    ("message", "Message"),
    ("fault", "Fault"),
)

_TEMPLATES: Dict[FrozenSet[str], Template] = {
    frozenset(): Template.MINIMAL,
    frozenset({"status"}): Template.STATUS,
    frozenset({"message"}): Template.MESSAGE,
    frozenset({"fault"}): Template.FAULT,
    frozenset(OPTIONAL_FIELDS): Template.COMPLETE,
}


class RecordFormatter:
    """
    Renders records as human-readable blocks.

    Every template lists the mandatory fields first, then each non-empty
    optional field in the order status, message, fault. Blocks open and close
    with a newline so consecutive blocks are separated by a blank line.
    """

    def select_template(self, record: LogRecord) -> Template:
        return _TEMPLATES.get(record.populated_fields(), Template.PARTIAL)

    def fields_for(self, record: LogRecord) -> List[Tuple[str, str]]:
        """Label/value pairs that the record's template displays."""

        populated = record.populated_fields()
        return [
            (label, str(getattr(record, name)))
            for name, label in FIELD_LABELS
            if name not in OPTIONAL_FIELDS or name in populated
        ]

    def render(self, record: LogRecord) -> str:
        lines = [f"{label}: {value}" for label, value in self.fields_for(record)]
        return "\n" + "\n".join(lines) + "\n"


_default_formatter = RecordFormatter()


def select_template(record: LogRecord) -> Template:
    return _default_formatter.select_template(record)


def render(record: LogRecord) -> str:
    """Render a record with the default formatter."""
    return _default_formatter.render(record)


__all__ = [
    "Template",
    "FIELD_LABELS",
    "RecordFormatter",
    "select_template",
    "render",
]
