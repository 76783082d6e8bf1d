"""
Formatting, dispatch and call-site resolution for spotlog.
"""

from .locator import CallerInfo, locate_caller
from .formatter import RecordFormatter, Template, render, select_template
from .dispatcher import PLAIN_COLOR, SEVERITY_COLORS, SeverityDispatcher

__all__ = [
    "CallerInfo",
    "locate_caller",
    "RecordFormatter",
    "Template",
    "render",
    "select_template",
    "PLAIN_COLOR",
    "SEVERITY_COLORS",
    "SeverityDispatcher",
]
