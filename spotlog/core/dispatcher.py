"""
Severity dispatch: color a rendered block, print it, then continue,
terminate the process or abort.
"""

import os
import sys
from typing import Callable, Dict, Optional, TextIO

from colorama import Fore, Style, just_fix_windows_console

from ..models import Action, Severity
from ..infrastructure.error_handler import PanicAbort
from ..infrastructure.logger import logger


just_fix_windows_console()



####
##      SEVERITY TABLES
#####
SEVERITY_COLORS: Dict[Severity, str] = {
    Severity.SUCCESS: Fore.GREEN,
    Severity.INFO: Fore.BLUE,
    Severity.WARNING: Fore.YELLOW,
    Severity.ERROR: Fore.YELLOW,
    Severity.FATAL: Fore.MAGENTA,
    Severity.PANIC: Fore.RED,
    Severity.DEFAULT: "",
}

# Color of purely informational blocks (simple and message logs)
PLAIN_COLOR = Fore.CYAN

SEVERITY_ACTIONS: Dict[Severity, Action] = {
    Severity.FATAL: Action.TERMINATE,
    Severity.PANIC: Action.ABORT,
}

FATAL_EXIT_STATUS = 1


def flush_standard_streams() -> None:
    """Flush stdout and stderr, skipping streams that are closed or gone."""

    for stream in (sys.stdout, sys.stderr):
        if stream is None:
            continue
        try:
            stream.flush()
        except (OSError, ValueError):
            pass


####
##      SEVERITY DISPATCHER
#####
class SeverityDispatcher:
    """
    One-shot severity state machine.

    Each call is independent: the action depends only on the label, and the
    color chosen never changes the action.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        colorize: bool = True,
        exit_process: Optional[Callable[[int], None]] = None
    ):
        self._stream = stream
        self.colorize = colorize
        self._exit_process = exit_process or os._exit

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    @staticmethod
    def action_for(label: Optional[str]) -> Action:
        return SEVERITY_ACTIONS.get(Severity.classify(label), Action.CONTINUE)

    def paint(self, text: str, label: Optional[str], color: Optional[str] = None) -> str:
        """Wrap text in the ANSI color of its class, or in an explicit color."""

        if not self.colorize:
            return text

        code = color if color is not None else SEVERITY_COLORS[Severity.classify(label)]
        if not code:
            return text
        return f"{code}{text}{Style.RESET_ALL}"

    def emit(self, text: str) -> None:
        stream = self.stream
        stream.write(text)
        stream.flush()

    def dispatch(self, label: Optional[str], text: str, color: Optional[str] = None) -> Action:
        """
        Print a rendered block and carry out the action of its class.

        Args:
            label: Status or class label, matched case-insensitively
            text: Rendered block
            color: Explicit color overriding the class color

        Returns:
            The action taken; TERMINATE is only returned when an injected
            exit hook does not end the process

        Raises:
            PanicAbort: For panic-classed labels, after printing
        """
        action = self.action_for(label)
        self.emit(self.paint(text, label, color))

        if action is Action.TERMINATE:
            logger.debug(f"Terminating process after {label!r} log")
            # os._exit skips interpreter shutdown, so buffered host output goes first
            flush_standard_streams()
            self._exit_process(FATAL_EXIT_STATUS)
        elif action is Action.ABORT:
            raise PanicAbort(text)

        return action


__all__ = [
    "SEVERITY_COLORS",
    "PLAIN_COLOR",
    "SEVERITY_ACTIONS",
    "FATAL_EXIT_STATUS",
    "flush_standard_streams",
    "SeverityDispatcher",
]
