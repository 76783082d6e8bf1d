"""
Internal diagnostics logger for spotlog.

Console blocks produced by the public API are written straight to their
stream; this logger only reports on the library's own plumbing.
"""

import logging
import sys


LOGGER_NAME = "spotlog"


def _build_logger() -> logging.Logger:
    internal = logging.getLogger(LOGGER_NAME)

    # Attach the handler only once, even if the module is reloaded
    if not any(getattr(h, "_spotlog", False) for h in internal.handlers):
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
        handler._spotlog = True
        internal.addHandler(handler)

    internal.setLevel(logging.INFO)
    internal.propagate = False
    return internal


logger = _build_logger()


__all__ = [
    "LOGGER_NAME",
    "logger",
]
