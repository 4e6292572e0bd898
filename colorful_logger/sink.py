"""
Standard-library logging sink for ColorfulLogger.

ColorfulLogger only composes strings; writing them is the job of a plain
`logging.Logger`. configure_sink() gives a named logger one console handler
with a plain Formatter, which passes the escape codes through untouched.
Calling it again for the same name returns the already-configured logger
instead of stacking a second handler.
"""

import logging
import sys
from typing import TextIO

from .config import LOG_FORMAT
from .errors import PreconditionError, non_null_param_snippet

_DATE_FMT = "%H:%M:%S"

# Loggers configured by this module, keyed by name
_configured: dict[str, logging.Logger] = {}


def configure_sink(
    name: str,
    fmt: str = LOG_FORMAT,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Return (or create) the console-backed logger for `name`.

    An empty name would resolve to the root logger, so it is rejected.
    """
    if not isinstance(name, str) or not name:
        raise PreconditionError(non_null_param_snippet("name", "configure_sink"))
    if name in _configured:
        return _configured[name]

    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.propagate = False  # Avoid duplicate lines from the root logger

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=_DATE_FMT))
    logger.addHandler(handler)

    _configured[name] = logger
    return logger
