"""
Process-wide shared ColorfulLogger.

The host application creates the shared logger once at startup:

    from colorful_logger import get_instance
    get_instance("mymod", enabled=True)

and every other module reaches the same instance with `current()`, without a
reference being threaded through each call site.

Lifecycle rules:
  - The first successful get_instance() call creates the logger. Later calls
    return that same object and ignore their arguments (first writer wins).
  - Creation happens inside a lock, so concurrent first calls still build
    exactly one instance.
  - A call that fails its precondition leaves the registry uninitialized, so
    a later valid call can still succeed.
  - current() before any successful get_instance() raises
    UninitializedAccessError.
"""

import threading

from .errors import UninitializedAccessError, non_null_get_snippet
from .logger import ColorfulLogger

_INSTANCE: ColorfulLogger | None = None
_LOCK = threading.Lock()


def get_instance(name: str, enabled: bool = True) -> ColorfulLogger:
    """Return the shared logger, creating it on the first call."""
    global _INSTANCE
    with _LOCK:
        if _INSTANCE is None:
            # The constructor validates name; a failure leaves _INSTANCE as None.
            _INSTANCE = ColorfulLogger(name, enabled)
        return _INSTANCE


def current() -> ColorfulLogger:
    """Return the shared logger or raise UninitializedAccessError."""
    with _LOCK:
        if _INSTANCE is None:
            raise UninitializedAccessError(
                non_null_get_snippet("ColorfulLogger", "registry.current()")
                + " Call '@registry.get_instance(str, bool)' first."
            )
        return _INSTANCE


def is_initialized() -> bool:
    return _INSTANCE is not None


def resolve(logger: ColorfulLogger | None = None) -> ColorfulLogger:
    """Return `logger` when one is passed explicitly, otherwise the shared one."""
    return logger if logger is not None else current()


def _clear_instance():
    """Drop the shared logger. Test suite only."""
    global _INSTANCE
    with _LOCK:
        _INSTANCE = None
