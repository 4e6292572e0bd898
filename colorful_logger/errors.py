"""
Error types and error-message snippets for Colorful Logger.

Every error raised by this package is immediate and synchronous. Nothing here
retries, and nothing swallows: a failure aborts the single logging call that
caused it and is surfaced to the host application.

Two failure classes exist:
  - PreconditionError: a caller handed us something unusable (a None message,
    a None logger name, an object that is not an ANSI color member).
  - UninitializedAccessError: somebody asked for the shared logger before the
    host created it. This is a startup-ordering bug in the host, not a
    transient condition.

The *_snippet() builders produce the bracketed one-line messages used in those
errors. They are public so host code can report its own precondition failures
in the same shape.
"""


class ColorfulLoggerError(Exception):
    """Base class for all errors raised by colorful_logger."""


class PreconditionError(ColorfulLoggerError, ValueError):
    """Raised when an argument violates a call-boundary precondition."""


class UninitializedAccessError(ColorfulLoggerError, RuntimeError):
    """Raised when the shared logger is accessed before it was created."""


def non_null_param_snippet(param: str, method: str, output_type: str = "ERROR") -> str:
    """Message for a parameter that must not be None."""
    return f"[{output_type}]: Parameter '{param}' must not be null when calling '@{method}'."


def non_null_get_snippet(target: str, method: str, output_type: str = "ERROR") -> str:
    """Message for a target instance that must exist before it is read."""
    return f"[{output_type}]: Target instance of '@{target}' must not be null when calling '@{method}'."


def key_already_exists_snippet(argument: str, instance: str, target: str) -> str:
    return (
        f"[KeyAlreadyExistsException]: Target instance of '@{instance}' "
        f"must not '{argument}' when adding to '@{target}'."
    )


def illegal_argument_snippet(argument: str, instance: str, method: str) -> str:
    return (
        f"[IllegalArgumentException]: Target instance of '@{instance}' "
        f"must not '{argument}' when calling '@{method}'."
    )


def assertion_snippet(argument: str, instance: str, method: str) -> str:
    return (
        f"[AssertionError]: Target instance of '@{instance}' "
        f"cannot be '{argument}'. Error caught at '@{method}'."
    )
