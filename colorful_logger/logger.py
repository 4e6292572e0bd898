"""
ColorfulLogger: ANSI-colored lines on top of a standard `logging` sink.

A ColorfulLogger owns three things:
  - a name, fixed at construction, used to look up the sink
  - a sink, a `logging.Logger` that actually writes the finished line
  - an enabled flag, the only gate on output (there is no per-call level
    filtering; every emission goes out at INFO)

Composition rules:
  info(msg)               -> msg
  info(msg, fg)           -> fg + msg + RESET
  info(msg, fg, bg)       -> fg + bg + msg + RESET

The foreground code always precedes the background code, and every colored
line ends with the reset sequence so color never leaks into the next line.

Instances can be built directly and handed to the components that need them.
For the process-wide shared instance, see registry.py.
"""

import logging

from .ansi import AnsiColorBackground, AnsiColorText, background_code, foreground_code, reset_code
from .errors import PreconditionError, non_null_param_snippet


class ColorfulLogger:
    """Wraps a `logging.Logger` and decorates messages with ANSI colors."""

    def __init__(self, name: str, enabled: bool = True, sink: logging.Logger | None = None):
        if not isinstance(name, str) or not name:
            raise PreconditionError(non_null_param_snippet("name", "ColorfulLogger.__init__"))
        self._name = name
        self._sink = sink if sink is not None else logging.getLogger(name)
        self._enabled = bool(enabled)

    def __repr__(self) -> str:
        return f"ColorfulLogger(name={self._name!r}, enabled={self._enabled})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def sink(self) -> logging.Logger:
        """The underlying logger every enabled call writes to."""
        return self._sink

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool):
        self._enabled = bool(value)

    def is_enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, value: bool):
        self._enabled = bool(value)

    def colorize(
        self,
        message: str,
        color_text: AnsiColorText | None = None,
        color_background: AnsiColorBackground | None = None,
    ) -> str:
        """Build the decorated line without emitting it.

        Raises PreconditionError for a None message, or for a background color
        given without a foreground color.
        """
        if message is None:
            raise PreconditionError(non_null_param_snippet("message", "ColorfulLogger.colorize"))
        if color_text is None:
            if color_background is not None:
                raise PreconditionError(non_null_param_snippet("color_text", "ColorfulLogger.colorize"))
            return message
        if color_background is None:
            return f"{foreground_code(color_text)}{message}{reset_code()}"
        return f"{foreground_code(color_text)}{background_code(color_background)}{message}{reset_code()}"

    def info(
        self,
        message: str,
        color_text: AnsiColorText | None = None,
        color_background: AnsiColorBackground | None = None,
    ):
        """Emit one line at INFO, colored when colors are given.

        Does nothing at all while the logger is disabled. The enabled flag is
        read once per call, so a toggle racing with this call may or may not
        take effect for it.
        """
        if not self._enabled:
            return
        line = self.colorize(message, color_text, color_background)
        # Pass as an argument so '%' in the message is never treated as a format directive.
        self._sink.info("%s", line)
