"""
ANSI color catalog.

Three closed enumerations map symbolic color names to fixed CSI SGR escape
sequences:

  - AnsiColorText:       foreground colors, codes 30-37 and bright 90-97
  - AnsiColorBackground: background colors, codes 40-47 and bright 100-107
  - AnsiColor:           the reset sequence (code 0) shared by both

Each member's `.value` is the literal escape string. The strings are written
out byte-for-byte rather than computed, so what you read here is exactly what
reaches the terminal.

Usage:
    from colorful_logger.ansi import AnsiColor, AnsiColorText
    print(f"{AnsiColorText.GREEN.value}ok{AnsiColor.RESET.value}")
"""

from enum import Enum

from .errors import PreconditionError, illegal_argument_snippet


class AnsiColor(Enum):
    """The reset sequence. Terminates every colorized line."""

    RESET = "\x1b[0m"


class AnsiColorText(Enum):
    """Foreground (text) colors."""

    BLACK = "\x1b[30m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"
    BRIGHT_BLACK = "\x1b[90m"
    BRIGHT_RED = "\x1b[91m"
    BRIGHT_GREEN = "\x1b[92m"
    BRIGHT_YELLOW = "\x1b[93m"
    BRIGHT_BLUE = "\x1b[94m"
    BRIGHT_MAGENTA = "\x1b[95m"
    BRIGHT_CYAN = "\x1b[96m"
    BRIGHT_WHITE = "\x1b[97m"


class AnsiColorBackground(Enum):
    """Background colors."""

    BLACK_BACK = "\x1b[40m"
    RED_BACK = "\x1b[41m"
    GREEN_BACK = "\x1b[42m"
    YELLOW_BACK = "\x1b[43m"
    BLUE_BACK = "\x1b[44m"
    MAGENTA_BACK = "\x1b[45m"
    CYAN_BACK = "\x1b[46m"
    WHITE_BACK = "\x1b[47m"
    BRIGHT_BLACK_BACK = "\x1b[100m"
    BRIGHT_RED_BACK = "\x1b[101m"
    BRIGHT_GREEN_BACK = "\x1b[102m"
    BRIGHT_YELLOW_BACK = "\x1b[103m"
    BRIGHT_BLUE_BACK = "\x1b[104m"
    BRIGHT_MAGENTA_BACK = "\x1b[105m"
    BRIGHT_CYAN_BACK = "\x1b[106m"
    BRIGHT_WHITE_BACK = "\x1b[107m"


def foreground_code(color: AnsiColorText) -> str:
    """Return the escape string for a foreground color."""
    if not isinstance(color, AnsiColorText):
        raise PreconditionError(
            illegal_argument_snippet(
                "be a non-AnsiColorText value", repr(color), "foreground_code"
            )
        )
    return color.value


def background_code(color: AnsiColorBackground) -> str:
    """Return the escape string for a background color."""
    if not isinstance(color, AnsiColorBackground):
        raise PreconditionError(
            illegal_argument_snippet(
                "be a non-AnsiColorBackground value", repr(color), "background_code"
            )
        )
    return color.value


def reset_code() -> str:
    return AnsiColor.RESET.value
