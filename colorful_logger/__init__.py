"""Colorful Logger - ANSI-colored console logging with lifecycle message snippets"""

from .ansi import (
    AnsiColor,
    AnsiColorBackground,
    AnsiColorText,
    background_code,
    foreground_code,
    reset_code,
)
from .errors import (
    ColorfulLoggerError,
    PreconditionError,
    UninitializedAccessError,
    assertion_snippet,
    illegal_argument_snippet,
    key_already_exists_snippet,
    non_null_get_snippet,
    non_null_param_snippet,
)
from .logger import ColorfulLogger
from .registry import current, get_instance, is_initialized, resolve
from .sink import configure_sink
from .snippets import (
    AS_POOL_CHILD,
    ONLY_ON_DATAGEN,
    format_generating,
    format_initializing,
    format_registering,
    generating_snippet,
    initializing_snippet,
    registering_snippet,
)
from .theme import (
    COLOR_BACKGROUND_HEADING,
    COLOR_TEXT_ERROR,
    COLOR_TEXT_HEADING,
    COLOR_TEXT_PARAGRAPH,
    error,
    heading,
    paragraph,
)

__all__ = [
    # ANSI
    "AnsiColor",
    "AnsiColorBackground",
    "AnsiColorText",
    "background_code",
    "foreground_code",
    "reset_code",
    # Errors
    "ColorfulLoggerError",
    "PreconditionError",
    "UninitializedAccessError",
    "assertion_snippet",
    "illegal_argument_snippet",
    "key_already_exists_snippet",
    "non_null_get_snippet",
    "non_null_param_snippet",
    # Logger
    "ColorfulLogger",
    # Registry
    "current",
    "get_instance",
    "is_initialized",
    "resolve",
    # Sink
    "configure_sink",
    # Snippets
    "AS_POOL_CHILD",
    "ONLY_ON_DATAGEN",
    "format_generating",
    "format_initializing",
    "format_registering",
    "generating_snippet",
    "initializing_snippet",
    "registering_snippet",
    # Theme
    "COLOR_BACKGROUND_HEADING",
    "COLOR_TEXT_ERROR",
    "COLOR_TEXT_HEADING",
    "COLOR_TEXT_PARAGRAPH",
    "error",
    "heading",
    "paragraph",
]
