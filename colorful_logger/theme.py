"""Semantic colors for headings, body text and errors."""

from .ansi import AnsiColorBackground, AnsiColorText
from .logger import ColorfulLogger
from .registry import resolve

COLOR_TEXT_HEADING = AnsiColorText.BRIGHT_CYAN
COLOR_TEXT_PARAGRAPH = AnsiColorText.GREEN
COLOR_BACKGROUND_HEADING = AnsiColorBackground.BLACK_BACK
COLOR_TEXT_ERROR = AnsiColorText.BRIGHT_RED


def heading(message: str, logger: ColorfulLogger | None = None):
    resolve(logger).info(message, COLOR_TEXT_HEADING, COLOR_BACKGROUND_HEADING)


def paragraph(message: str, logger: ColorfulLogger | None = None):
    resolve(logger).info(message, COLOR_TEXT_PARAGRAPH)


def error(message: str, logger: ColorfulLogger | None = None):
    resolve(logger).info(message, COLOR_TEXT_ERROR)
