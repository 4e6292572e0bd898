"""
Pre-formatted lifecycle messages: initializing, registering, generating.

Each family has a pure format_*() function that builds the line, and an
*_snippet() function that builds it and emits it in color. The flags are
independent switches; every combination is legal and maps to exactly one
layout. When both suffixes apply, the pool-child suffix comes first.

The emitting functions use the shared logger from the registry unless a
logger is passed explicitly. Without either, UninitializedAccessError
propagates to the caller.
"""

from .ansi import AnsiColorBackground, AnsiColorText
from .logger import ColorfulLogger
from .registry import resolve

ONLY_ON_DATAGEN = "(Only called on task '[runDatagen]')"
AS_POOL_CHILD = "(as Pool Child)"


def format_initializing(initialization_target: str, only_on_datagen: bool) -> str:
    if only_on_datagen:
        return f" >> Initializing: {initialization_target} {ONLY_ON_DATAGEN} "
    return f" >> Initializing: {initialization_target} "


def format_registering(registration_target: str, identifier_path: str, as_pool_child: bool) -> str:
    """Registration lines are tab-indented under their initializing header.

    Pool children use a single '>' and carry the pool-child suffix.
    """
    if as_pool_child:
        return f"\t\t> Registering {registration_target} {identifier_path}: {AS_POOL_CHILD}"
    return f"\t\t>> Registering {registration_target}: {identifier_path}"


def format_generating(generation_target: str, as_pool_child: bool, only_on_datagen: bool) -> str:
    suffixes = []
    if as_pool_child:
        suffixes.append(AS_POOL_CHILD)
    if only_on_datagen:
        suffixes.append(ONLY_ON_DATAGEN)
    if not suffixes:
        return f" >> Generating {generation_target}"
    return f" >> Generating {generation_target} {' '.join(suffixes)} "


def initializing_snippet(
    initialization_target: str,
    only_on_datagen: bool,
    color_text: AnsiColorText,
    color_background: AnsiColorBackground,
    logger: ColorfulLogger | None = None,
):
    resolve(logger).info(
        format_initializing(initialization_target, only_on_datagen),
        color_text,
        color_background,
    )


def registering_snippet(
    registration_target: str,
    identifier_path: str,
    as_pool_child: bool,
    color_text: AnsiColorText,
    logger: ColorfulLogger | None = None,
):
    resolve(logger).info(
        format_registering(registration_target, identifier_path, as_pool_child),
        color_text,
    )


def generating_snippet(
    generation_target: str,
    as_pool_child: bool,
    only_on_datagen: bool,
    color_text: AnsiColorText,
    color_background: AnsiColorBackground,
    logger: ColorfulLogger | None = None,
):
    resolve(logger).info(
        format_generating(generation_target, as_pool_child, only_on_datagen),
        color_text,
        color_background,
    )
