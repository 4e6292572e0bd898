"""
Display helpers for the demo host.

print_header() and print_palette() write to the shared Rich console, not to the
log sink, because they are meant for a person looking at the terminal rather
than for the log stream.
"""

from importlib.metadata import PackageNotFoundError, version

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .ansi import AnsiColorBackground, AnsiColorText, reset_code
from .console import console
from .logger import ColorfulLogger


def get_version() -> str:
    """Get the installed package version, or "dev" when running from source."""
    try:
        return version("colorful-logger")
    except PackageNotFoundError:
        return "dev"


def print_header(logger: ColorfulLogger):
    """Print a panel describing the logger the demo is about to use."""
    state = "[green]enabled[/green]" if logger.enabled else "[red]disabled[/red]"
    header_text = f"""[bold purple]Colorful Logger[/bold purple] [dim]v{get_version()}[/dim]
[dim]Logger name: {logger.name}[/dim]
[dim]Output: {state}[/dim]"""
    console.print(Panel(header_text, box=box.ROUNDED, expand=False))


def print_palette():
    """Print every foreground color over every background color.

    Rich is given the escape codes through Text.from_ansi, so the preview
    shows the same colors the log sink will produce.
    """
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Foreground")
    for background in AnsiColorBackground:
        table.add_column(background.name.removesuffix("_BACK").lower(), justify="center")

    for color in AnsiColorText:
        cells = [
            Text.from_ansi(f"{color.value}{background.value} ab {reset_code()}")
            for background in AnsiColorBackground
        ]
        table.add_row(color.name.lower(), *cells)

    console.print(table)
