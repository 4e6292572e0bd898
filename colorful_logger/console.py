"""
Shared Rich Console singleton for human-facing terminal output.

Log lines go through the `logging` sink (see sink.py). Everything else the
package prints for a person to read, such as config warnings, the demo header
and the palette preview, goes through this one Console so tests can mock it in
a single place.

Usage:
    from .console import console
    console.print("[yellow]Warning: ...[/yellow]")
"""

from rich.console import Console

console = Console()
