import sys

from .ansi import AnsiColorBackground, AnsiColorText
from .config import DEBUG, LOG_FORMAT, LOGGER_NAME
from .console import console
from .errors import ColorfulLoggerError
from .registry import get_instance
from .sink import configure_sink
from .snippets import generating_snippet, initializing_snippet, registering_snippet
from .theme import error, heading, paragraph
from .utils import print_header, print_palette


def run_demo():
    """Emit one example of every message family through the shared logger."""
    heading(" Colorful Logger demo ")
    paragraph("Plain paragraph text in the paragraph color.")

    initializing_snippet("Blocks", False, AnsiColorText.BRIGHT_CYAN, AnsiColorBackground.BLACK_BACK)
    registering_snippet("Block", "mymod:stone", False, AnsiColorText.GREEN)
    registering_snippet("Block", "mymod:stone_slab", True, AnsiColorText.GREEN)

    initializing_snippet(
        "Data Generation", True, AnsiColorText.BRIGHT_CYAN, AnsiColorBackground.BLACK_BACK
    )
    for as_pool_child in (False, True):
        for only_on_datagen in (False, True):
            generating_snippet(
                "Recipe",
                as_pool_child,
                only_on_datagen,
                AnsiColorText.CYAN,
                AnsiColorBackground.BLACK_BACK,
            )

    error("Example error line.")


def main():
    # Host startup: create the shared logger first so a bad name fails before any
    # logging state is touched, then give its sink a console handler.
    try:
        logger = get_instance(LOGGER_NAME, DEBUG)
        configure_sink(logger.name, LOG_FORMAT)
    except ColorfulLoggerError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    print_header(logger)
    print_palette()

    if not logger.enabled:
        console.print(
            "[yellow]Output is disabled (COLORFUL_LOGGER_DEBUG=false); nothing will be logged.[/yellow]"
        )
    run_demo()


if __name__ == "__main__":
    main()
