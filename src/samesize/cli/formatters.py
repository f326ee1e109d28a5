"""Rich consoles for the report and for messages."""

from rich.console import Console

# Report goes to stdout, everything else to stderr
console = Console(highlight=False, emoji=False)
err_console = Console(stderr=True, highlight=False, emoji=False)


def print_error(message: str) -> None:
    """Print error message."""
    err_console.print(message, style="red", markup=False, soft_wrap=True)


def print_text(message: str = "") -> None:
    """Print a plain line to stderr."""
    err_console.print(message, markup=False, soft_wrap=True)
