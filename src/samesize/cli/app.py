"""Main CLI application."""

import sys
from enum import Enum

import click
import typer
from typer.core import TyperCommand

from ..common.constants import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    EXIT_UNKNOWN,
    HELP_WORDS,
    MSWIN_HELP_WORDS,
    MSWIN_RECURSE_OFF_WORDS,
    MSWIN_RECURSE_ON_WORDS,
    PROGRAM_NAME,
    PROGRAM_TITLE,
    RECURSE_OFF_WORDS,
    RECURSE_ON_WORDS,
)
from ..common.exceptions import ConfigError, UsageError
from ..common.logging import get_logger, setup_logging
from ..config.settings import get_settings
from ..detector.models import ScanTotals
from ..detector.size_index import SizeIndex
from ..reporting.reporter import Reporter, activate_locale, process_locale
from ..scanner.traverser import Traverser
from .formatters import console, print_error, print_text

logger = get_logger(__name__)

VERBOSE_OPTION = "--verbose"
WORDS_KEY = "samesize.words"

app = typer.Typer(
    name=PROGRAM_NAME,
    help="Find all files with the same file size",
    add_completion=False,
)

HELP_LINES = [
    "",
    PROGRAM_TITLE,
    "",
    f"  {PROGRAM_NAME}  [options]  fileOrFolderNames",
    "",
    "Options:",
    "  -? = -help = show summary of command-line syntax",
    "  -s0 = do only given files or folders, no subfolders",
    "  -s1 = -s = process files, folders, and subfolders (default)",
    "  --verbose = show debug messages",
    "",
    'Output may be redirected with the ">" operator.',
]


class WordAction(Enum):
    """What one command line word asks for."""

    SKIP = "skip"
    HELP = "help"
    RECURSE_ON = "recurse_on"
    RECURSE_OFF = "recurse_off"
    SCAN = "scan"


def is_mswin() -> bool:
    """True if running on Microsoft Windows."""
    return sys.platform.startswith("win")


def parse_word(word: str, mswin: bool = False) -> WordAction:
    """Decide what a command line word means.

    Options are case-insensitive. On Windows a leading ``/`` also marks an
    option.

    Args:
        word: One command line argument
        mswin: Accept Windows option spellings

    Returns:
        Action for this word

    Raises:
        UsageError: If the word looks like an option but is not one
    """
    lowered = word.lower()
    if not lowered:
        # empty parameters are common when run from scripts
        return WordAction.SKIP
    if lowered in HELP_WORDS or (mswin and lowered in MSWIN_HELP_WORDS):
        return WordAction.HELP
    if lowered in RECURSE_ON_WORDS or (mswin and lowered in MSWIN_RECURSE_ON_WORDS):
        return WordAction.RECURSE_ON
    if lowered in RECURSE_OFF_WORDS or (mswin and lowered in MSWIN_RECURSE_OFF_WORDS):
        return WordAction.RECURSE_OFF
    if lowered.startswith("-") or (mswin and lowered.startswith("/")):
        raise UsageError(word)
    return WordAction.SCAN


def show_help() -> None:
    """Print the help summary to stderr."""
    for line in HELP_LINES:
        print_text(line)


class WordsCommand(TyperCommand):
    """Command that hands its words over untouched, in order.

    Only ``--verbose`` goes through click. Everything else, including a bare
    ``--``, is kept for ``parse_word``.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[WORDS_KEY] = [word for word in args if word != VERBOSE_OPTION]
        options = [word for word in args if word == VERBOSE_OPTION]
        return super().parse_args(ctx, options)


@app.command(
    cls=WordsCommand,
    context_settings={"help_option_names": []},
    options_metavar="[options] fileOrFolderNames",
)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, VERBOSE_OPTION, help="Enable verbose logging"),
) -> None:
    """Find files that have the same size as another file."""
    try:
        settings = get_settings()
    except ConfigError as e:
        print_error(f"Configuration error: {e}")
        raise typer.Exit(EXIT_FAILURE)

    log_level = "DEBUG" if verbose else settings.log_level
    setup_logging(level=log_level, log_file=settings.log_file)
    if settings.number_locale:
        activate_locale(settings.number_locale)
    else:
        activate_locale(process_locale(), warn=False)

    index = SizeIndex()
    totals = ScanTotals()
    traverser = Traverser(index, recursive=True, totals=totals)
    mswin = is_mswin()

    # options apply to the paths that follow them
    for word in ctx.meta.get(WORDS_KEY, []):
        try:
            action = parse_word(word, mswin)
        except UsageError as e:
            print_error(str(e))
            show_help()
            raise typer.Exit(EXIT_FAILURE)

        if action is WordAction.HELP:
            show_help()
            raise typer.Exit(EXIT_UNKNOWN)
        elif action is WordAction.RECURSE_ON:
            traverser.recursive = True
        elif action is WordAction.RECURSE_OFF:
            traverser.recursive = False
        elif action is WordAction.SCAN:
            traverser.visit(word)

    reporter = Reporter(console)
    reporter.write_groups(index, totals)
    reporter.write_summary(totals)

    if totals.found_anything:
        raise typer.Exit(EXIT_SUCCESS)

    logger.debug("No files or folders found")
    show_help()
    raise typer.Exit(EXIT_UNKNOWN)
