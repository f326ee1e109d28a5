"""Plain text size report."""

import locale
from typing import Callable, Optional

from humanize import i18n, intcomma
from rich.console import Console

from ..common.logging import get_logger
from ..detector.models import ScanTotals, SizeGroup
from ..detector.size_index import SizeIndex

logger = get_logger(__name__)

# Formats an integer with digit grouping
NumberFormatter = Callable[[int], str]


def grouped(value: int) -> str:
    """Format an integer with the active locale's thousands separator."""
    return intcomma(value)


class Reporter:
    """Writes size groups and the summary line to a console."""

    def __init__(
        self,
        console: Console,
        formatter: Optional[NumberFormatter] = None,
    ) -> None:
        """Initialize reporter.

        Args:
            console: Console for the primary output
            formatter: Integer formatter (default: locale digit grouping)
        """
        self.console = console
        self.formatter = formatter or grouped

    def _line(self, text: str = "") -> None:
        # raw write: rich rendering would expand tabs and drop control characters
        self.console.file.write(f"{text}\n")

    def write_group(self, group: SizeGroup) -> None:
        """Write one size group: blank line, header, indented paths."""
        fmt = self.formatter
        self._line()
        self._line(f"Size {fmt(group.size)} bytes has {fmt(group.count)} files:")
        for path in group.paths:
            self._line(f"  {path}")

    def write_groups(self, index: SizeIndex, totals: ScanTotals) -> int:
        """Write every size group with more than one file.

        Args:
            index: Filled size index
            totals: Counters; ``same`` grows by each group's file count

        Returns:
            Number of groups written
        """
        written = 0
        for group in index.groups():
            self.write_group(group)
            totals.same += group.count
            written += 1

        logger.debug(
            f"Wrote {written} of {len(index)} size groups "
            f"({totals.same} of {index.file_count} distinct files)"
        )
        return written

    def write_summary(self, totals: ScanTotals) -> None:
        """Write the final summary line."""
        fmt = self.formatter
        self._line()
        self._line(
            f"Found {fmt(totals.same)} files with same size from "
            f"{fmt(totals.files)} files in {fmt(totals.folders)} folders."
        )
        self.console.file.flush()


def process_locale() -> Optional[str]:
    """Numeric locale chosen by the environment (LC_ALL, LC_NUMERIC, LANG).

    The process locale is left as it was.
    """
    previous = locale.setlocale(locale.LC_NUMERIC)
    try:
        locale.setlocale(locale.LC_NUMERIC, "")
        name, _ = locale.getlocale(locale.LC_NUMERIC)
    except (locale.Error, ValueError) as e:
        logger.debug(f"No usable numeric locale in the environment: {e}")
        return None
    finally:
        locale.setlocale(locale.LC_NUMERIC, previous)
    return name


def activate_locale(name: Optional[str], warn: bool = True) -> bool:
    """Switch digit grouping to the conventions of ``name``.

    Args:
        name: humanize locale name such as ``de_DE``, or None for the default
        warn: Log a warning (rather than a debug line) if it is not available

    Returns:
        True if the locale is active, False if it is not available
    """
    if not name:
        return False
    try:
        i18n.activate(name)
    except FileNotFoundError:
        log = logger.warning if warn else logger.debug
        log(f"Number locale not available, using default: {name}")
        return False
    return True
