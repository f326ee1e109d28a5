"""Local filesystem traversal."""

import os
from pathlib import Path
from typing import Optional, Union

from ..common.logging import get_logger
from ..detector.models import EntryKind, FileRecord, ScanTotals, classify
from ..detector.size_index import SizeIndex

logger = get_logger(__name__)


def canonical_path(path: Path) -> str:
    """Absolute, symlink-free form of ``path``, or the path as given."""
    try:
        return str(path.resolve(strict=True))
    except (OSError, RuntimeError) as e:
        logger.debug(f"Using path as given for {path}: {e}")
        return str(path)


class Traverser:
    """Walks files and folders depth first, feeding a size index."""

    def __init__(
        self,
        index: SizeIndex,
        recursive: bool = True,
        totals: Optional[ScanTotals] = None,
    ) -> None:
        """Initialize traverser.

        Args:
            index: Size index that receives every regular file found
            recursive: If True, descend into subfolders
            totals: Counters shared with the report (new ones if omitted)
        """
        self.index = index
        self.recursive = recursive
        self.totals = totals if totals is not None else ScanTotals()

    def visit(self, path: Union[str, Path]) -> None:
        """Scan a file or folder given by the user.

        Args:
            path: File or folder path
        """
        path = Path(path)
        kind = classify(path)

        if kind is EntryKind.DIRECTORY:
            self._scan_folder(path, frozenset())
        elif kind is EntryKind.FILE:
            self._record_file(path)
        else:
            logger.warning(f"Not a file or folder: {path}")

    def _scan_folder(self, folder: Path, ancestors: frozenset[str]) -> None:
        canonical = canonical_path(folder)
        if canonical in ancestors:
            logger.warning(f"Folder cycle skipped: {folder}")
            return

        self.totals.folders += 1
        logger.info(f"Scanning folder: {folder}")

        try:
            contents = list(folder.iterdir())
        except OSError as e:
            logger.warning(f"Protected folder: {folder} ({e.strerror or e})")
            contents = []

        branch = ancestors | {canonical}
        for entry in contents:
            kind = classify(entry)
            if kind is EntryKind.DIRECTORY:
                if self.recursive:
                    self._scan_folder(entry, branch)
                else:
                    logger.info(f"Ignoring subfolder: {entry}")
            elif kind is EntryKind.FILE:
                self._record_file(entry)
            # anything else has vanished or is not a regular file

    def _record_file(self, path: Path) -> None:
        self.totals.files += 1
        try:
            record = FileRecord.from_path(path, canonical_path(path))
        except OSError as e:
            logger.warning(f"Cannot read file size: {path} ({e.strerror or e})")
            return
        self.index.add(record)
        logger.debug(f"Recorded {record.size} bytes: {record.path}")
