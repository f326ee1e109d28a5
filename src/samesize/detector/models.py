"""Data models for files, size groups and scan totals."""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Union


class EntryKind(Enum):
    """What a filesystem entry turned out to be."""

    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"


def classify(path: Union[str, Path]) -> EntryKind:
    """Classify a path as a directory, a regular file, or neither.

    Symlinks are followed, so a link to a folder is a folder and a broken
    link is ``OTHER``.
    """
    path = Path(path)
    try:
        if path.is_dir():
            return EntryKind.DIRECTORY
        if path.is_file():
            return EntryKind.FILE
    except OSError:
        # e.g. no search permission on the parent folder
        pass
    return EntryKind.OTHER


@dataclass(frozen=True)
class FileRecord:
    """A regular file found during a scan."""

    path: str
    size: int

    @classmethod
    def from_path(cls, path: Path, canonical: str) -> "FileRecord":
        """Measure ``path`` and record it under its canonical name."""
        return cls(path=canonical, size=os.stat(path).st_size)


@dataclass(frozen=True)
class SizeGroup:
    """All known files sharing one exact byte size."""

    size: int
    paths: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of files in this group."""
        return len(self.paths)


@dataclass
class ScanTotals:
    """Counters for the summary line."""

    files: int = 0
    folders: int = 0
    same: int = 0

    @property
    def found_anything(self) -> bool:
        """True if at least one file or folder was found."""
        return self.files > 0 or self.folders > 0
