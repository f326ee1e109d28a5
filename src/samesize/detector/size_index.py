"""Group files by exact byte size."""

from typing import Iterator

from ..common.constants import MIN_GROUP_COUNT
from .models import FileRecord, SizeGroup


class SizeIndex:
    """Mapping from file size to the set of paths having that size.

    The index is filled during a scan and read once for the report. Paths
    are unique within a bucket, so recording the same file twice has no
    effect.
    """

    def __init__(self) -> None:
        """Initialize an empty index."""
        self._buckets: dict[int, set[str]] = {}

    def __len__(self) -> int:
        return len(self._buckets)

    @property
    def file_count(self) -> int:
        """Number of distinct paths stored."""
        return sum(len(paths) for paths in self._buckets.values())

    def record(self, size: int, path: str) -> None:
        """Add ``path`` to the bucket for ``size``.

        Args:
            size: File size in bytes
            path: Canonical file path

        Raises:
            ValueError: If size is negative
        """
        if size < 0:
            raise ValueError(f"File size cannot be negative: {size}")
        self._buckets.setdefault(size, set()).add(path)

    def add(self, record: FileRecord) -> None:
        """Add a file record to the index."""
        self.record(record.size, record.path)

    def groups(self, min_count: int = MIN_GROUP_COUNT) -> Iterator[SizeGroup]:
        """Yield size groups in ascending size order.

        Args:
            min_count: Smallest bucket to report

        Yields:
            SizeGroup instances with paths in code point order
        """
        for size in sorted(self._buckets):
            paths = self._buckets[size]
            if len(paths) >= min_count:
                yield SizeGroup(size=size, paths=sorted(paths))
