"""Tests for the size index."""

import pytest

from samesize.detector.models import FileRecord, SizeGroup
from samesize.detector.size_index import SizeIndex


def test_record_creates_buckets(index: SizeIndex) -> None:
    """Test that each distinct size gets a bucket."""
    index.record(5, "/a")
    index.record(5, "/b")
    index.record(9, "/c")

    assert len(index) == 2
    assert index.file_count == 3


def test_record_same_path_twice(index: SizeIndex) -> None:
    """Test that a path is only stored once per bucket."""
    index.record(5, "/a")
    index.record(5, "/a")

    assert list(index.groups(min_count=1)) == [SizeGroup(size=5, paths=["/a"])]
    assert list(index.groups()) == []


def test_add_file_record(index: SizeIndex) -> None:
    """Test adding a FileRecord."""
    index.add(FileRecord(path="/x", size=3))
    index.add(FileRecord(path="/y", size=3))

    assert list(index.groups()) == [SizeGroup(size=3, paths=["/x", "/y"])]


def test_negative_size_rejected(index: SizeIndex) -> None:
    """Test that negative sizes are refused."""
    with pytest.raises(ValueError):
        index.record(-1, "/a")


def test_groups_skip_single_files(index: SizeIndex) -> None:
    """Test that uniquely sized files appear in no group."""
    index.record(1, "/only")
    index.record(2, "/p")
    index.record(2, "/q")

    groups = list(index.groups())

    assert [g.size for g in groups] == [2]
    assert groups[0].count == 2


def test_groups_ascending_size_and_sorted_paths(index: SizeIndex) -> None:
    """Test report order: sizes ascending, paths in code point order."""
    index.record(100, "/z/b")
    index.record(100, "/a/c")
    index.record(0, "/empty2")
    index.record(0, "/empty1")
    index.record(7, "/B")
    index.record(7, "/a")
    index.record(2**40, "/big2")
    index.record(2**40, "/big1")

    groups = list(index.groups())

    assert [g.size for g in groups] == [0, 7, 100, 2**40]
    assert groups[0].paths == ["/empty1", "/empty2"]
    # upper case sorts before lower case
    assert groups[1].paths == ["/B", "/a"]
    assert groups[2].paths == ["/a/c", "/z/b"]


def test_groups_min_count(index: SizeIndex) -> None:
    """Test a custom minimum group size."""
    index.record(4, "/a")
    index.record(4, "/b")
    index.record(8, "/c")
    index.record(8, "/d")
    index.record(8, "/e")

    assert [g.size for g in index.groups(min_count=3)] == [8]
    assert [g.size for g in index.groups(min_count=1)] == [4, 8]


def test_groups_are_repeatable(index: SizeIndex) -> None:
    """Test that reading groups does not change the index."""
    index.record(5, "/b")
    index.record(5, "/a")

    assert list(index.groups()) == list(index.groups())
