"""Shared pytest fixtures."""

import io
import logging
from pathlib import Path
from typing import Iterator

import pytest
from humanize import i18n
from rich.console import Console

from samesize.common.logging import ROOT_LOGGER
from samesize.config.settings import reset_settings
from samesize.detector.size_index import SizeIndex


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep each test independent of the environment."""
    for name in ("SAMESIZE_LOG_LEVEL", "SAMESIZE_LOG_FILE", "SAMESIZE_NUMBER_LOCALE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LC_ALL", "C")
    reset_settings()


@pytest.fixture(autouse=True)
def fresh_logging_and_locale() -> Iterator[None]:
    """Undo setup_logging and humanize locale changes after each test."""
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    i18n.deactivate()


@pytest.fixture
def index() -> SizeIndex:
    """Create an empty size index."""
    return SizeIndex()


@pytest.fixture
def buffer_console() -> Console:
    """Console writing plain text into memory."""
    return Console(file=io.StringIO(), width=40, color_system=None)


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Folder A with x.txt and y.txt (5 bytes) and z.txt (9 bytes)."""
    folder = tmp_path / "A"
    folder.mkdir()
    (folder / "x.txt").write_bytes(b"12345")
    (folder / "y.txt").write_bytes(b"abcde")
    (folder / "z.txt").write_bytes(b"123456789")
    return folder


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """Folder with a top-level file and a subfolder holding same-size files."""
    root = tmp_path / "root"
    sub = root / "sub"
    sub.mkdir(parents=True)
    (root / "top.txt").write_bytes(b"1234")
    (sub / "a.txt").write_bytes(b"abcd")
    (sub / "b.txt").write_bytes(b"wxyz")
    return root
