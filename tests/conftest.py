"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest
from myls.listing.models import Category, Entry

# Modification times for the sample directory (Unix seconds)
HIDDEN_MTIME = 1_690_000_000
OLDER_MTIME = 1_700_000_000
NEWER_MTIME = 1_700_100_000


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty temp directory outside tmp_path."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


def _write_file(path: Path, size: int, mtime: int) -> None:
    """Create a non-executable file of the given size and mtime."""
    path.write_bytes(b"x" * size)
    path.chmod(0o644)
    os.utime(path, (mtime, mtime))


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """Directory with a.txt (10 B, older), B.png (5 B, newer) and .hidden (1 B)."""
    directory = tmp_path / "sample"
    directory.mkdir()
    _write_file(directory / "a.txt", 10, OLDER_MTIME)
    _write_file(directory / "B.png", 5, NEWER_MTIME)
    _write_file(directory / ".hidden", 1, HIDDEN_MTIME)
    return directory


def make_entry(
    name: str,
    *,
    size: int = 0,
    mtime: float = OLDER_MTIME,
    category: Category = Category.REGULAR,
    mode: str = "-rw-r--r--",
) -> Entry:
    """Create a test Entry with sensible defaults."""
    return Entry(
        name=name,
        category=category,
        is_dir=category == Category.DIRECTORY,
        is_hidden=name.startswith("."),
        owner="alice",
        group="staff",
        size_bytes=size,
        modified_at=datetime.fromtimestamp(mtime, tz=UTC),
        mode=mode,
    )


@pytest.fixture
def entry_factory() -> Callable[..., Entry]:
    """Factory fixture building Entry objects."""
    return make_entry
