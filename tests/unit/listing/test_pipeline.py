"""Tests for the end-to-end listing pipeline."""

from pathlib import Path
from unittest.mock import patch

import pytest
from myls.listing.errors import ConfigurationError, FilesystemError
from myls.listing.filters import accepts_name
from myls.listing.models import ListOptions, SortKey
from myls.listing.pipeline import list_directory


def _names(path: Path, options: ListOptions | None = None) -> list[str]:
    return [e.name for e in list_directory(path, options)]


class TestListDirectory:
    """Tests for list_directory()."""

    def test_default_invocation(self, sample_dir: Path) -> None:
        """Hidden entries are skipped and names sort case-folded."""
        assert _names(sample_dir) == ["a.txt", "B.png"]

    def test_all_by_size(self, sample_dir: Path) -> None:
        """-a -s lists hidden entries, smallest first."""
        options = ListOptions.from_flags(show_all=True, by_size=True)
        assert _names(sample_dir, options) == [".hidden", "B.png", "a.txt"]

    def test_time_reversed(self, sample_dir: Path) -> None:
        """-t -r lists newest first."""
        options = ListOptions.from_flags(by_time=True, reverse=True)
        assert _names(sample_dir, options) == ["B.png", "a.txt"]

    def test_all_by_time(self, sample_dir: Path) -> None:
        """-a -t lists oldest first, hidden included."""
        options = ListOptions(show_all=True, sort_key=SortKey.TIME)
        assert _names(sample_dir, options) == [".hidden", "a.txt", "B.png"]

    def test_time_beats_size(self, sample_dir: Path) -> None:
        """With both -t and -s the time order is used."""
        options = ListOptions.from_flags(by_time=True, by_size=True)
        assert _names(sample_dir, options) == ["a.txt", "B.png"]

    def test_pattern(self, sample_dir: Path) -> None:
        """Pattern keeps matching names only."""
        assert _names(sample_dir, ListOptions(pattern="PNG")) == ["B.png"]

    def test_filters_each_name_once(self, sample_dir: Path) -> None:
        """Every directory name goes through the hidden and pattern check."""
        with patch("myls.listing.pipeline.accepts_name", wraps=accepts_name) as mock_accepts:
            names = _names(sample_dir, ListOptions(pattern="T"))

        checked = sorted(call.args[0] for call in mock_accepts.call_args_list)
        assert checked == [".hidden", "B.png", "a.txt"]
        assert names == ["a.txt"]

    def test_limit_after_sort(self, sample_dir: Path) -> None:
        """The limit applies to the sorted sequence."""
        options = ListOptions(show_all=True, sort_key=SortKey.SIZE, reverse=True, limit=2)
        assert _names(sample_dir, options) == ["a.txt", "B.png"]

    def test_limit_larger_than_listing(self, sample_dir: Path) -> None:
        """A limit beyond the listing length keeps everything."""
        assert _names(sample_dir, ListOptions(limit=10)) == ["a.txt", "B.png"]

    def test_invalid_pattern_fails_before_reading(self, sample_dir: Path) -> None:
        """A bad pattern aborts without touching the filesystem."""
        with (
            patch("myls.listing.pipeline.read_directory") as mock_read,
            pytest.raises(ConfigurationError),
        ):
            list_directory(sample_dir, ListOptions(pattern="(unclosed"))
        mock_read.assert_not_called()

    def test_missing_directory(self, tmp_path: Path) -> None:
        """A missing directory raises FilesystemError."""
        with pytest.raises(FilesystemError):
            list_directory(tmp_path / "nope")
