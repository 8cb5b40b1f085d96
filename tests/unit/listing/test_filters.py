"""Tests for hidden, pattern and limit filtering."""

import random
from collections.abc import Callable

import pytest
from myls.listing.errors import ConfigurationError
from myls.listing.filters import (
    accepts_name,
    apply_limit,
    compile_pattern,
    is_visible,
    matches,
)
from myls.listing.models import Entry


class TestCompilePattern:
    """Tests for compile_pattern()."""

    @pytest.mark.parametrize("pattern", [None, ""])
    def test_no_pattern(self, pattern: str | None) -> None:
        """No pattern compiles to None."""
        assert compile_pattern(pattern) is None

    def test_case_insensitive(self) -> None:
        """Compiled pattern ignores case."""
        regex = compile_pattern("readme")
        assert regex is not None
        assert regex.search("README.md")

    def test_invalid_pattern_raises(self) -> None:
        """A malformed regex is a configuration error."""
        with pytest.raises(ConfigurationError, match="Invalid pattern"):
            compile_pattern("(")


class TestHiddenFilter:
    """Tests for is_visible()."""

    def test_hidden_excluded_by_default(self) -> None:
        """.env is hidden unless show_all is set."""
        assert is_visible(".env", show_all=False) is False

    def test_hidden_included_with_show_all(self) -> None:
        """.env is listed with show_all."""
        assert is_visible(".env", show_all=True) is True

    def test_regular_name_visible(self) -> None:
        """Names without a leading dot are always visible."""
        assert is_visible("env", show_all=False) is True


class TestPatternFilter:
    """Tests for matches()."""

    def test_substring_match(self) -> None:
        """Pattern "re" matches README.md and not LICENSE."""
        regex = compile_pattern("re")
        assert matches("README.md", regex) is True
        assert matches("LICENSE", regex) is False

    def test_match_anywhere(self) -> None:
        """Search is not anchored."""
        assert matches("my_notes.txt", compile_pattern("notes")) is True

    def test_regex_anchor(self) -> None:
        """Regex syntax is honoured."""
        regex = compile_pattern(r"\.py$")
        assert matches("main.py", regex) is True
        assert matches("main.pyc", regex) is False

    def test_no_pattern_matches_all(self) -> None:
        """Without a pattern everything matches."""
        assert matches("anything", None) is True


class TestAcceptsName:
    """Tests for accepts_name(), the per-name check run by the listing."""

    def test_combined_filters(self) -> None:
        """Names must pass both the hidden and the pattern filters."""
        names = ["README.md", ".readme", "LICENSE", "src"]
        regex = compile_pattern("re")

        assert [n for n in names if accepts_name(n, False, regex)] == ["README.md"]
        assert [n for n in names if accepts_name(n, True, regex)] == ["README.md", ".readme"]

    def test_no_filters_accept_visible_names(self) -> None:
        """Without a pattern only the hidden check applies."""
        assert accepts_name("src", False, None) is True
        assert accepts_name(".git", False, None) is False
        assert accepts_name(".git", True, None) is True

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_order_independent(self, seed: int) -> None:
        """Shuffling the names does not change which ones are kept."""
        names = ["a.txt", ".env", "b.md", "README", ".git", "core", "Zeta", ".Dev"]
        regex = compile_pattern("[a-e]")
        shuffled = names[:]
        random.Random(seed).shuffle(shuffled)

        forward = {n for n in names if accepts_name(n, True, regex)}
        mixed = {n for n in shuffled if accepts_name(n, True, regex)}
        assert forward == mixed


class TestApplyLimit:
    """Tests for apply_limit()."""

    @pytest.fixture
    def five(self, entry_factory: Callable[..., Entry]) -> list[Entry]:
        """Five entries named e0..e4."""
        return [entry_factory(f"e{i}") for i in range(5)]

    @pytest.mark.parametrize("limit", [0, 5, 6, 100])
    def test_no_truncation(self, five: list[Entry], limit: int) -> None:
        """0 or a limit >= length keeps the whole sequence."""
        assert apply_limit(five, limit) == five

    @pytest.mark.parametrize("limit", [1, 3, 4])
    def test_truncates_to_first_k(self, five: list[Entry], limit: int) -> None:
        """0 < k < length keeps exactly the first k."""
        assert apply_limit(five, limit) == five[:limit]
