"""Entry filtering: hidden files, name pattern and record limit."""

import logging
import re

from myls.listing.errors import ConfigurationError
from myls.listing.models import Entry

logger = logging.getLogger(__name__)


def compile_pattern(pattern: str | None) -> re.Pattern[str] | None:
    """Compile a case-insensitive name pattern.

    Args:
        pattern: Regular expression, or None/empty for no pattern.

    Returns:
        Compiled pattern, or None when no pattern was given.

    Raises:
        ConfigurationError: If the pattern is not a valid regular expression.
    """
    if not pattern:
        return None
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        msg = f"Invalid pattern {pattern!r}: {e}"
        raise ConfigurationError(msg) from e


def is_hidden_name(name: str) -> bool:
    """Check whether a name denotes a hidden entry."""
    return name.startswith(".")


def is_visible(name: str, show_all: bool) -> bool:
    """Check whether a name passes the hidden-file filter."""
    return show_all or not is_hidden_name(name)


def matches(name: str, regex: re.Pattern[str] | None) -> bool:
    """Check whether a name matches the pattern anywhere.

    A missing pattern matches every name.
    """
    return regex is None or regex.search(name) is not None


def accepts_name(name: str, show_all: bool, regex: re.Pattern[str] | None) -> bool:
    """Check whether a name passes both the hidden and pattern filters.

    The listing applies this to each name before its metadata is read.
    """
    return is_visible(name, show_all) and matches(name, regex)


def apply_limit(entries: list[Entry], limit: int) -> list[Entry]:
    """Truncate entries to the first ``limit`` records.

    A limit of 0, or one at least as large as the sequence, keeps everything.
    """
    if limit <= 0 or limit >= len(entries):
        return entries
    logger.debug("Limiting %d entries to %d", len(entries), limit)
    return entries[:limit]
