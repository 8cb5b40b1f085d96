"""Entry ordering by name, size or modification time.

A single comparator parameterized by a direction flag is applied to
whichever key is active. Sorting is stable, so entries with equal keys
keep their enumeration order in both directions.
"""

import logging
from collections.abc import Callable
from functools import cmp_to_key
from typing import Any

from myls.listing.models import Entry, SortKey

logger = logging.getLogger(__name__)

SORT_KEYS: dict[SortKey, Callable[[Entry], Any]] = {
    SortKey.NAME: lambda e: e.name.lower(),
    SortKey.SIZE: lambda e: e.size_bytes,
    SortKey.TIME: lambda e: e.mtime_seconds,
}


def compare(left: Any, right: Any, reverse: bool = False) -> int:
    """Compare two key values in the requested direction.

    Args:
        left: First key value.
        right: Second key value.
        reverse: If True, larger values order first.

    Returns:
        -1 if ``left`` orders first, 1 if ``right`` does, 0 if equal.
    """
    before = left > right if reverse else left < right
    if before:
        return -1
    after = right > left if reverse else right < left
    if after:
        return 1
    return 0


def sort_entries(
    entries: list[Entry],
    key: SortKey = SortKey.NAME,
    reverse: bool = False,
) -> list[Entry]:
    """Return entries ordered by one key.

    Args:
        entries: Entries to order.
        key: Sort key.
        reverse: Invert the direction.

    Returns:
        New list ordered stably by the key.
    """
    key_func = SORT_KEYS[key]
    logger.debug("Sorting %d entries by %s (reverse=%s)", len(entries), key.value, reverse)
    return sorted(
        entries,
        key=cmp_to_key(lambda a, b: compare(key_func(a), key_func(b), reverse)),
    )
