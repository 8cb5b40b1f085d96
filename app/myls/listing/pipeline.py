"""Listing pipeline.

Reads a directory, filters, sorts and truncates its entries:
read -> classify -> filter -> sort -> limit.
"""

import logging
from pathlib import Path

from myls.listing.filters import accepts_name, apply_limit, compile_pattern
from myls.listing.models import Entry, ListOptions
from myls.listing.reader import read_directory
from myls.listing.sorter import sort_entries

logger = logging.getLogger(__name__)


def list_directory(path: Path, options: ListOptions | None = None) -> list[Entry]:
    """List a directory according to the options.

    The pattern is compiled before the directory is touched, so an invalid
    pattern fails without any filesystem access.

    Args:
        path: Directory to list.
        options: Filtering and ordering options. Defaults to ListOptions().

    Returns:
        Entries in final display order.

    Raises:
        ConfigurationError: If the pattern is invalid.
        FilesystemError: If the directory or an entry cannot be read.
    """
    options = options or ListOptions()
    regex = compile_pattern(options.pattern)

    entries = read_directory(path, keep=lambda name: accepts_name(name, options.show_all, regex))
    logger.debug("Kept %d entries from %s", len(entries), path)

    ordered = sort_entries(entries, options.sort_key, options.reverse)
    return apply_limit(ordered, options.limit)
