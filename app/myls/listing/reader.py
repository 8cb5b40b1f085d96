"""Directory reader.

Enumerates the top level of a directory and builds a classified Entry
for each child. Symbolic links are not followed: metadata comes from
``lstat`` so a link is listed as a link.
"""

import logging
import os
import stat
import sys
from collections.abc import Callable
from datetime import datetime
from functools import lru_cache
from pathlib import Path

from myls.listing.classifier import classify
from myls.listing.errors import FilesystemError
from myls.listing.filters import is_hidden_name
from myls.listing.models import Entry

logger = logging.getLogger(__name__)

# Shown for owner/group where the platform has no user database
UNKNOWN_IDENTITY = "-"


@lru_cache(maxsize=256)
def _user_name(uid: int) -> str:
    """Resolve a user id to a name, falling back to the numeric id."""
    if sys.platform == "win32":
        return UNKNOWN_IDENTITY
    import pwd

    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


@lru_cache(maxsize=256)
def _group_name(gid: int) -> str:
    """Resolve a group id to a name, falling back to the numeric id."""
    if sys.platform == "win32":
        return UNKNOWN_IDENTITY
    import grp

    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def build_entry(name: str, info: os.stat_result) -> Entry:
    """Build a classified Entry from a name and its ``lstat`` result.

    Args:
        name: Base name of the entry.
        info: Metadata of the entry, without following symlinks.

    Returns:
        Classified Entry.
    """
    mode = stat.filemode(info.st_mode)
    is_dir = stat.S_ISDIR(info.st_mode)

    return Entry(
        name=name,
        category=classify(mode, is_dir, name),
        is_dir=is_dir,
        is_hidden=is_hidden_name(name),
        owner=_user_name(info.st_uid),
        group=_group_name(info.st_gid),
        size_bytes=info.st_size,
        modified_at=datetime.fromtimestamp(info.st_mtime).astimezone(),
        mode=mode,
    )


def read_directory(
    path: Path,
    keep: Callable[[str], bool] | None = None,
) -> list[Entry]:
    """Read the top-level entries of a directory.

    Entries are returned in filename order. When ``keep`` is given it is
    evaluated on each name before its metadata is read, and rejected
    names are skipped.

    Args:
        path: Directory to list.
        keep: Optional name predicate.

    Returns:
        Classified entries.

    Raises:
        FilesystemError: If the directory or an entry's metadata cannot be read.
    """
    try:
        children = sorted(path.iterdir())
    except OSError as e:
        msg = f"Cannot read directory {path}: {e.strerror or e}"
        raise FilesystemError(msg) from e

    entries: list[Entry] = []
    for child in children:
        if keep is not None and not keep(child.name):
            continue
        try:
            info = child.lstat()
        except OSError as e:
            msg = f"Cannot read metadata of {child}: {e.strerror or e}"
            raise FilesystemError(msg) from e
        entries.append(build_entry(child.name, info))

    logger.debug("Read %d of %d entries from %s", len(entries), len(children), path)
    return entries
