"""Listing row rendering.

Each entry becomes one line: permissions, owner, group, size, timestamp,
icon, name and trailing symbol, separated by single spaces.
"""

import os
from collections.abc import Iterable, Mapping

from rich.console import Console
from rich.text import Text

from myls.listing.models import Category, Entry, Style

SIZE_WIDTH = 10
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def display_name(name: str) -> str:
    """Make a filesystem name printable.

    Bytes that are not valid UTF-8 are shown as backslash escapes
    (e.g. ``bad\\xff.txt``) instead of failing on output.
    """
    return os.fsencode(name).decode("utf-8", errors="backslashreplace")


def format_row(entry: Entry, style: Style) -> Text:
    """Render an entry as a styled line.

    Icon, name and symbol are painted with the category style; the
    metadata columns are plain.

    Args:
        entry: Entry to render.
        style: Style of the entry's category.

    Returns:
        Rich Text holding the line (no trailing newline).
    """
    row = Text(
        f"{entry.mode} {entry.owner} {entry.group} "
        f"{entry.size_bytes:>{SIZE_WIDTH}} "
        f"{entry.modified_at.strftime(TIMESTAMP_FORMAT)} "
    )
    label = f"{display_name(entry.name)} {style.symbol}"
    if style.icon:
        label = f"{style.icon} {label}"
    row.append(label, style=style.color)
    return row


def print_listing(
    entries: Iterable[Entry],
    styles: Mapping[Category, Style],
    console: Console,
) -> None:
    """Print one line per entry.

    Args:
        entries: Entries in display order.
        styles: Category to style mapping (must cover every category).
        console: Console to write to.
    """
    for entry in entries:
        console.print(format_row(entry, styles[entry.category]), soft_wrap=True)
