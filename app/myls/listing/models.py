"""Listing domain models.

This module defines the data structures that flow through the listing
pipeline: the file-type category of an entry, the entry itself, the
display style attached to a category, and the options that drive
filtering and ordering.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """File-type category of a listed entry.

    Every entry carries exactly one category, assigned once when the
    entry is built.

    Attributes:
        REGULAR: Plain file matching no other category.
        DIRECTORY: Directory.
        EXECUTABLE: File with an executable bit (or ``.exe`` on Windows).
        ARCHIVE: Compressed or packaged file (zip, gz, tar, rar, deb).
        IMAGE: Image file (png, jpg, jpeg, gif).
        LINK: Symbolic link.
    """

    REGULAR = "regular"
    DIRECTORY = "directory"
    EXECUTABLE = "executable"
    ARCHIVE = "archive"
    IMAGE = "image"
    LINK = "link"


class SortKey(str, Enum):
    """Key used to order entries."""

    NAME = "name"
    SIZE = "size"
    TIME = "time"


@dataclass(frozen=True, slots=True)
class Entry:
    """Represents one filesystem object in a directory listing.

    Attributes:
        name: Base name as reported by the filesystem.
        category: File-type category.
        is_dir: Directory flag from the entry metadata.
        is_hidden: True if the name starts with a dot.
        owner: Owning user name (or numeric id when unknown).
        group: Owning group name (or numeric id when unknown).
        size_bytes: Size in bytes.
        modified_at: Last modification time (timezone-aware, local).
        mode: Rendered permission string (e.g. ``-rwxr-xr-x``).
    """

    name: str
    category: Category
    is_dir: bool
    is_hidden: bool
    owner: str
    group: str
    size_bytes: int
    modified_at: datetime
    mode: str

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)
        if self.size_bytes < 0:
            msg = f"Entry size cannot be negative, got {self.size_bytes}"
            raise ValueError(msg)

    @property
    def mtime_seconds(self) -> int:
        """Modification time as whole Unix seconds."""
        return int(self.modified_at.timestamp())


@dataclass(frozen=True, slots=True)
class Style:
    """Display style of a category.

    Attributes:
        icon: Icon printed before the entry name.
        color: Rich style name used to paint icon, name and symbol.
        symbol: Trailing symbol printed after the name (may be empty).
    """

    icon: str
    color: str
    symbol: str = ""


class ListOptions(BaseModel):
    """Options controlling filtering and ordering of a listing.

    Attributes:
        pattern: Case-insensitive regular expression searched in names.
        show_all: Include hidden entries.
        limit: Maximum number of rows after sorting (0 = no limit).
        sort_key: Key used to order entries.
        reverse: Invert the ordering direction.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: Annotated[
        str | None,
        Field(description="Regular expression matched anywhere in the name"),
    ] = None
    show_all: bool = False
    limit: Annotated[int, Field(ge=0, description="Row limit (0 = unlimited)")] = 0
    sort_key: SortKey = SortKey.NAME
    reverse: bool = False

    @classmethod
    def from_flags(
        cls,
        *,
        pattern: str | None = None,
        show_all: bool = False,
        limit: int = 0,
        by_time: bool = False,
        by_size: bool = False,
        reverse: bool = False,
    ) -> "ListOptions":
        """Build options from command-line style flags.

        Time ordering takes precedence over size ordering; name ordering
        is used when neither is requested. An empty pattern means no
        pattern.
        """
        if by_time:
            sort_key = SortKey.TIME
        elif by_size:
            sort_key = SortKey.SIZE
        else:
            sort_key = SortKey.NAME

        return cls(
            pattern=pattern or None,
            show_all=show_all,
            limit=limit,
            sort_key=sort_key,
            reverse=reverse,
        )
