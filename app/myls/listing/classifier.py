"""Entry classification by file type.

Assigns exactly one Category to an entry from its permission string,
directory flag and name. The precedence is an explicit ordered table:
the first rule whose predicate matches wins, and REGULAR is the
fallback when none does.
"""

import sys
from collections.abc import Callable

from myls.listing.models import Category

WINDOWS_PLATFORM = "win32"

EXECUTABLE_SUFFIX = ".exe"
ARCHIVE_SUFFIXES: tuple[str, ...] = (".zip", ".gz", ".tar", ".rar", ".deb")
IMAGE_SUFFIXES: tuple[str, ...] = (".png", ".jpg", ".jpeg", ".gif")

# (mode, is_dir, name, platform) -> matches
Predicate = Callable[[str, bool, str, str], bool]


def is_link(mode: str, is_dir: bool, name: str, platform: str) -> bool:
    """Check whether the mode string marks a symbolic link."""
    return mode[:1].lower() == "l"


def is_directory(mode: str, is_dir: bool, name: str, platform: str) -> bool:
    """Check the directory flag."""
    return is_dir


def is_executable(mode: str, is_dir: bool, name: str, platform: str) -> bool:
    """Check whether the entry is executable.

    Windows has no executable bit, so the ``.exe`` suffix is used there.
    Elsewhere any ``x`` in the mode string counts.
    """
    if platform == WINDOWS_PLATFORM:
        return name.endswith(EXECUTABLE_SUFFIX)
    return "x" in mode


def is_archive(mode: str, is_dir: bool, name: str, platform: str) -> bool:
    """Check for a known archive suffix."""
    return name.endswith(ARCHIVE_SUFFIXES)


def is_image(mode: str, is_dir: bool, name: str, platform: str) -> bool:
    """Check for a known image suffix."""
    return name.endswith(IMAGE_SUFFIXES)


CLASSIFICATION_RULES: tuple[tuple[Predicate, Category], ...] = (
    (is_link, Category.LINK),
    (is_directory, Category.DIRECTORY),
    (is_executable, Category.EXECUTABLE),
    (is_archive, Category.ARCHIVE),
    (is_image, Category.IMAGE),
)


def classify(mode: str, is_dir: bool, name: str, platform: str = sys.platform) -> Category:
    """Classify an entry into exactly one category.

    Args:
        mode: Rendered permission string (e.g. ``drwxr-xr-x``).
        is_dir: Directory flag from the entry metadata.
        name: Base name of the entry.
        platform: Platform identifier, ``sys.platform`` by default.

    Returns:
        The category of the first matching rule, or Category.REGULAR.
    """
    for predicate, category in CLASSIFICATION_RULES:
        if predicate(mode, is_dir, name, platform):
            return category
    return Category.REGULAR
