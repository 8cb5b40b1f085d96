"""Category display styles.

The category to style mapping is built once and handed to the printer
as a read-only mapping covering every category.
"""

from collections.abc import Mapping
from types import MappingProxyType

from myls.listing.models import Category, Style

# Rich style name prefix; the theme defines one style per category
STYLE_PREFIX = "category"

DEFAULT_ICONS: dict[Category, str] = {
    Category.REGULAR: "\U0001f4c4",  # page
    Category.DIRECTORY: "\U0001f4c2",  # open folder
    Category.EXECUTABLE: "\U0001f680",  # rocket
    Category.ARCHIVE: "\U0001f4e6",  # package
    Category.IMAGE: "\U0001f4f8",  # camera
    Category.LINK: "\U0001f517",  # link
}

DEFAULT_SYMBOLS: dict[Category, str] = {
    Category.DIRECTORY: "/",
    Category.EXECUTABLE: "*",
}


def style_name(category: Category) -> str:
    """Get the Rich style name used for a category."""
    return f"{STYLE_PREFIX}.{category.value}"


def build_style_map(icons: bool = True) -> Mapping[Category, Style]:
    """Build the read-only category to style mapping.

    Args:
        icons: If False, every icon is blank.

    Returns:
        Mapping with a Style for each Category.
    """
    styles = {
        category: Style(
            icon=DEFAULT_ICONS[category] if icons else "",
            color=style_name(category),
            symbol=DEFAULT_SYMBOLS.get(category, ""),
        )
        for category in Category
    }
    return MappingProxyType(styles)
