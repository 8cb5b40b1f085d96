"""Directory listing module.

This module provides entry classification, filtering, ordering and the
pipeline that ties them to a directory read.
"""

from myls.listing.classifier import CLASSIFICATION_RULES, classify
from myls.listing.errors import ConfigurationError, FilesystemError, ListingError
from myls.listing.filters import accepts_name, apply_limit, compile_pattern
from myls.listing.models import Category, Entry, ListOptions, SortKey, Style
from myls.listing.pipeline import list_directory
from myls.listing.reader import read_directory
from myls.listing.sorter import compare, sort_entries
from myls.listing.styles import build_style_map

__all__ = [
    "CLASSIFICATION_RULES",
    "Category",
    "ConfigurationError",
    "Entry",
    "FilesystemError",
    "ListOptions",
    "ListingError",
    "SortKey",
    "Style",
    "accepts_name",
    "apply_limit",
    "build_style_map",
    "classify",
    "compare",
    "compile_pattern",
    "list_directory",
    "read_directory",
    "sort_entries",
]
