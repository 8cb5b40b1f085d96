"""Exceptions raised by the listing pipeline."""


class ListingError(Exception):
    """Base exception for listing errors."""


class ConfigurationError(ListingError):
    """Raised when a listing option is invalid (e.g. a malformed pattern)."""


class FilesystemError(ListingError):
    """Raised when the directory or an entry's metadata cannot be read."""
