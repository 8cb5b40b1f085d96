"""Utility modules for myls.

This module exports commonly used utility functions.
"""

from myls.utils.formatting import console, err_console, print_error

__all__ = [
    "console",
    "err_console",
    "print_error",
]
