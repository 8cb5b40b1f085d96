"""CLI package for myls.

This package contains the Typer application.
"""

from myls.cli.main import app

__all__ = ["app"]
