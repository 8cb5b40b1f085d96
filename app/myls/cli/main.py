"""Main CLI application entry point.

Defines the Typer application: a single command that lists one directory.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from myls import __version__
from myls.cli.display import print_listing
from myls.core.config import ConfigError, load_config
from myls.listing.errors import ListingError
from myls.listing.pipeline import list_directory
from myls.listing.styles import build_style_map
from myls.utils.formatting import console, print_error

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="myls",
    help="List directory contents with type icons, filtering and ordering.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"myls version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _flag_value(on: bool, off: bool) -> bool | None:
    """Resolve an on/off flag pair, None when neither is given."""
    if on:
        return True
    if off:
        return False
    return None


@app.command()
def main(
    path: Annotated[
        Path,
        typer.Argument(help="Directory to list.", show_default=True),
    ] = Path("."),
    pattern: Annotated[
        str | None,
        typer.Option(
            "--pattern",
            "-p",
            help="Only show entries whose name matches this regex (case-insensitive).",
        ),
    ] = None,
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Include hidden entries."),
    ] = False,
    no_all: Annotated[
        bool,
        typer.Option("--no-all", help="Hide hidden entries even if the config shows them."),
    ] = False,
    number: Annotated[
        int | None,
        typer.Option(
            "--number",
            "-n",
            min=0,
            help="Show only the first N entries (0 = all).",
        ),
    ] = None,
    by_time: Annotated[
        bool,
        typer.Option("--time", "-t", help="Sort by modification time, oldest first."),
    ] = False,
    by_size: Annotated[
        bool,
        typer.Option("--size", "-s", help="Sort by size, smallest first."),
    ] = False,
    reverse: Annotated[
        bool,
        typer.Option("--reverse", "-r", help="Reverse the order."),
    ] = False,
    no_reverse: Annotated[
        bool,
        typer.Option("--no-reverse", help="Do not reverse, even if the config does."),
    ] = False,
    no_icons: Annotated[
        bool,
        typer.Option("--no-icons", help="Do not print type icons."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Config file to read defaults from."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging on stderr."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """List the entries of a directory.

    Entries are sorted by name unless --time or --size is given
    (--time wins when both are).
    """
    _configure_logging(verbose)

    try:
        config = load_config(config_path)
        options = config.to_options(
            pattern=pattern,
            show_all=_flag_value(show_all, no_all),
            limit=number,
            by_time=by_time,
            by_size=by_size,
            reverse=_flag_value(reverse, no_reverse),
        )
        logger.debug("Listing %s with %s", path, options)
        entries = list_directory(path, options)
    except (ConfigError, ListingError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    styles = build_style_map(icons=config.icons and not no_icons)
    print_listing(entries, styles, console)


if __name__ == "__main__":
    app()
