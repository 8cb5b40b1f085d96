"""Lister configuration and settings.

This module provides the configuration model and loader for the
default listing behaviour. Command-line flags override these values.

Configuration is stored in ~/.config/myls/config.toml
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from myls.core.paths import get_config_path
from myls.listing.models import ListOptions, SortKey

logger = logging.getLogger(__name__)


class ListerConfig(BaseModel):
    """Default listing settings.

    Attributes:
        show_all: Include hidden entries by default.
        sort: Default sort key ("name", "size" or "time").
        reverse: Reverse the order by default.
        limit: Default row limit (0 = unlimited).
        icons: Print category icons.
    """

    model_config = ConfigDict(extra="forbid")

    show_all: bool = False
    sort: Annotated[SortKey, Field(description="Default sort key")] = SortKey.NAME
    reverse: bool = False
    limit: Annotated[int, Field(ge=0, description="Row limit (0 = unlimited)")] = 0
    icons: bool = True

    def to_options(
        self,
        *,
        pattern: str | None = None,
        show_all: bool | None = None,
        limit: int | None = None,
        by_time: bool = False,
        by_size: bool = False,
        reverse: bool | None = None,
    ) -> ListOptions:
        """Merge command-line flags over these defaults.

        A value that is given (not None) wins over the configured one, so
        ``show_all=False`` turns off a configured ``show_all = true``. Time ordering
        takes precedence over size ordering; when neither flag is given
        the configured sort key applies.

        Args:
            pattern: Name pattern.
            show_all: True for ``-a``, False for ``--no-all``, None if neither.
            limit: ``-n`` value, or None if not given.
            by_time: ``-t`` flag.
            by_size: ``-s`` flag.
            reverse: True for ``-r``, False for ``--no-reverse``, None if neither.

        Returns:
            Options for the listing pipeline.
        """
        return ListOptions.from_flags(
            pattern=pattern,
            show_all=self.show_all if show_all is None else show_all,
            limit=self.limit if limit is None else limit,
            by_time=by_time or (not by_size and self.sort == SortKey.TIME),
            by_size=by_size or self.sort == SortKey.SIZE,
            reverse=self.reverse if reverse is None else reverse,
        )


class ConfigError(Exception):
    """Raised when the config file cannot be read or is invalid."""


def load_config(path: Path | None = None) -> ListerConfig:
    """Load lister configuration from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated ListerConfig object.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML,
            or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return ListerConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        config = ListerConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config
