"""Configuration resolution for money-input.

Priority order (highest to lowest):
1. CLI arguments (--decimal-separator, --thousand-separator, --precision)
2. ~/.config/money-input/config.toml -> [format] table
3. Built-in defaults (decimal ",", thousands ".", precision 2)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from money_input.errors import InvalidConfiguration
from money_input.models import FormatterConfig

logger = logging.getLogger(__name__)

_CONFIG_PATH = Path.home() / ".config" / "money-input" / "config.toml"

_FORMAT_KEYS = ("decimal_separator", "thousand_separator", "precision")


def _load_config_dict() -> dict:
    """Load the full config.toml as a dict, or return empty dict on failure."""
    if not _CONFIG_PATH.exists():
        return {}
    try:
        with open(_CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("ignoring unreadable config file %s: %s", _CONFIG_PATH, exc)
        return {}


def load_format_settings() -> dict:
    """Return the ``[format]`` table of config.toml, restricted to known keys.

    Example config.toml::

        [format]
        decimal_separator = "."
        thousand_separator = ","
        precision = 3

    Returns:
        A dict with any of ``decimal_separator``, ``thousand_separator`` and
        ``precision``.  Empty when the file or the table is missing.

    Raises:
        InvalidConfiguration: If ``[format]`` is present but is not a table.
    """
    section = _load_config_dict().get("format", {})
    if not isinstance(section, dict):
        raise InvalidConfiguration("[format] in config.toml must be a table")
    return {key: section[key] for key in _FORMAT_KEYS if key in section}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed namespace with 'decimal_separator', 'thousand_separator' and
        'precision' attributes (None when not given).
    """
    parser = argparse.ArgumentParser(
        prog="money-input",
        description="Type a money amount and watch it being formatted.",
    )
    parser.add_argument(
        "-d",
        "--decimal-separator",
        help="Character separating the decimal digits (default ',').",
        default=None,
    )
    parser.add_argument(
        "-t",
        "--thousand-separator",
        help="Character separating the thousands (default '.').",
        default=None,
    )
    parser.add_argument(
        "-p",
        "--precision",
        type=int,
        help="Number of decimals allowed (default 2).",
        default=None,
    )
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace | None = None) -> FormatterConfig:
    """Build the formatter configuration using the priority chain.

    Args:
        args: Parsed CLI arguments, if any.

    Returns:
        The resolved configuration.

    Raises:
        InvalidConfiguration: If the merged settings are not usable.
    """
    settings = load_format_settings()
    if args is not None:
        for key in _FORMAT_KEYS:
            value = getattr(args, key, None)
            if value is not None:
                settings[key] = value
    return FormatterConfig(**settings)
