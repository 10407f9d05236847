"""Configuration resolution for the vertical scrollbar footprint.

Priority order (highest to lowest):
1. FIXED_TABLE_SCROLLBAR_SIZE / FIXED_TABLE_SCROLLBAR_OFFSET environment variables
2. ~/.config/fixed-table/config.toml -> [scrollbar] size / offset keys
3. Built-in defaults (SCROLLBAR_SIZE, SCROLLBAR_OFFSET)

The footprint is resolved once per process; call
``load_scrollbar_footprint.cache_clear()`` to pick up a changed config.
"""

from __future__ import annotations

import functools
import logging
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from fixed_table.errors import ColumnLayoutError

logger = logging.getLogger(__name__)

SCROLLBAR_SIZE = 15
SCROLLBAR_OFFSET = 1

_CONFIG_PATH = Path.home() / ".config" / "fixed-table" / "config.toml"

_ENV_SIZE = "FIXED_TABLE_SCROLLBAR_SIZE"
_ENV_OFFSET = "FIXED_TABLE_SCROLLBAR_OFFSET"


def _load_config_dict() -> dict:
    """Load the full config.toml as a dict, or return empty dict on failure."""
    if not _CONFIG_PATH.exists():
        return {}
    try:
        with open(_CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        logger.warning("Ignoring unreadable config file %s", _CONFIG_PATH)
        return {}


def _coerce_dimension(name: str, value: object) -> int:
    """Convert *value* to a non-negative integer number of pixels.

    Raises:
        ColumnLayoutError: If the value is not a non-negative integer.
    """
    if isinstance(value, bool):
        raise ColumnLayoutError(f"{name} must be an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ColumnLayoutError(f"{name} must be an integer, got {value!r}")
    if number < 0:
        raise ColumnLayoutError(f"{name} must not be negative, got {number}")
    return number


def load_scrollbar_size(config: dict | None = None) -> int:
    """Return the configured vertical scrollbar width.

    Args:
        config: An already loaded config dict. Read from disk when omitted.
    """
    env_value = os.environ.get(_ENV_SIZE)
    if env_value:
        return _coerce_dimension(_ENV_SIZE, env_value)
    if config is None:
        config = _load_config_dict()
    section = config.get("scrollbar", {})
    return _coerce_dimension("scrollbar.size", section.get("size", SCROLLBAR_SIZE))


def load_scrollbar_offset(config: dict | None = None) -> int:
    """Return the configured gap between the scrollbar and the table edge.

    Args:
        config: An already loaded config dict. Read from disk when omitted.
    """
    env_value = os.environ.get(_ENV_OFFSET)
    if env_value:
        return _coerce_dimension(_ENV_OFFSET, env_value)
    if config is None:
        config = _load_config_dict()
    section = config.get("scrollbar", {})
    return _coerce_dimension(
        "scrollbar.offset", section.get("offset", SCROLLBAR_OFFSET)
    )


@functools.cache
def load_scrollbar_footprint() -> int:
    """Return the horizontal space a visible vertical scrollbar consumes.

    The value is computed on first use and cached for the process.

    Example config.toml::

        [scrollbar]
        size = 15
        offset = 1

    Returns:
        Scrollbar size plus offset.

    Raises:
        ColumnLayoutError: If a configured value is negative or not an integer.
    """
    config = _load_config_dict()
    return load_scrollbar_size(config) + load_scrollbar_offset(config)
