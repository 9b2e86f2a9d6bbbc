"""
Helper utilities for the Quicksearch provider.

Provides common functions used across the provider and the CLI host:
- URL-shape detection for the "open link" action
- Settings loading
"""

import copy
import os
import re
from pathlib import Path
from typing import Dict, Any, Optional

import toml
from loguru import logger

# Permissive by intent: the host part is optional, IP octets are not
# range-checked and no TLD list is consulted.
_URL_PATTERN = re.compile(
    # Protocol (optional)
    r"(https?://)?"
    # Domain name, OR an optional dotted-quad
    r"((?:[a-z\d](?:[a-z\d-]*[a-z\d])?\.)+[a-z]{2,}|"
    r"((\d{1,3}\.){3}\d{1,3})?)"
    # Port (optional)
    r"(:\d+)?"
    # Path (optional)
    r"(/[-a-z\d%_.~+]*)*"
    # Query string (optional)
    r"(\?[;&a-z\d%_.~+=-]*)?"
    # Fragment (optional)
    r"(#[-a-z\d_]*)?",
    re.IGNORECASE | re.ASCII,
)


def is_valid_url(string: str) -> bool:
    """
    Check whether a search term looks like something openable in a browser.

    Args:
        string: A single search term

    Returns:
        True if the whole term is URL-shaped

    Example:
        is_valid_url("example.com/docs")  # True
        is_valid_url("hello")             # False
    """
    return _URL_PATTERN.fullmatch(string) is not None


DEFAULT_SETTINGS = {
    "provider": {
        "id": "quicksearch@local",
    },
    "search": {
        "max_results": 5,
    },
    "icons": {
        "size": 16,
        "scale_factor": 1,
    },
    "activation": {
        "opener": "xdg-open",
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load provider settings from TOML file.

    Args:
        settings_path: Explicit settings file. Falls back to the
            QUICKSEARCH_SETTINGS environment variable, then data/settings.toml

    Returns:
        Dictionary containing settings with defaults applied

    Example settings structure:
        {
            "provider": {"id": "quicksearch@local"},
            "search": {"max_results": 5},
            "icons": {"size": 16, "scale_factor": 1},
            "activation": {"opener": "xdg-open"},
            "logging": {"level": "WARNING"}
        }
    """
    if settings_path is None:
        env_path = os.environ.get("QUICKSEARCH_SETTINGS")
        if env_path:
            settings_path = Path(env_path)
        else:
            settings_path = Path(__file__).parent.parent / "data" / "settings.toml"
    settings_path = Path(settings_path)

    if not settings_path.exists():
        logger.debug(f"Settings file not found at {settings_path}, using defaults")
        return copy.deepcopy(DEFAULT_SETTINGS)

    try:
        loaded = toml.load(settings_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning(f"Could not load settings from {settings_path}: {e}")
        return copy.deepcopy(DEFAULT_SETTINGS)

    # Merge loaded settings with defaults
    loaded = _drop_mistyped(DEFAULT_SETTINGS, loaded, settings_path)
    return _deep_merge(copy.deepcopy(DEFAULT_SETTINGS), loaded)


def _drop_mistyped(defaults: Dict, loaded: Dict, settings_path: Path, prefix: str = "") -> Dict:
    """
    Remove loaded values whose type doesn't match the default they replace.

    A scalar in place of a table, or a string in place of a number, is
    logged and ignored so the default stays in effect. Keys with no
    default are kept as they are.
    """
    result = {}

    for key, value in loaded.items():
        name = f"{prefix}{key}"
        if key not in defaults:
            result[key] = value
            continue

        default = defaults[key]
        if isinstance(default, dict):
            if not isinstance(value, dict):
                logger.warning(f"Ignoring '{name}' in {settings_path}: expected a table, got {value!r}")
                continue
            result[key] = _drop_mistyped(default, value, settings_path, prefix=f"{name}.")
        elif type(value) is not type(default):
            logger.warning(
                f"Ignoring '{name}' in {settings_path}: expected {type(default).__name__}, got {value!r}"
            )
        else:
            result[key] = value

    return result


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
