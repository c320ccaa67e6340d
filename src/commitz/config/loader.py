"""
Configuration loader for commitz.

The tool reads an optional JSON settings file named ``config.json``
from ``~/.commitz/`` (or from the directory named by the
``COMMITZ_CONFIG_DIR`` environment variable). The file only supplies
defaults for command line flags; a missing file is not an error.

If the file exists but is malformed or has values of the wrong type, a
:class:`ConfigError` is raised.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict


logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "COMMITZ_CONFIG_DIR"
CONFIG_FILENAME = "config.json"

# key -> expected type
KNOWN_KEYS: Dict[str, type] = {
    "emoji": bool,
    "interactive": bool,
}


class ConfigError(Exception):
    """Raised when the settings file is unreadable or invalid."""

    pass


def _get_config_directory() -> Path:
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".commitz"


def load_config() -> Dict[str, Any]:
    """Load the optional settings file and return its validated values.

    Returns:
        A dictionary that contains only recognised keys:
        - emoji (bool): prefix the type glyph by default
        - interactive (bool): use the interactive review by default
        An empty dictionary is returned when no file exists.

    Raises:
        ConfigError: If the file cannot be read, is not a JSON object,
            or has a value of the wrong type.
    """
    config_path = _get_config_directory() / CONFIG_FILENAME

    if not config_path.exists():
        logger.debug("No settings file at %s; using defaults", config_path)
        return {}

    try:
        content = config_path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse settings file: %s", exc)
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")

    settings: Dict[str, Any] = {}
    for key, value in data.items():
        expected = KNOWN_KEYS.get(key)
        if expected is None:
            logger.debug("Ignoring unknown settings key '%s'", key)
            continue
        if not isinstance(value, expected):
            raise ConfigError(f"'{key}' must be a {expected.__name__}")
        settings[key] = value

    logger.debug("Loaded settings from %s: %s", config_path, settings)
    return settings
