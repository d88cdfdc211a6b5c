from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of host preferences (prompt identity, locale,
appearance and diagnostics) as JSON in the user data directory. The
simulated filesystem itself is never persisted.
"""

import json
import logging
import os
from typing import Any, Dict

from webbash.domain import constants as const
from webbash.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

def get_config_path() -> str:
    """Return the absolute location of config.json."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default host configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Prompt identity
        "user": const.DEFAULT_USER,
        "host": const.DEFAULT_HOST,

        # Presentation
        "locale": "en",
        "appearance_mode": "system",
        "font_size": 13,

        # Diagnostics
        "log_level": "WARNING",
        "save_log": False,
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config() -> Dict[str, Any]:
    """
    Load the configuration from disk, merged over the defaults.

    Missing or corrupted files fall back to the defaults.

    Returns:
        Dict[str, Any]: The effective configuration (unvalidated).
    """
    config = get_default_config()
    path = get_config_path()

    if not os.path.exists(path):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    data.pop("version", None)
    config.update(data)
    return config


def save_config(config: Dict[str, Any]) -> None:
    """
    Persist the configuration to disk with a version stamp.

    Args:
        config: The configuration dictionary to save.
    """
    path = get_config_path()
    payload = dict(config)
    payload["version"] = const.CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
