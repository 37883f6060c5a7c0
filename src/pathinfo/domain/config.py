from __future__ import annotations

"""
Platform Configuration Persistence.

Reads custom platform descriptions from JSON files. Loading is forgiving:
missing or corrupted files fall back to an empty dictionary, which the
validator turns into the default preset.
"""

import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

CONFIG_ENCODING = "utf-8"


def load_platform_config_file(path: str) -> Dict[str, Any]:
    """
    Load a raw platform configuration dictionary from disk.

    Args:
        path: JSON file path.

    Returns:
        Dict[str, Any]: The loaded dictionary, or {} on failure.
    """
    if not os.path.exists(path):
        logger.warning(f"Platform config file not found: {path}. Using defaults.")
        return {}

    try:
        with open(path, "r", encoding=CONFIG_ENCODING) as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load platform config '{path}': {e}. Using defaults.")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Corrupted platform config '{path}': expected an object. Using defaults.")
        return {}

    logger.debug(f"Platform config loaded from {path}")
    return data


def save_platform_config_file(path: str, data: Dict[str, Any]) -> bool:
    """
    Persist a platform configuration dictionary as JSON.

    Args:
        path: Target JSON file.
        data: Dictionary, typically from PlatformConfig.to_dict().

    Returns:
        bool: True on success.
    """
    try:
        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding=CONFIG_ENCODING) as f:
            json.dump(data, f, ensure_ascii=False, indent=4)
        logger.debug(f"Platform config saved to {path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save platform config '{path}': {e}")
        return False
