# src/window_switcher/utils/config.py
"""
Configuration loading for the window switcher.

Settings live in ``~/.config/window-switcher/config.json``. The file is
created with the defaults on first run; keys missing from it fall back to
the defaults.
"""

import json
import logging

from .paths import get_config_file

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "refresh_interval_ms": 500,
    "activation_timeout_ms": 250,
    # null runs the bundled wmctrl adapter; a string is run through sh -c
    "query_command": None,
    "space_command": "wmctrl -s {space}",
    "focus_command": "wmctrl -i -a {id}",
    "command_timeout": 2.0,
    "panel_width": 750,
    "panel_height": 300,
    "log_level": "INFO"
}


def load_config(config_file=None):
    """
    Load the configuration, writing the defaults if there is none.

    Args:
        config_file: Path override, mainly for tests

    Returns:
        dict: Defaults updated with the user's values
    """
    config_file = config_file or get_config_file()
    config = dict(DEFAULT_CONFIG)

    try:
        with open(config_file) as f:
            user_config = json.load(f)
    except FileNotFoundError:
        save_config(config, config_file)
        return config
    except (OSError, ValueError) as e:
        logger.warning(f"Configuration error ({e}), using defaults")
        return config

    if not isinstance(user_config, dict):
        logger.warning(f"Ignoring {config_file}: expected a JSON object")
        return config

    unknown = set(user_config) - set(DEFAULT_CONFIG)
    if unknown:
        logger.warning(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    config.update(user_config)
    return config


def save_config(config, config_file=None):
    """Write the configuration file, logging instead of raising on failure."""
    config_file = config_file or get_config_file()
    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, 'w') as f:
            json.dump(config, f, indent=4)
        logger.info(f"Saved default config to {config_file}")
    except OSError as e:
        logger.warning(f"Could not save default configuration: {e}")
