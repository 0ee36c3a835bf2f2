# src/window_switcher/utils/paths.py
"""
Path utilities for the window switcher.
"""

from pathlib import Path
import os


def get_config_path():
    """Get the window switcher configuration directory."""
    config_home = os.environ.get('XDG_CONFIG_HOME') or os.path.expanduser('~/.config')
    return Path(config_home) / 'window-switcher'


def get_config_file():
    """Get the configuration file path."""
    return get_config_path() / 'config.json'


__all__ = [
    'get_config_path',
    'get_config_file'
]
