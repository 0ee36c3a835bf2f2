"""
Window switcher utility modules.

``update`` and ``widget_pool`` need GTK and are imported directly by the
modules that use them.
"""

from .config import DEFAULT_CONFIG, load_config, save_config
from .constants import APPLICATION_ID, PANEL_TITLE, SETTINGS_TITLE
from .paths import get_config_path, get_config_file

__all__ = [
    'APPLICATION_ID',
    'DEFAULT_CONFIG',
    'PANEL_TITLE',
    'SETTINGS_TITLE',
    'get_config_path',
    'get_config_file',
    'load_config',
    'save_config'
]
