"""
Window switcher GTK host: application, panel window and settings window.
"""

from .panel import SwitcherPanel
from .application import SwitcherApplication, main

__all__ = [
    'SwitcherPanel',
    'SwitcherApplication',
    'main'
]
