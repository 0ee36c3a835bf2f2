"""
Window switcher monitoring components.

Everything here talks to the window manager through external commands.
"""

from .windows import WindowSource, parse_windows

__all__ = [
    'WindowSource',
    'parse_windows'
]
