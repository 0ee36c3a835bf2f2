"""
Window switcher widget components.
"""

from .window import WindowList, WindowRow

__all__ = [
    'WindowList',
    'WindowRow'
]
