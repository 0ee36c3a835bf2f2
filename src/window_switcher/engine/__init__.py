"""
Window switcher engine.

Pure Python state and logic behind the switcher panel. Nothing in this
package imports GTK.
"""

from .cache import WindowCache
from .commands import Command, parse_command
from .controller import PanelController, PanelState
from .errors import SourceUnavailable, SwitcherError, UnknownCommand
from .matching import MatchedEntry, rank, score
from .models import WindowRecord, clean_title
from .selection import SelectionCursor

__all__ = [
    'Command',
    'MatchedEntry',
    'PanelController',
    'PanelState',
    'SelectionCursor',
    'SourceUnavailable',
    'SwitcherError',
    'UnknownCommand',
    'WindowCache',
    'WindowRecord',
    'clean_title',
    'parse_command',
    'rank',
    'score'
]
