# src/window_switcher/engine/errors.py
"""
Exception types for the window switcher engine.

None of these are fatal: every one of them has a recovery path in the
controller (fall back to the cache, clear the filter, ignore).
"""


class SwitcherError(Exception):
    """Base class for window switcher errors."""


class SourceUnavailable(SwitcherError):
    """The window-manager query or focus command could not be run or failed."""


class UnknownCommand(SwitcherError):
    """
    An in-band command had valid syntax but an unrecognised name.

    Attributes:
        name (str): Upper-cased command name as typed
    """

    def __init__(self, name):
        super().__init__(f"Unknown command: {name}")
        self.name = name
