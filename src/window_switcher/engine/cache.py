# src/window_switcher/engine/cache.py
"""
Window list caching for the switcher panel.

Keeps the most recent query result next to the last non-empty one so the
panel can show a recent-looking list while a fresh query is still pending
or came back empty.
"""

import time


class WindowCache:
    """
    Live and last-known-good window lists.

    Attributes:
        _live (list): Most recent query result, possibly empty
        _cached (list): Last non-empty query result
        _timestamp (float): Monotonic time of the last non-empty update
    """

    def __init__(self, initial=None):
        self._live = []
        self._cached = list(initial or [])
        self._timestamp = time.monotonic() if self._cached else None

    @property
    def live(self):
        return list(self._live)

    @property
    def cached(self):
        return list(self._cached)

    def update(self, windows):
        """
        Store a fresh query result.

        Args:
            windows: List of WindowRecord from the latest query
        """
        windows = list(windows)
        self._live = windows
        if windows:
            self._cached = windows
            self._timestamp = time.monotonic()

    def display(self, filter_active):
        """
        Pick the list the panel should present.

        Args:
            filter_active (bool): Whether the filter text is non-empty

        Returns:
            The live list, or the cached list when nothing is filtered and
            the live list is still empty
        """
        if filter_active:
            return list(self._live)
        if not self._live and self._cached:
            return list(self._cached)
        return list(self._live)

    def age(self):
        """Seconds since the last non-empty update, or None."""
        if self._timestamp is None:
            return None
        return time.monotonic() - self._timestamp
