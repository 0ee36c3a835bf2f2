# src/window_switcher/utils/widget_pool.py
"""
Widget pooling utilities for the window switcher.

The window list is rebuilt on every refresh tick; recycling its rows keeps
that from allocating a fresh set of GTK widgets twice a second.
"""

from collections import deque


class WidgetPool:
    """
    Manages a pool of reusable GTK widgets.

    Attributes:
        _factory (callable): Creates a new widget
        _pool (collections.deque): Widgets available for reuse
        _active (set): Widgets currently handed out
    """

    def __init__(self, factory, size=20):
        """
        Initialize the widget pool.

        Args:
            factory (callable): Widget class or factory function
            size (int): Maximum number of idle widgets kept
        """
        self._factory = factory
        self._pool = deque(maxlen=size)
        self._active = set()

    def acquire(self):
        """
        Get a widget from the pool.

        Returns:
            A widget instance, either recycled or newly created
        """
        if self._pool:
            widget = self._pool.pop()
        else:
            widget = self._factory()
        self._active.add(widget)
        return widget

    def release(self, widget):
        """
        Return a widget to the pool.

        Args:
            widget: Widget previously returned by ``acquire``
        """
        if widget in self._active:
            self._active.discard(widget)
            if len(self._pool) < self._pool.maxlen:
                self._pool.append(widget)

    @property
    def active_count(self):
        return len(self._active)
