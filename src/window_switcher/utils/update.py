# src/window_switcher/utils/update.py
"""
Update scheduling for the window switcher.

This module provides the UpdateManager class, the GLib-backed scheduler the
panel controller runs on: cancelable one-shot and repeating timers, and
background work whose result is handed back on the GTK main loop.
"""

import logging
import threading

from gi.repository import GLib

logger = logging.getLogger(__name__)


class ScheduledUpdate:
    """
    Handle for a scheduled GLib timeout.

    Attributes:
        source_id (int): GLib source id
        repeating (bool): Whether the callback runs until cancelled
        active (bool): False once fired (one-shot) or cancelled
    """

    def __init__(self, repeating):
        self.source_id = None
        self.repeating = repeating
        self.active = True


class UpdateManager:
    """
    Schedules timers and background work on the GLib main loop.

    Attributes:
        _updates (set): Handles that are still active
        _priority (int): GLib priority for timers and result delivery
    """

    def __init__(self, priority=GLib.PRIORITY_DEFAULT):
        self._updates = set()
        self._priority = priority

    def timeout(self, interval, callback):
        """
        Run ``callback`` once after ``interval`` milliseconds.

        Returns:
            ScheduledUpdate: Handle accepted by ``cancel``
        """
        return self._schedule(interval, callback, repeating=False)

    def repeat(self, interval, callback):
        """
        Run ``callback`` every ``interval`` milliseconds until cancelled.

        Returns:
            ScheduledUpdate: Handle accepted by ``cancel``
        """
        return self._schedule(interval, callback, repeating=True)

    def _schedule(self, interval, callback, repeating):
        update = ScheduledUpdate(repeating)

        def fire():
            if not update.active:
                return False
            if not repeating:
                self._retire(update)
            try:
                callback()
            except Exception:
                logger.exception("Scheduled update failed")
            return update.active and repeating

        update.source_id = GLib.timeout_add(interval, fire, priority=self._priority)
        self._updates.add(update)
        return update

    def _retire(self, update):
        update.active = False
        self._updates.discard(update)

    def cancel(self, update):
        """Stop a pending timer. Cancelling twice or after firing is a no-op."""
        if update is None or not update.active:
            return
        self._retire(update)
        GLib.source_remove(update.source_id)

    def cancel_all(self):
        for update in list(self._updates):
            self.cancel(update)

    def run_in_background(self, work, on_done=None):
        """
        Run ``work`` on a daemon thread.

        ``on_done`` receives the return value on the main loop, or None if
        ``work`` raised.

        Args:
            work (callable): Blocking function without arguments
            on_done (callable): Optional result handler
        """
        def deliver(result):
            on_done(result)
            return False

        def run():
            try:
                result = work()
            except Exception:
                logger.exception("Background task failed")
                result = None
            if on_done is not None:
                GLib.idle_add(deliver, result, priority=self._priority)

        threading.Thread(target=run, daemon=True).start()
