# src/window_switcher/engine/controller.py
"""
Panel lifecycle and window synchronisation.

The controller owns the panel state machine::

    CLOSED -> AWAITING_ACTIVATION -> VISIBLE -> CLOSED

and everything that has to happen in step with it: asking the host to
come to the foreground, waiting for that (or giving up after a timeout),
polling the window source while the panel has focus, and turning filter
text and key presses into a ranked list, a selection and focus requests.

It never touches GTK directly. Three collaborators are injected:

* ``scheduler`` with ``timeout(ms, callback)``, ``repeat(ms, callback)``,
  ``cancel(handle)`` and ``run_in_background(work, on_done)``. Callbacks
  and ``on_done`` must be invoked on the thread that owns the controller.
* ``host`` with ``activate_host()``, ``is_host_active()``,
  ``on_host_activated(cb)``, ``on_host_deactivated(cb)`` and the command
  actions ``show_status_icon()``, ``hide_status_icon()``,
  ``toggle_dock()``, ``open_settings()`` and ``quit_host()``.
* ``panel_factory(controller)`` returning the panel view, created on the
  first toggle and reused afterwards. The view provides ``show_panel()``,
  ``hide_panel()``, ``focus_panel()``, ``is_focused()``,
  ``get_screen_position()``, ``move_to(position)``,
  ``set_filter_text(text)``, ``render(entries, index)``, ``select(index)``
  and ``set_advisory(text)``.
"""

import logging
from enum import Enum

from .cache import WindowCache
from .commands import Command, help_text, parse_command
from .errors import SourceUnavailable, UnknownCommand
from .matching import rank
from .selection import SelectionCursor

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL = 500
DEFAULT_ACTIVATION_TIMEOUT = 250


class PanelState(Enum):
    CLOSED = 'closed'
    AWAITING_ACTIVATION = 'awaiting-activation'
    VISIBLE = 'visible'


class PanelController:
    """
    Drives the switcher panel.

    Attributes:
        source: WindowSource queried for open windows
        host: Host application collaborator
        scheduler: Timer and background-work provider
        cache (WindowCache): Live and last-known-good window lists
        cursor (SelectionCursor): Highlighted entry
        filter_text (str): Current filter field contents
        advisory (str): Message line shown under the list
        panel: Panel view, None until the first toggle
    """

    def __init__(self, source, host, scheduler, panel_factory,
                 refresh_interval=DEFAULT_REFRESH_INTERVAL,
                 activation_timeout=DEFAULT_ACTIVATION_TIMEOUT,
                 initial_windows=None):
        self.source = source
        self.host = host
        self.scheduler = scheduler
        self.refresh_interval = refresh_interval
        self.activation_timeout = activation_timeout

        self.cache = WindowCache(initial_windows)
        self.cursor = SelectionCursor()
        self.filter_text = ''
        self.advisory = ''
        self.panel = None

        self._panel_factory = panel_factory
        self._state = PanelState.CLOSED
        self._entries = []
        # Bumped on every open and close; timer callbacks carrying an
        # older value belong to a previous cycle and do nothing.
        self._generation = 0
        self._activation_timer = None
        self._refresh_timer = None
        self._query_in_flight = False
        self._source_available = True
        self._last_position = None

        self._command_handlers = {
            Command.SHOW_ICON: self.host.show_status_icon,
            Command.HIDE_ICON: self.host.hide_status_icon,
            Command.TOGGLE_DOCK: self.host.toggle_dock,
            Command.SETTINGS: self.host.open_settings,
            Command.HELP: lambda: self._set_advisory(help_text()),
            Command.QUIT: self.host.quit_host,
        }

        self.host.on_host_activated(self._on_host_activated)
        self.host.on_host_deactivated(self._on_host_deactivated)

    @property
    def state(self):
        return self._state

    @property
    def entries(self):
        """Ranked entries currently displayed."""
        return list(self._entries)

    # Lifecycle

    def toggle(self):
        """Open, close or refocus the panel depending on its state."""
        if self._state is PanelState.CLOSED:
            self._open()
        elif self._state is PanelState.AWAITING_ACTIVATION:
            logger.debug("Toggle ignored while waiting for host activation")
        elif self.panel.is_focused():
            self.close()
        else:
            logger.info("Panel visible without focus, refocusing")
            self.host.activate_host()
            self.panel.focus_panel()

    def _open(self):
        self._generation += 1
        generation = self._generation
        logger.info("Opening panel")

        if self.panel is None:
            self.panel = self._panel_factory(self)

        self.filter_text = ''
        self.cursor.reset()
        self.panel.set_filter_text('')
        self._set_advisory('')
        self._render()

        if self.host.is_host_active():
            self._reveal()
            return

        self._state = PanelState.AWAITING_ACTIVATION
        self._activation_timer = self.scheduler.timeout(
            self.activation_timeout,
            lambda: self._on_activation_timeout(generation)
        )
        self.host.activate_host()

    def _on_host_activated(self):
        if self._state is PanelState.AWAITING_ACTIVATION:
            logger.debug("Host activated")
            self._reveal()

    def _on_host_deactivated(self):
        if self._state is PanelState.VISIBLE:
            self._stop_refresh()

    def _on_activation_timeout(self, generation):
        if generation != self._generation:
            return
        self._activation_timer = None
        if self._state is not PanelState.AWAITING_ACTIVATION:
            return
        logger.warning(
            f"Host activation not confirmed after {self.activation_timeout}ms, "
            "showing panel anyway"
        )
        self._reveal()

    def _reveal(self):
        self._cancel_activation_timer()
        self._state = PanelState.VISIBLE
        if self._last_position is not None:
            self.panel.move_to(self._last_position)
        self.panel.show_panel()
        self.panel.focus_panel()
        self._start_refresh()

    def close(self):
        """Hide the panel and stop all timers of the current cycle."""
        if self._state is PanelState.CLOSED:
            return
        logger.info("Closing panel")

        self._generation += 1
        self._cancel_activation_timer()
        self._stop_refresh()

        if self._state is PanelState.VISIBLE:
            position = self.panel.get_screen_position()
            if position is not None:
                self._last_position = position
        self.panel.hide_panel()
        self._state = PanelState.CLOSED

    def shutdown(self):
        """Tear down before the host exits."""
        self.close()

    def handle_focus_gained(self):
        if self._state is PanelState.VISIBLE:
            self._start_refresh()

    def handle_focus_lost(self):
        if self._state is PanelState.VISIBLE:
            self._stop_refresh()

    def _cancel_activation_timer(self):
        if self._activation_timer is not None:
            self.scheduler.cancel(self._activation_timer)
            self._activation_timer = None

    # Refresh

    def _start_refresh(self):
        if self._refresh_timer is not None:
            return
        logger.debug("Starting window refresh")
        self._refresh_timer = self.scheduler.repeat(self.refresh_interval, self.refresh)
        self.refresh()

    def _stop_refresh(self):
        if self._refresh_timer is None:
            return
        logger.debug("Stopping window refresh")
        self.scheduler.cancel(self._refresh_timer)
        self._refresh_timer = None

    def refresh(self):
        """Query the window source in the background, one query at a time."""
        if self._query_in_flight:
            logger.debug("Previous window query still running, skipping tick")
            return
        self._query_in_flight = True
        self.scheduler.run_in_background(self._fetch_windows, self._apply_windows)

    def _fetch_windows(self):
        # Runs off the main loop: no controller state may change here.
        try:
            return self.source.query()
        except SourceUnavailable as e:
            logger.debug(f"Window query failed: {e}")
            return None

    def _apply_windows(self, windows):
        self._query_in_flight = False

        if windows is None:
            if self._source_available:
                age = self.cache.age()
                if age is None:
                    logger.warning("Window source unavailable, no cached windows to show")
                else:
                    logger.warning(
                        f"Window source unavailable, showing cached windows from {age:.1f}s ago"
                    )
            self._source_available = False
            windows = []
        else:
            self._source_available = True

        self.cache.update(windows)
        if self._state is not PanelState.CLOSED:
            self._render()

    # Filtering and selection

    def _render(self):
        self._entries = rank(self.cache.display(bool(self.filter_text)), self.filter_text)
        self.cursor.clamp(len(self._entries))
        self.panel.render(self.entries, self.cursor.index)

    def set_filter_text(self, text):
        """Handle an edit of the filter field."""
        if text == self.filter_text:
            return
        self.filter_text = text
        self.cursor.reset()
        self._set_advisory('')
        if self.panel is not None:
            self._render()

    def _clear_filter(self):
        self.set_filter_text('')
        self.panel.set_filter_text('')

    def select_next(self):
        self.cursor.next()
        self.panel.select(self.cursor.index)

    def select_previous(self):
        self.cursor.previous()
        self.panel.select(self.cursor.index)

    def escape(self):
        """Clear a non-empty filter, otherwise close the panel."""
        if self.filter_text:
            self._clear_filter()
        else:
            self.close()

    def activate_selection(self):
        """Handle Enter: run a command or focus the highlighted window."""
        try:
            command = parse_command(self.filter_text)
        except UnknownCommand as e:
            logger.warning(str(e))
            self._clear_filter()
            self._set_advisory(str(e))
            return

        if command is not None:
            self._clear_filter()
            self.run_command(command)
            return

        self.focus_entry(self.cursor.index)

    def focus_entry(self, index):
        """
        Focus the window at ``index`` in the displayed list and close.

        Args:
            index (int): Position in the displayed entries
        """
        if not 0 <= index < len(self._entries):
            return
        record = self._entries[index].record
        logger.info(f"Focusing {record.app}: {record.label} ({record.id})")
        self.scheduler.run_in_background(lambda: self.source.focus(record))
        self.close()

    # Commands

    def run_command(self, command):
        logger.info(f"Running command {command.name}")
        self._command_handlers[command]()

    def _set_advisory(self, text):
        self.advisory = text
        if self.panel is not None:
            self.panel.set_advisory(text)
