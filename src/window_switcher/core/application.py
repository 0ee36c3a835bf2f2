# src/window_switcher/core/application.py
"""
Core application implementation for the window switcher.

Provides the Adw.Application that owns the PanelController and stands in
as its host: it activates itself on request, reports activation changes,
and carries out the in-band commands that reach outside the panel.
"""

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')
from gi.repository import Adw, Gio, GLib
import argparse
import logging
import signal
import sys

from ..engine.controller import PanelController
from ..monitors.windows import WindowSource
from ..utils.config import load_config
from ..utils.constants import APPLICATION_ID
from ..utils.update import UpdateManager
from .panel import SwitcherPanel
from .settings import SettingsWindow

logger = logging.getLogger(__name__)


class SwitcherApplication(Adw.Application):
    """
    Main window switcher application.

    Runs as a single instance. Every activation, including launching
    ``window-switcher`` again from a key binding, toggles the panel.

    Attributes:
        config (dict): Loaded configuration
        scheduler (UpdateManager): Timers and background work
        controller (PanelController): Panel state machine
        panel (SwitcherPanel): Created by the controller on first toggle
    """

    def __init__(self, config):
        super().__init__(application_id=APPLICATION_ID,
                         flags=Gio.ApplicationFlags.FLAGS_NONE)
        self.config = config
        self.scheduler = None
        self.controller = None
        self.panel = None
        self._settings_window = None
        self._status_icon_visible = True
        self._host_active = False
        self._activated_callbacks = []
        self._deactivated_callbacks = []
        self._activity_check_id = None

    def do_startup(self):
        """Create the controller and the application actions."""
        Adw.Application.do_startup(self)
        # Stay alive while the panel is hidden
        self.hold()

        self.scheduler = UpdateManager()
        self.controller = PanelController(
            WindowSource.from_config(self.config),
            self,
            self.scheduler,
            self._create_panel,
            refresh_interval=self.config['refresh_interval_ms'],
            activation_timeout=self.config['activation_timeout_ms'],
        )

        for name, callback in (
            ('toggle', lambda *args: self.controller.toggle()),
            ('settings', lambda *args: self.open_settings()),
            ('quit', lambda *args: self.quit_host()),
        ):
            action = Gio.SimpleAction.new(name, None)
            action.connect('activate', callback)
            self.add_action(action)

        self.connect('window-added', self._on_window_added)
        self.connect('window-removed', lambda app, window: self._schedule_activity_check())

    def do_activate(self):
        """Handle application activation."""
        self.controller.toggle()

    def do_shutdown(self):
        if self.controller is not None:
            self.controller.shutdown()
        if self.scheduler is not None:
            self.scheduler.cancel_all()
        Adw.Application.do_shutdown(self)

    def _create_panel(self, controller):
        self.panel = SwitcherPanel(self, controller, self.config)
        self.panel.set_status_icon_visible(self._status_icon_visible)
        return self.panel

    # Host activation tracking

    def _on_window_added(self, app, window):
        window.connect('notify::is-active', lambda *args: self._schedule_activity_check())

    def _schedule_activity_check(self):
        # Focus moving between our own windows briefly leaves none active;
        # wait for the main loop to settle before deciding.
        if self._activity_check_id is None:
            self._activity_check_id = GLib.idle_add(self._check_activity)

    def _check_activity(self):
        self._activity_check_id = None
        active = self.is_host_active()
        if active != self._host_active:
            self._host_active = active
            callbacks = self._activated_callbacks if active else self._deactivated_callbacks
            for callback in list(callbacks):
                callback()
        return False

    def activate_host(self):
        """Bring the application to the foreground through the panel."""
        if self.panel is None:
            return
        if not self.panel.get_visible():
            # Mapped but transparent until the controller reveals it
            self.panel.set_opacity(0.0)
        self.panel.present()

    def is_host_active(self):
        return any(window.is_active() for window in self.get_windows())

    def on_host_activated(self, callback):
        self._activated_callbacks.append(callback)

    def on_host_deactivated(self, callback):
        self._deactivated_callbacks.append(callback)

    # Command actions

    def show_status_icon(self):
        self._status_icon_visible = True
        if self.panel is not None:
            self.panel.set_status_icon_visible(True)

    def hide_status_icon(self):
        self._status_icon_visible = False
        if self.panel is not None:
            self.panel.set_status_icon_visible(False)

    def toggle_dock(self):
        if self.panel is not None:
            self.panel.toggle_taskbar_entry()

    def open_settings(self):
        if self._settings_window is None:
            self._settings_window = SettingsWindow(self, self.config)
            self._settings_window.set_hide_on_close(True)
        self._settings_window.present()

    def quit_host(self):
        logger.info("Quitting")
        self.quit()


def main(argv=None):
    """Main entry point for the window switcher."""
    parser = argparse.ArgumentParser(
        prog='window-switcher',
        description="Keyboard-driven window switcher. Running it again toggles the panel."
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="log debug output")
    args = parser.parse_args(argv)

    config = load_config()
    level = logging.DEBUG if args.verbose else config.get('log_level', 'INFO')
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
    )

    try:
        app = SwitcherApplication(config)

        def cleanup(signum=None, frame=None):
            """Quit the main loop on SIGINT/SIGTERM."""
            logger.info("Cleaning up...")
            app.quit()

        signal.signal(signal.SIGINT, cleanup)
        signal.signal(signal.SIGTERM, cleanup)

        return app.run(sys.argv[:1])

    except Exception:
        logger.exception("Fatal error")
        return 1
