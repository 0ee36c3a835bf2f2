#!/usr/bin/env python3
# src/window_switcher/core/panel.py
"""
Switcher panel window.

A borderless window with a search entry, the window list and a footer
line. It is the view half of the PanelController: it forwards edits, key
presses and focus changes to the controller and renders what the
controller hands back. Positioning goes through xdotool and wmctrl, the
same way the rest of the desktop glue talks to the window manager.
"""

import gi
gi.require_version('Gtk', '4.0')
from gi.repository import Gdk, GLib, Gtk
import logging
import subprocess

from ..utils.constants import PANEL_TITLE
from ..widgets.window import WindowList

logger = logging.getLogger(__name__)

NEXT_KEYS = (Gdk.KEY_Tab, Gdk.KEY_Down)
PREVIOUS_KEYS = (Gdk.KEY_ISO_Left_Tab, Gdk.KEY_Up)


class SwitcherPanel(Gtk.ApplicationWindow):
    """
    The switcher overlay.

    Attributes:
        controller: PanelController driving this panel
        search_entry (Gtk.SearchEntry): Filter field
        window_list (WindowList): Ranked window rows
        _window_id (str): X11 window id, looked up lazily
        _centered (bool): Whether the first-show centering happened
    """

    def __init__(self, app, controller, config):
        super().__init__(application=app)

        self.controller = controller
        self._window_id = None
        self._centered = False

        self.set_title(PANEL_TITLE)
        self.set_decorated(False)
        self.set_resizable(False)
        self.set_hide_on_close(True)
        self.set_default_size(config['panel_width'], config['panel_height'])

        self._setup_ui()

        self.connect('notify::is-active', self._on_active_changed)

    def _setup_ui(self):
        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=8)
        box.set_margin_top(8)
        box.set_margin_bottom(8)
        box.set_margin_start(8)
        box.set_margin_end(8)

        self.search_entry = Gtk.SearchEntry()
        self.search_entry.set_hexpand(True)
        self.search_entry.set_placeholder_text("Find the program in your mess ...")
        if hasattr(self.search_entry, 'set_search_delay'):
            self.search_entry.set_search_delay(0)
        self.search_entry.connect('search-changed', self._on_search_changed)
        self.search_entry.connect('activate', lambda entry: self.controller.activate_selection())
        self.search_entry.connect('stop-search', lambda entry: self.controller.escape())

        key_controller = Gtk.EventControllerKey.new()
        key_controller.set_propagation_phase(Gtk.PropagationPhase.CAPTURE)
        key_controller.connect('key-pressed', self._on_key_pressed)
        self.add_controller(key_controller)

        self.window_list = WindowList(self.controller)

        footer = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=8)
        self.status_icon = Gtk.Image.new_from_icon_name("view-grid-symbolic")
        self.advisory_label = Gtk.Label(xalign=0)
        self.advisory_label.set_hexpand(True)
        self.advisory_label.add_css_class('dim-label')
        footer.append(self.status_icon)
        footer.append(self.advisory_label)
        footer.append(Gtk.Label(label=PANEL_TITLE))

        box.append(self.search_entry)
        box.append(self.window_list)
        box.append(Gtk.Separator(orientation=Gtk.Orientation.HORIZONTAL))
        box.append(footer)
        self.set_child(box)

    # Events

    def _on_search_changed(self, entry):
        self.controller.set_filter_text(entry.get_text())

    def _on_key_pressed(self, controller, keyval, keycode, state):
        if keyval in NEXT_KEYS:
            self.controller.select_next()
            return True
        if keyval in PREVIOUS_KEYS:
            self.controller.select_previous()
            return True
        return False

    def _on_active_changed(self, window, param):
        if self.is_active():
            self.controller.handle_focus_gained()
        else:
            self.controller.handle_focus_lost()

    # Panel view interface

    def show_panel(self):
        self.set_opacity(1.0)
        self.present()
        if not self._centered:
            self._centered = True
            GLib.idle_add(self._center_on_monitor)

    def hide_panel(self):
        self.set_visible(False)

    def focus_panel(self):
        self.present()
        self.search_entry.grab_focus()

    def is_focused(self):
        return self.is_active()

    def set_filter_text(self, text):
        if self.search_entry.get_text() != text:
            self.search_entry.set_text(text)

    def render(self, entries, selected_index):
        self.window_list.set_entries(entries, selected_index)

    def select(self, index):
        self.window_list.select(index)

    def set_advisory(self, text):
        self.advisory_label.set_label(text)

    def set_status_icon_visible(self, visible):
        self.status_icon.set_visible(visible)

    def get_screen_position(self):
        """
        Current top-left corner on screen.

        Returns:
            tuple[int, int] or None if the window manager cannot tell
        """
        window_id = self.get_window_id()
        if not window_id:
            return None
        try:
            output = subprocess.check_output(
                ['xdotool', 'getwindowgeometry', '--shell', window_id],
                text=True
            )
        except (OSError, subprocess.CalledProcessError) as e:
            logger.warning(f"Failed to read panel position: {e}")
            return None

        geometry = dict(
            line.split('=', 1) for line in output.splitlines() if '=' in line
        )
        try:
            return int(geometry['X']), int(geometry['Y'])
        except (KeyError, ValueError):
            return None

    def move_to(self, position):
        self._centered = True
        x, y = position
        GLib.idle_add(self._move_window, x, y)

    # Window manager helpers

    def get_window_id(self):
        """Get the X11 window id of the panel, searching by title."""
        if self._window_id:
            return self._window_id
        try:
            output = subprocess.check_output(
                ['xdotool', 'search', '--name', f'^{PANEL_TITLE}$'],
                text=True
            ).strip()
        except (OSError, subprocess.CalledProcessError) as e:
            logger.warning(f"Panel window id lookup failed: {e}")
            return None

        if output:
            self._window_id = output.split('\n')[0]
        return self._window_id

    def _center_on_monitor(self):
        monitor = self.get_display().get_monitors().get_item(0)
        if monitor is None:
            return False
        geometry = monitor.get_geometry()
        width, height = self.get_default_size()
        x = geometry.x + (geometry.width - width) // 2
        y = geometry.y + (geometry.height - height) // 2
        self._move_window(x, y)
        return False

    def _move_window(self, x, y):
        window_id = self.get_window_id()
        if window_id:
            try:
                subprocess.run(['wmctrl', '-i', '-r', window_id, '-e', f'0,{x},{y},-1,-1'], check=True)
            except (OSError, subprocess.CalledProcessError) as e:
                logger.warning(f"Failed to position panel: {e}")
        return False

    def toggle_taskbar_entry(self):
        """Show or hide the panel in the taskbar."""
        window_id = self.get_window_id()
        if not window_id:
            return
        try:
            subprocess.run(['wmctrl', '-i', '-r', window_id, '-b', 'toggle,skip_taskbar'], check=True)
        except (OSError, subprocess.CalledProcessError) as e:
            logger.warning(f"Failed to toggle taskbar entry: {e}")
