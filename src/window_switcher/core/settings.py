# src/window_switcher/core/settings.py
"""
Settings window.

Read-only overview: where the configuration lives, how to bind the
switcher to a key, and the in-band commands.
"""

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')
from gi.repository import Adw, Gtk

from ..engine.commands import Command
from ..utils.constants import SETTINGS_TITLE
from ..utils.paths import get_config_file


class SettingsWindow(Adw.Window):
    def __init__(self, app, config):
        super().__init__(application=app)
        self.set_title(SETTINGS_TITLE)
        self.set_default_size(420, 360)

        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        box.set_margin_top(16)
        box.set_margin_bottom(16)
        box.set_margin_start(16)
        box.set_margin_end(16)

        box.append(Adw.HeaderBar())
        box.append(self._section(
            "Hotkey",
            "Bind the command 'window-switcher' to a key in your window "
            "manager. Running it again toggles the panel."
        ))
        box.append(self._section(
            "Configuration",
            f"{get_config_file()}\n"
            f"Refresh every {config['refresh_interval_ms']} ms"
        ))
        box.append(self._section(
            "Commands",
            "\n".join(
                f"/{command.name.lower()}/  {command.value}" for command in Command
            )
        ))

        self.set_content(box)

    def _section(self, heading, text):
        section = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=4)
        title = Gtk.Label(label=heading, xalign=0)
        title.add_css_class('heading')
        body = Gtk.Label(label=text, xalign=0)
        body.set_wrap(True)
        body.set_selectable(True)
        section.append(title)
        section.append(body)
        return section
