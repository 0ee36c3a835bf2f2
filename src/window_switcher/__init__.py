# src/window_switcher/__init__.py
"""
Window Switcher - a keyboard-driven window switcher for Linux desktops

A transient GTK4 panel that lists open windows, fuzzy-filters them as you
type and focuses the one you pick.

The package provides:
- The panel lifecycle and window synchronisation engine (``engine``)
- Window-manager query and focus commands (``monitors``)
- The GTK host application and panel (``core``, ``widgets``)
"""

__version__ = '0.1.0'
