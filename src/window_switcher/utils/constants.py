# src/window_switcher/utils/constants.py
"""
Names shared between the GTK host and the external helpers.
"""

APPLICATION_ID = 'io.github.window_switcher'

# Exact title of the switcher panel. The wmctrl adapter leaves it out of
# the window list and xdotool finds the panel by it.
PANEL_TITLE = 'Window Switcher'

SETTINGS_TITLE = 'Window Switcher Settings'
