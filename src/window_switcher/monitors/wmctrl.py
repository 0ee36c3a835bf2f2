# src/window_switcher/monitors/wmctrl.py
"""
wmctrl adapter for the window query.

Prints the windows reported by ``wmctrl -l -x`` as newline-delimited JSON
objects, the format WindowSource expects. This is the default query
command on X11 desktops.
"""

import argparse
import json
import subprocess
import sys

from ..utils.constants import PANEL_TITLE

SKIPPED_CLASSES = ('desktop_window', 'xfdesktop', 'nautilus-desktop')


def parse_wmctrl(output, skip_titles=(PANEL_TITLE,)):
    """
    Convert ``wmctrl -l -x`` output into window dictionaries.

    Args:
        output (str): wmctrl stdout
        skip_titles: Exact titles to leave out

    Returns:
        list[dict]: One dict per window with id, app, title and space
    """
    windows = []
    for window_scroll in output.splitlines():
        window_parts = window_scroll.split(None, 4)
        if len(window_parts) < 4:
            continue

        window_id, desktop, wm_class = window_parts[:3]
        window_title = window_parts[4] if len(window_parts) == 5 else ""

        if window_title in skip_titles:
            continue
        if wm_class.split('.')[0].lower() in SKIPPED_CLASSES:
            continue

        try:
            numeric_id = int(window_id, 16)
            space = int(desktop)
        except ValueError:
            continue

        windows.append({
            'id': numeric_id,
            'app': wm_class.rsplit('.', 1)[-1],
            'title': window_title,
            # Sticky windows report desktop -1 and need no workspace switch
            'space': space if space >= 0 else None,
        })
    return windows


def main(argv=None):
    """Entry point for ``window-switcher-wmctrl``."""
    parser = argparse.ArgumentParser(
        description="List open windows as JSON lines using wmctrl."
    )
    parser.parse_args(argv)

    try:
        output = subprocess.check_output(['wmctrl', '-l', '-x'])
    except (OSError, subprocess.CalledProcessError) as e:
        print(f"wmctrl failed: {e}", file=sys.stderr)
        return 1
    # Titles are raw X11 properties and need not be valid UTF-8
    output = output.decode('utf-8', errors='replace')

    for window in parse_wmctrl(output):
        print(json.dumps(window, ensure_ascii=False))
    return 0


if __name__ == '__main__':
    sys.exit(main())
