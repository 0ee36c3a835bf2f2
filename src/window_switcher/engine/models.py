# src/window_switcher/engine/models.py
"""
Window records produced by the window-manager query.
"""

import re
from dataclasses import dataclass
from typing import Optional

# Hyphen, em dash and en dash. Window managers prefix titles with
# "<App> — " and similar.
TITLE_SEPARATORS = re.compile('[-—–]')


def clean_title(raw_title):
    """
    Strip a window-manager prefix from a title.

    Keeps the text after the last separator, trimmed. Titles without a
    separator are returned unchanged.

    Args:
        raw_title (str): Title as reported by the query command

    Returns:
        str: Cleaned title
    """
    if not TITLE_SEPARATORS.search(raw_title):
        return raw_title
    return TITLE_SEPARATORS.split(raw_title)[-1].strip()


@dataclass(frozen=True)
class WindowRecord:
    """
    One open window.

    Attributes:
        id (int): Window-manager window identifier
        app (str): Owning application name
        title (str): Cleaned window title
        space (int): Workspace holding the window, None if unknown
    """
    id: int
    app: str
    title: str
    space: Optional[int] = None

    @classmethod
    def from_json(cls, data):
        """
        Build a record from one decoded query line.

        Args:
            data: Object decoded from a JSON line

        Returns:
            WindowRecord with its title cleaned

        Raises:
            ValueError: If a field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")

        window_id = data.get('id')
        app = data.get('app')
        title = data.get('title')
        space = data.get('space')

        if not isinstance(window_id, int) or isinstance(window_id, bool):
            raise ValueError(f"bad window id: {window_id!r}")
        if not isinstance(app, str):
            raise ValueError(f"bad app name: {app!r}")
        if not isinstance(title, str):
            raise ValueError(f"bad title: {title!r}")
        if space is not None and (not isinstance(space, int) or isinstance(space, bool)):
            raise ValueError(f"bad space: {space!r}")

        return cls(id=window_id, app=app, title=clean_title(title), space=space)

    @property
    def label(self):
        """Title shown in the panel."""
        return self.title or "(Untitled)"
