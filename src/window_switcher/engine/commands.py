# src/window_switcher/engine/commands.py
"""
In-band commands typed into the filter field.

A command is the whole filter text in the form ``/NAME/``. Names are
case-insensitive and limited to the members of ``Command``.
"""

import re
from enum import Enum

from .errors import UnknownCommand

COMMAND_PATTERN = re.compile(r'/([^/]+)/')


class Command(Enum):
    SHOW_ICON = 'Show the status icon'
    HIDE_ICON = 'Hide the status icon'
    TOGGLE_DOCK = 'Show or hide the switcher in the taskbar'
    SETTINGS = 'Open the settings window'
    HELP = 'List the available commands'
    QUIT = 'Quit the window switcher'


def parse_command(text):
    """
    Recognise an in-band command.

    Args:
        text (str): Current filter text

    Returns:
        Command, or None when the text is not command syntax

    Raises:
        UnknownCommand: If the syntax matches but the name is not known
    """
    match = COMMAND_PATTERN.fullmatch(text)
    if match is None:
        return None

    name = match.group(1).upper()
    try:
        return Command[name]
    except KeyError:
        raise UnknownCommand(name) from None


def help_text():
    """Advisory line listing every command."""
    return "  ".join(f"/{command.name.lower()}/" for command in Command)
