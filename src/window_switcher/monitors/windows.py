# src/window_switcher/monitors/windows.py
"""
Window-manager query and focus commands.

The query command prints one JSON object per line describing an open
window. Lines that do not parse are dropped so a single odd window never
empties the whole list.
"""

import json
import logging
import subprocess
import sys

from ..engine.errors import SourceUnavailable
from ..engine.models import WindowRecord

logger = logging.getLogger(__name__)

DEFAULT_QUERY_COMMAND = [sys.executable, '-m', 'window_switcher.monitors.wmctrl']
DEFAULT_SPACE_COMMAND = 'wmctrl -s {space}'
DEFAULT_FOCUS_COMMAND = 'wmctrl -i -a {id}'


def _argv(command):
    """Turn a configured command into an argv list."""
    if isinstance(command, str):
        return ['sh', '-c', command]
    return list(command)


def _decode(data):
    """Decode command output, replacing bytes that are not valid UTF-8."""
    if not data:
        return ''
    return data.decode('utf-8', errors='replace')


def parse_windows(output):
    """
    Parse newline-delimited JSON window records.

    Args:
        output (str): Raw stdout of the query command

    Returns:
        list[WindowRecord]: Parsed records sorted by app, then title
    """
    windows = []
    for line_number, line in enumerate(output.splitlines(), 1):
        line = line.strip()
        if not line:
            continue
        try:
            windows.append(WindowRecord.from_json(json.loads(line)))
        except ValueError as e:
            logger.debug(f"Skipping query line {line_number}: {e}")

    windows.sort(key=lambda window: (window.app, window.title))
    return windows


class WindowSource:
    """
    Runs the configured window-manager commands.

    Attributes:
        query_command: Shell string or argv list listing windows
        space_command (str): Template switching to ``{space}``
        focus_command (str): Template focusing window ``{id}``
        timeout (float): Seconds before a command is abandoned
    """

    def __init__(self, query_command=None, space_command=DEFAULT_SPACE_COMMAND,
                 focus_command=DEFAULT_FOCUS_COMMAND, timeout=2.0):
        self.query_command = query_command or DEFAULT_QUERY_COMMAND
        self.space_command = space_command
        self.focus_command = focus_command
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        return cls(
            query_command=config.get('query_command'),
            space_command=config.get('space_command', DEFAULT_SPACE_COMMAND),
            focus_command=config.get('focus_command', DEFAULT_FOCUS_COMMAND),
            timeout=config.get('command_timeout', 2.0),
        )

    def _run(self, command):
        try:
            return subprocess.run(
                _argv(command),
                capture_output=True,
                timeout=self.timeout,
                check=True,
            )
        except FileNotFoundError as e:
            raise SourceUnavailable(f"Command not found: {e.filename}") from e
        except subprocess.CalledProcessError as e:
            raise SourceUnavailable(
                f"Command exited with status {e.returncode}: {_decode(e.stderr).strip()}"
            ) from e
        except subprocess.TimeoutExpired as e:
            raise SourceUnavailable(f"Command timed out after {e.timeout}s") from e
        except OSError as e:
            raise SourceUnavailable(str(e)) from e

    def query(self):
        """
        List open windows.

        Returns:
            list[WindowRecord]: Possibly empty when nothing parses

        Raises:
            SourceUnavailable: If the query command is missing or fails
        """
        result = self._run(self.query_command)
        return parse_windows(_decode(result.stdout))

    def focus(self, record):
        """
        Switch to the record's workspace, then focus the window.

        Failures are logged and otherwise ignored; the panel closes either
        way.

        Args:
            record: WindowRecord to focus
        """
        if record.space is not None:
            try:
                self._run(self.space_command.format(space=record.space, id=record.id))
            except SourceUnavailable as e:
                logger.warning(f"Workspace switch to {record.space} failed: {e}")

        try:
            self._run(self.focus_command.format(space=record.space, id=record.id))
        except SourceUnavailable as e:
            logger.warning(f"Focusing window {record.id} failed: {e}")
