"""
Terminal boundary: clearing the screen between frames.
"""

import os
import logging

logger = logging.getLogger(__name__)


class TerminalError(RuntimeError):
    """The terminal could not be cleared. Not recoverable."""


def clear_command() -> str:
    """Shell command that clears the screen on this platform."""
    return 'cls' if os.name == 'nt' else 'clear'


def clear_screen() -> None:
    """
    Clear the terminal screen.

    Raises:
        TerminalError: if the clear command exits with a non-zero status
    """
    command = clear_command()
    status = os.system(command)
    if status != 0:
        logger.error(f"'{command}' exited with status {status}")
        raise TerminalError(f"Failed to clear the terminal ('{command}' exited with status {status})")
