"""Custom exceptions for tuinstaller.

This module defines a hierarchy of exceptions for different error types:
- TuinstallerError: Base exception for all tuinstaller errors
- DeviceQueryError: The block device query could not be run
- RenderError: Drawing to the terminal failed
- TerminalError: Terminal setup, teardown or input reading failed
- EmptySelectionError: A list menu was asked to run over zero items

"No devices found" and "selection cancelled" are not errors. They are
returned as FlowResult values by the disk picker.
"""

from typing import Optional


class TuinstallerError(Exception):
    """Base exception for all tuinstaller errors.

    All tuinstaller-specific exceptions inherit from this class, allowing
    callers to catch all tuinstaller errors with a single except clause.
    """

    pass


class DeviceQueryError(TuinstallerError):
    """The device listing mechanism itself failed.

    Raised when the query command cannot be executed at all, such as:
    - The binary is missing
    - The OS refuses to spawn it
    - It exits with a non-zero status

    Attributes:
        returncode: Exit status of the command, if it ran
    """

    def __init__(self, message: str, returncode: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode


class RenderError(TuinstallerError):
    """Drawing a list to the terminal failed."""

    pass


class TerminalError(TuinstallerError):
    """Terminal mode setup/teardown or key reading failed."""

    pass


class EmptySelectionError(TuinstallerError):
    """A selectable list loop was started over zero items."""

    pass
