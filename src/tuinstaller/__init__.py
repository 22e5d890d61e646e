"""tuinstaller - Terminal menu for picking an install target disk."""

from importlib.metadata import version

__version__ = version("tuinstaller")

from tuinstaller.core.disk_picker import DiskPicker
from tuinstaller.core.menu import MenuAction, MenuController, MenuState
from tuinstaller.core.results import FlowOutcome, FlowResult

__all__ = [
    "DiskPicker",
    "FlowOutcome",
    "FlowResult",
    "MenuAction",
    "MenuController",
    "MenuState",
]
