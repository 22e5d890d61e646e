"""Core selection logic and device discovery."""

from tuinstaller.core.devices import list_devices, parse_lsblk_output
from tuinstaller.core.results import FlowOutcome, FlowResult
from tuinstaller.core.selection import SelectableList

__all__ = [
    "FlowOutcome",
    "FlowResult",
    "SelectableList",
    "list_devices",
    "parse_lsblk_output",
]
