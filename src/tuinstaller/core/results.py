"""Outcome of a disk picker run."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FlowOutcome(Enum):
    """How a sub-flow ended."""

    SELECTED = "selected"
    CANCELLED = "cancelled"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class FlowResult:
    """Result returned by the disk picker to the main menu.

    ``device`` is only set for SELECTED.
    """

    outcome: FlowOutcome
    device: Optional[str] = None

    @classmethod
    def selected(cls, device: str) -> "FlowResult":
        return cls(FlowOutcome.SELECTED, device)

    @classmethod
    def cancelled(cls) -> "FlowResult":
        return cls(FlowOutcome.CANCELLED)

    @classmethod
    def not_found(cls) -> "FlowResult":
        return cls(FlowOutcome.NOT_FOUND)

    @property
    def is_selected(self) -> bool:
        return self.outcome is FlowOutcome.SELECTED

    def describe(self) -> str:
        """Short human-readable message for the status line."""
        if self.outcome is FlowOutcome.SELECTED:
            return f"Selected disk: {self.device}"
        if self.outcome is FlowOutcome.CANCELLED:
            return "Disk selection cancelled"
        return "No disks found"
