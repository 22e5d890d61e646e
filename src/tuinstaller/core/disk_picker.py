"""Disk selection sub-flow."""

from typing import TYPE_CHECKING, Callable

from tuinstaller.cli.ui.base import Viewport
from tuinstaller.core.devices import list_devices
from tuinstaller.core.results import FlowResult
from tuinstaller.utils.debug import debug_menu

if TYPE_CHECKING:
    from tuinstaller.cli.ui.menu import ListMenu

DISK_MENU_TITLE = "Select a disk"


class DiskPicker:
    """Lets the user pick one of the disks present right now.

    The device list is fetched on every run and never cached. A failing
    lister (DeviceQueryError) propagates; an empty list is a NOT_FOUND
    result and nothing is drawn.
    """

    def __init__(
        self,
        menu: "ListMenu",
        lister: Callable[[], list[str]] = list_devices,
    ):
        self.menu = menu
        self.lister = lister

    def run(self) -> FlowResult:
        devices = self.lister()
        if not devices:
            debug_menu("No disks found")
            return FlowResult.not_found()

        index = self.menu.select(
            devices,
            title=DISK_MENU_TITLE,
            cursor_index=0,
            viewport=Viewport.FULL,
        )
        if index is None:
            return FlowResult.cancelled()
        return FlowResult.selected(devices[index])
