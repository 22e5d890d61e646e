"""Main menu state machine."""

from enum import Enum
from typing import TYPE_CHECKING, Optional

from tuinstaller.cli.ui.base import Viewport
from tuinstaller.core.results import FlowResult
from tuinstaller.utils.debug import debug_menu

if TYPE_CHECKING:
    from tuinstaller.cli.ui.menu import ListMenu
    from tuinstaller.core.disk_picker import DiskPicker

MAIN_MENU_TITLE = "Main Menu"


class MenuAction(Enum):
    """Main menu entries, in display order."""

    INSTALL = "Install"
    EXIT = "Exit"

    @property
    def label(self) -> str:
        return self.value


class MenuState(Enum):
    """Lifecycle of the main menu loop."""

    RUNNING = "running"
    TRANSFERRING = "transferring"
    EXITED = "exited"


class MenuController:
    """Drives the main menu over MenuAction.

    Enter on Install hands control to the disk picker until it returns;
    its result is shown in the status pane and the menu carries on with
    the cursor where it was. Enter on Exit or Escape ends the loop.
    """

    def __init__(self, menu: "ListMenu", picker: "DiskPicker"):
        self.menu = menu
        self.picker = picker
        self.actions = list(MenuAction)
        self.state = MenuState.RUNNING
        self.cursor = 0
        self.status = ""
        self.last_result: Optional[FlowResult] = None

    def run(self) -> MenuState:
        """Loop until the menu exits. Fatal errors propagate."""
        while self.state is MenuState.RUNNING:
            self.step()
        debug_menu("Main menu exited")
        return self.state

    def step(self) -> None:
        """Wait for one confirmation or escape and act on it."""
        index = self.menu.select(
            [action.label for action in self.actions],
            title=MAIN_MENU_TITLE,
            cursor_index=self.cursor,
            viewport=Viewport.SPLIT,
            status=self.status,
        )

        if index is None:
            self.state = MenuState.EXITED
            return

        self.cursor = index
        action = self.actions[index]

        if action is MenuAction.EXIT:
            self.state = MenuState.EXITED
        elif action is MenuAction.INSTALL:
            self._run_install()

    def _run_install(self) -> None:
        self.state = MenuState.TRANSFERRING
        debug_menu("Starting disk picker")

        result = self.picker.run()

        self.last_result = result
        self.status = result.describe()
        debug_menu("Disk picker returned", outcome=result.outcome.value, device=result.device)
        self.state = MenuState.RUNNING
