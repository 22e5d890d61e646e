"""CLI command handlers."""

import sys
from functools import partial
from typing import Callable, Optional

from rich.markup import escape

from tuinstaller.cli.ui import (
    ListMenu,
    RichRenderSurface,
    TerminalSession,
    console,
)
from tuinstaller.core.devices import list_devices
from tuinstaller.core.disk_picker import DiskPicker
from tuinstaller.core.menu import MenuController
from tuinstaller.utils.config import Config
from tuinstaller.utils.debug import log_error
from tuinstaller.utils.exceptions import DeviceQueryError, TuinstallerError


def _device_lister(config: Config) -> Callable[[], list[str]]:
    return partial(
        list_devices, command=config.lsblk_command, prefix=config.device_prefix
    )


def build_controller(
    config: Config,
    lister: Optional[Callable[[], list[str]]] = None,
) -> MenuController:
    """Wire the main menu to the rich surface and the real device query."""
    surface = RichRenderSurface(console, highlight_symbol=config.highlight_symbol)
    menu = ListMenu(surface, idle_delay=config.idle_delay)
    picker = DiskPicker(menu, lister=lister or _device_lister(config))
    return MenuController(menu, picker)


def cmd_menu(controller: Optional[MenuController] = None):
    """Run the interactive menu inside a terminal session."""
    controller = controller or build_controller(Config())

    try:
        with TerminalSession(console):
            controller.run()
    except KeyboardInterrupt:
        sys.exit(130)
    except TuinstallerError as e:
        log_error("fatal", str(e), e)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    result = controller.last_result
    if result is not None and result.is_selected:
        console.print(f"[green]{escape(result.describe())}[/green]")


def cmd_disks(lister: Optional[Callable[[], list[str]]] = None):
    """Print detected disks, one per line."""
    lister = lister or _device_lister(Config())

    try:
        devices = lister()
    except DeviceQueryError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    if not devices:
        console.print("[yellow]No disks found[/yellow]")
        return

    for device in devices:
        console.print(device, highlight=False)
