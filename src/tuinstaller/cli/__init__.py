"""CLI entry point for tuinstaller.

Uses Typer for command routing with lazy loading. Running with no
command opens the interactive menu.
"""

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="tuinstaller",
    help="Terminal menu for picking an install target disk",
    no_args_is_help=False,
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Launch interactive menu if no command given."""
    if ctx.invoked_subcommand is None:
        from tuinstaller.cli.commands import cmd_menu

        cmd_menu()


@app.command()
def disks() -> None:
    """List detected disks without opening the menu."""
    from tuinstaller.cli.commands import cmd_disks

    cmd_disks()


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
