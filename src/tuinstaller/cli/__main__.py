"""Allow ``python -m tuinstaller.cli``."""

from tuinstaller.cli import cli_main

cli_main()
