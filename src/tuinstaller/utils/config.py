"""Configuration management."""

import os
from pathlib import Path
from typing import Optional

ENV_PREFIX = "TUINSTALLER_"


def get_tuinstaller_dir() -> Path:
    """Get the tuinstaller data directory (XDG-compliant)."""
    if env_dir := os.environ.get("TUINSTALLER_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "tuinstaller"


class Config:
    """Application configuration.

    There is no config file. Defaults are set in code and can be
    overridden per process with TUINSTALLER_* environment variables.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = data_dir or get_tuinstaller_dir()
        self._load()

    def _load(self):
        """Set defaults, then apply environment overrides."""
        self.debug = False
        # Pause after each handled key (seconds)
        self.idle_delay = 0.1
        self.highlight_symbol = ">> "
        self.lsblk_command = "lsblk"
        self.device_prefix = "/dev/"

        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply TUINSTALLER_* shell vars onto known attributes."""
        for key, value in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            attr_name = key[len(ENV_PREFIX) :].lower()
            if not hasattr(self, attr_name):
                continue
            current = getattr(self, attr_name)
            if isinstance(current, bool):
                setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
            elif isinstance(current, float):
                try:
                    setattr(self, attr_name, float(value))
                except ValueError:
                    pass  # Keep default on bad value
            elif isinstance(current, str):
                setattr(self, attr_name, value)

    @property
    def log_path(self) -> Path:
        """Path of the debug log file."""
        return self.data_dir / "debug.log"
