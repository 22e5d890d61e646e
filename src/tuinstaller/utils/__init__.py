"""Utility modules for tuinstaller."""

from tuinstaller.utils.config import Config, get_tuinstaller_dir

__all__ = ["Config", "get_tuinstaller_dir"]
