"""Debug logging utility."""

import sys
from datetime import datetime

from tuinstaller.utils.config import Config, get_tuinstaller_dir

_config = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_tuinstaller_dir())
    return _config


def reload_config():
    """Reload config (call after debug mode changes)."""
    global _config
    _config = None


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        log_path = _get_config().log_path
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def _timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Lines only go to the log file: stdout and stderr belong to the
    full-screen menu while it runs.

    Args:
        category: Category like 'menu', 'devices', 'render'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[tuinstaller:{category}] {_timestamp()} {message}"
    if extras:
        line += f" | {extras}"

    _log_to_file(line)


def debug_menu(message: str, **kwargs):
    """Log menu-related debug message."""
    debug("menu", message, **kwargs)


def debug_devices(message: str, **kwargs):
    """Log device-query-related debug message."""
    debug("devices", message, **kwargs)


def debug_render(message: str, **kwargs):
    """Log render-related debug message."""
    debug("render", message, **kwargs)


def log_error(category: str, message: str, exc: Exception = None):
    """Log error message ALWAYS (even if debug mode is off).

    Call this only after the terminal has been restored, since it also
    prints to stderr.

    Args:
        category: Category like 'fatal', 'devices'
        message: Error message
        exc: Optional exception to include traceback
    """
    import traceback

    line = f"[tuinstaller:{category}] {_timestamp()} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    _log_to_file(line)

    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass
