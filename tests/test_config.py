"""Tests for configuration module."""

from pathlib import Path

from tuinstaller.utils.config import Config, get_tuinstaller_dir


def test_config_default_values(mock_tuinstaller_dir):
    """Config should have sensible defaults."""
    config = Config(mock_tuinstaller_dir)

    assert config.debug is False
    assert config.idle_delay == 0.1
    assert config.highlight_symbol == ">> "
    assert config.lsblk_command == "lsblk"
    assert config.device_prefix == "/dev/"


def test_data_dir_from_env(mock_tuinstaller_dir):
    assert get_tuinstaller_dir() == mock_tuinstaller_dir
    assert Config().data_dir == mock_tuinstaller_dir


def test_data_dir_default(monkeypatch):
    monkeypatch.delenv("TUINSTALLER_DIR", raising=False)
    assert get_tuinstaller_dir() == Path.home() / ".config" / "tuinstaller"


def test_log_path(mock_tuinstaller_dir):
    assert Config(mock_tuinstaller_dir).log_path == mock_tuinstaller_dir / "debug.log"


def test_env_overrides_bool(mock_tuinstaller_dir, monkeypatch):
    monkeypatch.setenv("TUINSTALLER_DEBUG", "yes")
    assert Config(mock_tuinstaller_dir).debug is True

    monkeypatch.setenv("TUINSTALLER_DEBUG", "off")
    assert Config(mock_tuinstaller_dir).debug is False


def test_env_overrides_float(mock_tuinstaller_dir, monkeypatch):
    monkeypatch.setenv("TUINSTALLER_IDLE_DELAY", "0")
    assert Config(mock_tuinstaller_dir).idle_delay == 0.0


def test_bad_float_keeps_default(mock_tuinstaller_dir, monkeypatch):
    monkeypatch.setenv("TUINSTALLER_IDLE_DELAY", "soon")
    assert Config(mock_tuinstaller_dir).idle_delay == 0.1


def test_env_overrides_str(mock_tuinstaller_dir, monkeypatch):
    monkeypatch.setenv("TUINSTALLER_LSBLK_COMMAND", "/sbin/lsblk")
    monkeypatch.setenv("TUINSTALLER_HIGHLIGHT_SYMBOL", "-> ")
    config = Config(mock_tuinstaller_dir)
    assert config.lsblk_command == "/sbin/lsblk"
    assert config.highlight_symbol == "-> "


def test_unknown_env_ignored(mock_tuinstaller_dir, monkeypatch):
    monkeypatch.setenv("TUINSTALLER_NOT_A_SETTING", "1")
    config = Config(mock_tuinstaller_dir)
    assert not hasattr(config, "not_a_setting")
