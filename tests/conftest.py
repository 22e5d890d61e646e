"""Shared pytest fixtures."""

import os
import tempfile
from pathlib import Path

import pytest

from tuinstaller.utils import debug


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def mock_tuinstaller_dir(temp_dir, monkeypatch):
    """Point the data directory at a temp dir and reset cached config."""
    data_dir = temp_dir / "tuinstaller"
    data_dir.mkdir()
    monkeypatch.setenv("TUINSTALLER_DIR", str(data_dir))
    for name in ("TUINSTALLER_DEBUG", "TUINSTALLER_IDLE_DELAY"):
        monkeypatch.delenv(name, raising=False)
    debug.reload_config()
    yield data_dir
    debug.reload_config()


@pytest.fixture
def pty_pair():
    """A pseudo-terminal: (master fd, slave file usable as stdin)."""
    master_fd, slave_fd = os.openpty()
    slave = os.fdopen(slave_fd, "rb", buffering=0)
    yield master_fd, slave
    slave.close()
    os.close(master_fd)


@pytest.fixture
def devnull_stdin():
    """A stdin that is not a terminal."""
    with open(os.devnull) as f:
        yield f
