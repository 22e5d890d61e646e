"""Block device discovery via lsblk."""

import subprocess
from typing import Callable, Optional

from tuinstaller.utils.debug import debug_devices
from tuinstaller.utils.exceptions import DeviceQueryError

# -d: top-level devices only, -n: no heading, -o: name and type columns
LSBLK_ARGS = ["-d", "-n", "-o", "NAME,TYPE"]
DISK_TYPE = "disk"
DEFAULT_DEVICE_PREFIX = "/dev/"


def parse_lsblk_output(output: str, prefix: str = DEFAULT_DEVICE_PREFIX) -> list[str]:
    """Extract physical disk paths from ``lsblk -d -n -o NAME,TYPE`` output.

    Lines that do not have exactly two fields, or whose type is not
    ``disk`` (partitions, loop devices, roms), are skipped.

    Args:
        output: Raw stdout of lsblk
        prefix: Prepended to each device name

    Returns:
        Device paths in the order lsblk printed them
    """
    devices = []
    for line in output.splitlines():
        parts = line.split()
        if len(parts) == 2 and parts[1] == DISK_TYPE:
            devices.append(f"{prefix}{parts[0]}")
    return devices


def list_devices(
    command: str = "lsblk",
    prefix: str = DEFAULT_DEVICE_PREFIX,
    runner: Optional[Callable[..., subprocess.CompletedProcess]] = None,
) -> list[str]:
    """Query the OS for physical disks.

    Args:
        command: lsblk binary name or path
        prefix: Prepended to each device name
        runner: Replacement for subprocess.run (tests)

    Returns:
        Device paths, possibly empty

    Raises:
        DeviceQueryError: If the query could not be run or exited non-zero
    """
    run = runner or subprocess.run
    argv = [command, *LSBLK_ARGS]
    debug_devices("Running device query", argv=" ".join(argv))

    try:
        result = run(argv, capture_output=True, text=True)
    except OSError as e:
        raise DeviceQueryError(f"Failed to run {command}: {e}") from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise DeviceQueryError(
            f"{command} exited with status {result.returncode}: {stderr}",
            returncode=result.returncode,
        )

    devices = parse_lsblk_output(result.stdout or "", prefix=prefix)
    debug_devices("Device query finished", count=len(devices))
    return devices
