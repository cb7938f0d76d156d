"""Administrator check and UAC relaunch."""

import ctypes
import logging
import subprocess
import sys
from typing import List

from .errors import ElevationError

logger = logging.getLogger(__name__)

SW_SHOWNORMAL = 1
# ShellExecuteW returns a value greater than 32 on success
SHELL_EXECUTE_MIN_SUCCESS = 32


def is_elevated() -> bool:
    """Check whether the current process has administrative rights."""
    if sys.platform != "win32":
        return False
    try:
        return bool(ctypes.windll.shell32.IsUserAnAdmin())
    except (AttributeError, OSError) as e:
        logger.warning(f"Could not determine elevation state: {e}")
        return False


def relaunch_elevated(executable: str, args: List[str]):
    """
    Start a new elevated instance via the "runas" verb.

    Raises:
        ElevationError: The user declined the prompt or the launch failed.
    """
    if sys.platform != "win32":
        raise ElevationError("Elevation is only supported on Windows")

    parameters = subprocess.list2cmdline(list(args))
    logger.info(f"Relaunching elevated: {executable} {parameters}")

    result = ctypes.windll.shell32.ShellExecuteW(
        None, "runas", executable, parameters, None, SW_SHOWNORMAL
    )
    if result <= SHELL_EXECUTE_MIN_SUCCESS:
        raise ElevationError(f"Elevated relaunch failed (ShellExecute returned {result})")
