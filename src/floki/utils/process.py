"""Blocking execution of external commands."""

import logging
import subprocess
from dataclasses import dataclass
from typing import List, Optional, Sequence

from floki.errors import CommandLaunchError, SubprocessExitStatus


logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Result from running a command."""
    args: List[str]
    returncode: int

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def signal(self) -> Optional[int]:
        """Signal that terminated the process, if any."""
        if self.returncode < 0:
            return -self.returncode
        return None

    def exit_status(self, process_description: str) -> SubprocessExitStatus:
        return SubprocessExitStatus(process_description, self.returncode)

    def describe(self) -> str:
        if self.signal is not None:
            return f"terminated by signal {self.signal}"
        return f"exited with status {self.returncode}"


def run_command(cmd: Sequence[str], quiet: bool = False) -> CommandResult:
    """Run a command and wait for it to finish.

    Standard streams are inherited so the user sees the tool's output, unless
    ``quiet`` is set, in which case all three are bound to the null device.
    """
    cmd = [str(arg) for arg in cmd]
    logger.debug(f"Running command: {' '.join(cmd)}")

    stream = subprocess.DEVNULL if quiet else None
    try:
        process = subprocess.run(cmd, stdin=stream, stdout=stream, stderr=stream)
    except OSError as e:
        logger.error(f"Could not start {cmd[0]}: {e}")
        raise CommandLaunchError(cmd, e) from e

    result = CommandResult(args=cmd, returncode=process.returncode)
    logger.debug(f"{cmd[0]} {result.describe()}")
    return result
