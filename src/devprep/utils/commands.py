"""External command execution for the bootstrap workflow."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of a finished external command."""

    args: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Combined stdout and stderr (some tools print versions to stderr)."""
        return self.stdout + self.stderr


class CommandRunner:
    """Runs external tools and looks them up on the search path.

    Every step that touches the host goes through an instance of this class,
    so tests can hand in a fake with the same two methods.
    """

    def which(self, command: str) -> Optional[str]:
        """Return the absolute path of a command on PATH, or None."""
        return shutil.which(command)

    def run(
        self,
        args: Sequence[str],
        timeout: Optional[float] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> CommandResult:
        """Run a command to completion.

        Args:
            args: Program and arguments
            timeout: Seconds before giving up, None to wait indefinitely
            env: Environment for the child process (inherits ours if None)

        Returns:
            CommandResult; a missing executable is reported as returncode 127

        Raises:
            subprocess.TimeoutExpired: If the timeout elapsed
        """
        argv = [str(arg) for arg in args]
        logger.debug("Running: %s", " ".join(argv))

        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                timeout=timeout,
                env=dict(env) if env is not None else None,
            )
        except FileNotFoundError as e:
            logger.debug("Executable not found: %s", e)
            return CommandResult(args=argv, returncode=127, stderr=str(e))

        logger.debug("Exit status %d: %s", completed.returncode, argv[0])
        return CommandResult(
            args=argv,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )


def is_command_available(runner: CommandRunner, command: str) -> bool:
    """Check if a command is available in PATH."""
    return runner.which(command) is not None
