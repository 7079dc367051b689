"""
External process runner.

All external programs (go, sudo, systemctl) are launched through
CommandRunner so their output goes straight to the user's terminal and
tests can swap in a recording fake.
"""

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.exceptions import ProcessLaunchError

if TYPE_CHECKING:
    from ..core.interfaces.logger import ILogger


class CommandRunner:
    """
    Runs commands synchronously with inherited stdout/stderr.

    There is no timeout: a hung child blocks the caller.

    Usage:
        runner = CommandRunner(logger)
        exit_code = runner.run(["go", "build", "-o", "app", "."], cwd=project_dir)
    """

    def __init__(self, logger: "ILogger | None" = None):
        self._logger = logger

    def run(self, command: Sequence[str], cwd: Path | str | None = None) -> int:
        """
        Run a command and wait for it to finish.

        Args:
            command: Program and arguments
            cwd: Working directory for the child process

        Returns:
            The process exit status

        Raises:
            ProcessLaunchError: If the program could not be started
        """
        argv = [str(part) for part in command]
        if self._logger:
            self._logger.debug("Running %s (cwd=%s)", " ".join(argv), cwd)

        try:
            result = subprocess.run(argv, cwd=cwd)
        except OSError as e:
            raise ProcessLaunchError(
                f"Failed to start {argv[0]}: {e.strerror or e}",
                command=argv,
                cause=e,
            ) from e

        if self._logger:
            self._logger.debug("%s exited with status %d", argv[0], result.returncode)
        return result.returncode
