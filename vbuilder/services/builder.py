"""
Go build step.

Runs `go build -o <project>/<name> <project>` inside the project directory
and returns the absolute path of the produced binary.
"""

import os
import shutil
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.exceptions import BuildError, PathResolutionError, ProcessLaunchError

if TYPE_CHECKING:
    from ..core.interfaces.logger import ILogger
    from .process import CommandRunner


def find_go() -> str:
    """Find the go binary, checking common install locations."""
    go = shutil.which("go")
    if go:
        return go

    home = Path.home()
    candidates = [
        Path("/usr/local/go/bin/go"),
        home / "go" / "bin" / "go",
        home / "sdk" / "go" / "bin" / "go",
    ]
    for candidate in candidates:
        if candidate.exists():
            return str(candidate)

    # Let the launch fail with a clear "not found" error
    return "go"


class GoBuilder:
    """
    Builds a Go project into a single binary at the project root.

    Usage:
        builder = GoBuilder(CommandRunner())
        binary = builder.build(Path("/src/widget"), "widget")
    """

    def __init__(
        self,
        runner: "CommandRunner",
        go_executable: str | None = None,
        extra_args: Sequence[str] = (),
        logger: "ILogger | None" = None,
    ):
        self._runner = runner
        self._go = go_executable or find_go()
        self._extra_args = list(extra_args)
        self._logger = logger

    @property
    def go_executable(self) -> str:
        return self._go

    def build_command(self, project_dir: Path, binary_path: Path) -> list[str]:
        """Command line used to build `project_dir` into `binary_path`."""
        return [
            self._go,
            "build",
            *self._extra_args,
            "-o",
            str(binary_path),
            str(project_dir),
        ]

    def build(self, project_dir: Path, binary_name: str) -> Path:
        """
        Build the project.

        Args:
            project_dir: Go project directory
            binary_name: File name of the output binary

        Returns:
            Absolute path of the built binary

        Raises:
            BuildError: go build could not be started or exited non-zero
            PathResolutionError: the absolute binary path could not be resolved
        """
        project_dir = Path(project_dir)
        binary_path = project_dir / binary_name
        command = self.build_command(project_dir, binary_path)

        if self._logger:
            self._logger.info("Building %s into %s", project_dir, binary_path)

        try:
            exit_code = self._runner.run(command, cwd=project_dir)
        except ProcessLaunchError as e:
            raise BuildError(
                f"failed to start go build: {e.message}",
                command=command,
                cause=e,
            ) from e

        if exit_code != 0:
            raise BuildError(
                f"go build exited with status {exit_code}",
                command=command,
                exit_code=exit_code,
            )

        try:
            return Path(os.path.abspath(binary_path))
        except OSError as e:
            raise PathResolutionError(
                f"failed to get absolute path of binary: {e}",
                path=str(binary_path),
                cause=e,
            ) from e
