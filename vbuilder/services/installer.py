"""
systemd installation step.

Copies a unit file into the systemd unit directory and activates it with
four privileged commands run strictly in order:

    sudo cp <unit> /etc/systemd/system/<name>.service
    sudo systemctl daemon-reload
    sudo systemctl enable <name>.service
    sudo systemctl start <name>.service

The first failing command stops the sequence. Nothing is rolled back.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from ..core.exceptions import InstallError, ProcessLaunchError

if TYPE_CHECKING:
    from ..core.interfaces.logger import ILogger
    from ..core.interfaces.presenter import IPresenter
    from .process import CommandRunner

DEFAULT_UNIT_DIR = "/etc/systemd/system"

_FAILURE_MESSAGES = {
    "copy": "Failed to copy service file to systemd",
    "reload": "Failed to reload systemd daemon",
    "enable": "Failed to enable service",
    "start": "Failed to start service",
}


class SystemdInstaller:
    """
    Installs, enables and starts a systemd unit via sudo.

    Usage:
        installer = SystemdInstaller(CommandRunner())
        installer.install(Path("/src/widget/widget.service"), "widget")
    """

    def __init__(
        self,
        runner: "CommandRunner",
        unit_dir: str = DEFAULT_UNIT_DIR,
        sudo: str = "sudo",
        systemctl: str = "systemctl",
        presenter: "IPresenter | None" = None,
        logger: "ILogger | None" = None,
    ):
        self._runner = runner
        self._unit_dir = Path(unit_dir)
        self._sudo = sudo
        self._systemctl = systemctl
        self._presenter = presenter
        self._logger = logger

    def installed_path(self, service_name: str) -> Path:
        return self._unit_dir / f"{service_name}.service"

    def steps(self, unit_file: Path, service_name: str) -> list[tuple[str, list[str]]]:
        """The (step name, command) pairs run by install(), in order."""
        unit = f"{service_name}.service"
        return [
            ("copy", [self._sudo, "cp", str(unit_file), str(self.installed_path(service_name))]),
            ("reload", [self._sudo, self._systemctl, "daemon-reload"]),
            ("enable", [self._sudo, self._systemctl, "enable", unit]),
            ("start", [self._sudo, self._systemctl, "start", unit]),
        ]

    def install(self, unit_file: Path | str, service_name: str) -> Path:
        """
        Install and activate the unit.

        Args:
            unit_file: Rendered unit file inside the project
            service_name: Unit base name

        Returns:
            Path of the installed unit file

        Raises:
            InstallError: A step failed; later steps were not attempted
        """
        installed = self.installed_path(service_name)

        for step, command in self.steps(Path(unit_file), service_name):
            self._run_step(step, command)
            if step == "copy":
                self._print(f"Service file copied to: {installed}")

        self._success("Service enabled and started successfully.")
        return installed

    def _run_step(self, step: str, command: list[str]) -> None:
        if self._logger:
            self._logger.info("Install step %s: %s", step, " ".join(command))

        try:
            exit_code = self._runner.run(command)
        except ProcessLaunchError as e:
            raise InstallError(
                f"{_FAILURE_MESSAGES[step]}: {e.message}",
                step=step,
                command=command,
                cause=e,
            ) from e

        if exit_code != 0:
            raise InstallError(
                f"{_FAILURE_MESSAGES[step]}: exit status {exit_code}",
                step=step,
                command=command,
                exit_code=exit_code,
            )

    def _print(self, message: str) -> None:
        if self._presenter:
            self._presenter.print(message)
        if self._logger:
            self._logger.info(message)

    def _success(self, message: str) -> None:
        if self._presenter:
            self._presenter.print_success(message)
        if self._logger:
            self._logger.info(message)