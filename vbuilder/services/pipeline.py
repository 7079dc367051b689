"""
Project setup pipeline.

Runs the four steps in order, stopping at the first failure:

1. Resolve the service name from go.mod
2. Build the binary with go build
3. Write <name>.service next to the binary
4. Install, enable and start the unit (only with --install)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.exceptions import PathResolutionError
from .manifest import resolve_module_name
from .unit_file import render_unit, unit_file_path, write_unit_file

if TYPE_CHECKING:
    from ..core.interfaces.logger import ILogger
    from ..core.interfaces.presenter import IPresenter
    from .builder import GoBuilder
    from .installer import SystemdInstaller


@dataclass(frozen=True)
class PipelineOptions:
    """Per-invocation options threaded through the pipeline."""

    project_path: Path
    install: bool = False


@dataclass(frozen=True)
class PipelineResult:
    """Artifacts produced by a successful pipeline run."""

    service_name: str
    binary_path: Path
    unit_file: Path
    installed_unit: Path | None = None

    @property
    def installed(self) -> bool:
        return self.installed_unit is not None


def resolve_project_dir(project_path: Path) -> Path:
    """Make the project path absolute against the working directory.

    Raises:
        PathResolutionError: If the working directory cannot be read
    """
    try:
        return Path(os.path.abspath(project_path))
    except OSError as e:
        raise PathResolutionError(
            f"failed to resolve project path: {e.strerror or e}",
            path=str(project_path),
            cause=e,
        ) from e


class ProjectSetupPipeline:
    """
    Builds a Go project and generates (optionally installs) its systemd unit.

    Any step failure raises a VBuilderException; artifacts written by
    earlier steps stay on disk.

    Usage:
        pipeline = ProjectSetupPipeline(builder, installer, presenter, logger)
        result = pipeline.run(PipelineOptions(Path("./widget"), install=True))
    """

    def __init__(
        self,
        builder: "GoBuilder",
        installer: "SystemdInstaller",
        presenter: "IPresenter | None" = None,
        logger: "ILogger | None" = None,
    ):
        self._builder = builder
        self._installer = installer
        self._presenter = presenter
        self._logger = logger

    def run(self, options: PipelineOptions) -> PipelineResult:
        project_dir = resolve_project_dir(options.project_path)

        service_name = resolve_module_name(project_dir)
        self._log(f"Resolved service name {service_name!r} from {project_dir / 'go.mod'}")

        binary_path = self._builder.build(project_dir, service_name)
        self._log(f"Binary built at: {binary_path}")

        unit_file = write_unit_file(
            unit_file_path(project_dir, service_name),
            render_unit(service_name, binary_path),
        )
        self._print(f"Service file created at: {unit_file}")

        installed_unit = None
        if options.install:
            installed_unit = self._installer.install(unit_file, service_name)

        return PipelineResult(
            service_name=service_name,
            binary_path=binary_path,
            unit_file=unit_file,
            installed_unit=installed_unit,
        )

    def _print(self, message: str) -> None:
        if self._presenter:
            self._presenter.print(message)
        self._log(message)

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.info(message)
