"""
Click context extension for vbuilder CLI.

Provides BuilderContext dataclass that holds the settings and services a
single vbuilder invocation needs.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.interfaces.logger import ILogger
from ..core.interfaces.presenter import IPresenter
from ..core.settings import VBuilderSettings, load_settings
from ..presenters.console import ConsolePresenter
from ..services.builder import GoBuilder
from ..services.installer import SystemdInstaller
from ..services.logging import create_logger
from ..services.pipeline import ProjectSetupPipeline
from ..services.process import CommandRunner


@dataclass
class BuilderContext:
    """Everything a pipeline run needs, built once per invocation.

    Attributes:
        settings: Merged configuration (env > TOML > defaults)
        logger: Diagnostic logger
        presenter: User-facing output
        runner: Process runner shared by build and install steps
    """

    settings: VBuilderSettings
    logger: ILogger
    presenter: IPresenter
    runner: CommandRunner

    @classmethod
    def create(cls, project_path: Path | None = None) -> BuilderContext:
        """Create a BuilderContext for the given project directory.

        Args:
            project_path: Project directory searched for `.vbuilder.toml`

        Returns:
            Configured BuilderContext instance
        """
        settings = load_settings(project_dir=project_path)
        logger = create_logger(settings.logging)
        presenter = ConsolePresenter()

        if settings.config_error is not None:
            logger.warning("%s", settings.config_error)
            presenter.print_warning(str(settings.config_error))
        elif settings.config_file:
            logger.debug("Loaded config from %s", settings.config_file)

        return cls(
            settings=settings,
            logger=logger,
            presenter=presenter,
            runner=CommandRunner(logger),
        )

    def build_pipeline(self) -> ProjectSetupPipeline:
        """Wire the pipeline from the configured services."""
        builder = GoBuilder(
            self.runner,
            go_executable=self.settings.build.go_executable,
            extra_args=self.settings.build.extra_args,
            logger=self.logger,
        )
        installer = SystemdInstaller(
            self.runner,
            unit_dir=self.settings.install.unit_dir,
            sudo=self.settings.install.sudo,
            systemctl=self.settings.install.systemctl,
            presenter=self.presenter,
            logger=self.logger,
        )
        return ProjectSetupPipeline(builder, installer, self.presenter, self.logger)
