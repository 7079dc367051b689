"""
Click-based CLI for vbuilder.

Usage:
    from vbuilder.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from ..core.exceptions import VBuilderException
from ..services.pipeline import PipelineOptions
from .context import BuilderContext

# Version is loaded from package metadata
try:
    from importlib.metadata import version

    __version__ = version("vbuilder")
except Exception:
    __version__ = "0.1.0"


@click.command("vbuilder", context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "project_path",
    metavar="[project-path]",
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    "-i",
    "--install",
    is_flag=True,
    default=False,
    help="Copy the .service file to systemd folder and enable it",
)
@click.version_option(version=__version__, prog_name="vbuilder")
@click.pass_context
def cli(ctx: click.Context, project_path: Path, install: bool) -> None:
    """Build a Go project and create a systemd service for it.

    \b
    Steps:
        1. Read the module name from <project-path>/go.mod
        2. go build -o <project-path>/<name> <project-path>
        3. Write <project-path>/<name>.service
        4. With --install: copy to /etc/systemd/system, reload, enable, start

    \b
    Examples:
        vbuilder ./widget
        vbuilder --install ~/src/widget
    """
    if ctx.obj is None:
        try:
            ctx.obj = BuilderContext.create(project_path)
        except ValidationError as e:
            raise click.ClickException(f"Invalid configuration:\n{e}") from e
    builder_ctx: BuilderContext = ctx.obj

    options = PipelineOptions(project_path=project_path, install=install)
    try:
        builder_ctx.build_pipeline().run(options)
    except VBuilderException as e:
        # Step failures are reported but do not change the exit status
        builder_ctx.logger.error("%s", e)
        builder_ctx.presenter.print_error(str(e))


__all__ = [
    "BuilderContext",
    "__version__",
    "cli",
]
