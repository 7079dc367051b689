"""
Unit tests for ProjectSetupPipeline.

The pipeline runs against a RecordingRunner so no go toolchain or sudo
is needed.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from vbuilder.core.exceptions import (
    BuildError,
    InstallError,
    ManifestNotFoundError,
    ModuleDeclarationMissingError,
    PathResolutionError,
)
from vbuilder.services.builder import GoBuilder
from vbuilder.services.installer import SystemdInstaller
from vbuilder.services.pipeline import PipelineOptions, ProjectSetupPipeline


def make_pipeline(runner, presenter=None):
    return ProjectSetupPipeline(
        GoBuilder(runner, go_executable="go"),
        SystemdInstaller(runner),
        presenter=presenter,
    )


class TestPipelineSuccess:
    def test_end_to_end_without_install(self, go_project, recording_runner):
        project = go_project("module github.com/acme/widget\n")
        presenter = MagicMock()

        result = make_pipeline(recording_runner, presenter).run(PipelineOptions(project))

        assert result.service_name == "widget"
        assert result.binary_path == project / "widget"
        assert result.binary_path.exists()
        assert result.unit_file == project / "widget.service"
        assert not result.installed

        content = result.unit_file.read_text()
        assert "Description=vortex.studio/widget Service\n" in content
        assert f"ExecStart={project / 'widget'}\n" in content
        assert f"WorkingDirectory={project}\n" in content
        presenter.print.assert_called_once_with(f"Service file created at: {project / 'widget.service'}")

    def test_no_privileged_commands_without_install(self, go_project, recording_runner):
        project = go_project()

        make_pipeline(recording_runner).run(PipelineOptions(project, install=False))

        assert len(recording_runner.commands) == 1
        assert all("sudo" not in command for command in recording_runner.commands)

    def test_install_runs_after_build(self, go_project, recording_runner):
        project = go_project()

        result = make_pipeline(recording_runner).run(PipelineOptions(project, install=True))

        assert result.installed
        assert result.installed_unit.name == "widget.service"
        assert [command[0] for command in recording_runner.commands] == [
            "go",
            "sudo",
            "sudo",
            "sudo",
            "sudo",
        ]
        assert recording_runner.commands[1][2] == str(project / "widget.service")

    def test_relative_project_path(self, go_project, recording_runner, monkeypatch):
        project = go_project()
        monkeypatch.chdir(project.parent)

        result = make_pipeline(recording_runner).run(PipelineOptions(project.relative_to(project.parent)))

        assert result.binary_path == project / "widget"
        assert result.unit_file == project / "widget.service"

    def test_existing_unit_file_is_replaced(self, go_project, recording_runner):
        project = go_project()
        (project / "widget.service").write_text("old\n")

        make_pipeline(recording_runner).run(PipelineOptions(project))

        assert (project / "widget.service").read_text().startswith("[Unit]\n")


class TestPipelineFailures:
    def test_missing_manifest_stops_before_build(self, go_project, recording_runner):
        project = go_project(None)

        with pytest.raises(ManifestNotFoundError):
            make_pipeline(recording_runner).run(PipelineOptions(project, install=True))

        assert recording_runner.calls == []

    def test_missing_declaration_stops_before_build(self, go_project, recording_runner):
        project = go_project("go 1.22\n")

        with pytest.raises(ModuleDeclarationMissingError):
            make_pipeline(recording_runner).run(PipelineOptions(project))

        assert recording_runner.calls == []

    def test_build_failure_skips_unit_and_install(self, go_project, runner_factory):
        project = go_project()
        runner = runner_factory(exit_codes={"build": 1})

        with pytest.raises(BuildError):
            make_pipeline(runner).run(PipelineOptions(project, install=True))

        assert len(runner.calls) == 1
        assert not (project / "widget.service").exists()

    def test_copy_failure_keeps_generated_files(self, go_project, runner_factory):
        project = go_project()
        runner = runner_factory(exit_codes={"cp": 1})

        with pytest.raises(InstallError) as exc_info:
            make_pipeline(runner).run(PipelineOptions(project, install=True))

        assert exc_info.value.step == "copy"
        assert len(runner.calls) == 2
        assert (project / "widget").exists()
        assert (project / "widget.service").exists()

    def test_unreadable_working_directory(self, tmp_path, recording_runner, monkeypatch):
        gone = tmp_path / "gone"
        gone.mkdir()
        monkeypatch.chdir(gone)
        gone.rmdir()

        with pytest.raises(PathResolutionError) as exc_info:
            make_pipeline(recording_runner).run(PipelineOptions(Path("widget")))

        assert exc_info.value.context["path"] == "widget"
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert recording_runner.calls == []
