"""
Shared pytest fixtures for vbuilder tests.

This module provides:
- isolate_user_config: keeps tests away from ~/.vbuilder and the log file
- go_project: factory creating a project directory with a go.mod
- recording_runner: CommandRunner stand-in that records commands
"""

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest


class RecordingRunner:
    """
    Records every command instead of launching it.

    Exit statuses are looked up by the first command word that matches a key
    in `exit_codes` (e.g. {"daemon-reload": 1}); unmatched commands exit 0.
    When `create_outputs` is set, `go build -o <path>` creates `<path>`.
    """

    def __init__(self, exit_codes: dict[str, int] | None = None, create_outputs: bool = True):
        self.exit_codes = exit_codes or {}
        self.create_outputs = create_outputs
        self.calls: list[tuple[list[str], Path | str | None]] = []

    @property
    def commands(self) -> list[list[str]]:
        return [command for command, _ in self.calls]

    def run(self, command: Sequence[str], cwd: Path | str | None = None) -> int:
        argv = [str(part) for part in command]
        self.calls.append((argv, cwd))

        for word in argv:
            if word in self.exit_codes:
                return self.exit_codes[word]

        if self.create_outputs and len(argv) > 1 and argv[1] == "build" and "-o" in argv:
            output = Path(argv[argv.index("-o") + 1])
            output.write_text("#!/bin/sh\n")
            output.chmod(0o755)
        return 0


@pytest.fixture(autouse=True)
def isolate_user_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch):
    """Point the user config file at an empty location and disable file logging."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr("vbuilder.core.settings.USER_CONFIG_PATH", home / ".vbuilder" / "config.toml")
    monkeypatch.setenv("VBUILDER_LOGGING__FILE", "false")
    for name in ("VBUILDER_LOGGING__CONSOLE", "VBUILDER_BUILD__GO_EXECUTABLE", "VBUILDER_INSTALL__UNIT_DIR"):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def go_project(tmp_path: Path) -> Callable[..., Path]:
    """
    Provide a factory that creates a Go project directory.

    Returns:
        A callable taking the go.mod content (or None for no go.mod)
        and an optional directory name.
    """

    def make(go_mod: str | None = "module github.com/acme/widget\n\ngo 1.22\n", name: str = "widget") -> Path:
        project = tmp_path / name
        project.mkdir()
        if go_mod is not None:
            (project / "go.mod").write_text(go_mod)
        return project

    return make


@pytest.fixture
def recording_runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def runner_factory() -> Callable[..., RecordingRunner]:
    """Factory for RecordingRunner instances with custom exit statuses."""
    return RecordingRunner
