"""
Unit tests for systemd unit rendering and writing.
"""

import stat

import pytest
from pydantic import ValidationError

from vbuilder.core.exceptions import DescriptorWriteError
from vbuilder.core.models.service import ServiceUnit
from vbuilder.services.unit_file import render_unit, unit_file_path, write_unit_file

EXPECTED_UNIT = """[Unit]
Description=vortex.studio/widget Service
After=network.target

[Service]
ExecStart=/srv/widget/widget
Restart=always
User=deploy
WorkingDirectory=/srv/widget
RestartSec=10

[Install]
WantedBy=multi-user.target
"""


class TestRenderUnit:
    def test_matches_template_exactly(self):
        assert render_unit("widget", "/srv/widget/widget", user="deploy") == EXPECTED_UNIT

    def test_user_defaults_to_environment(self, monkeypatch):
        monkeypatch.setenv("USER", "deploy")
        assert render_unit("widget", "/srv/widget/widget") == EXPECTED_UNIT

    def test_unset_user_renders_empty(self, monkeypatch):
        monkeypatch.delenv("USER", raising=False)
        content = render_unit("widget", "/srv/widget/widget")
        assert "\nUser=\n" in content

    def test_working_directory_is_binary_directory(self):
        content = render_unit("api", "/home/dev/projects/api/api", user="dev")
        assert "ExecStart=/home/dev/projects/api/api\n" in content
        assert "WorkingDirectory=/home/dev/projects/api\n" in content
        assert "Description=vortex.studio/api Service\n" in content

    def test_restart_policy_is_fixed(self):
        content = render_unit("api", "/opt/api/api", user="dev")
        assert "Restart=always\n" in content
        assert "RestartSec=10\n" in content
        assert content.endswith("[Install]\nWantedBy=multi-user.target\n")


class TestServiceUnit:
    def test_file_name(self):
        unit = ServiceUnit.for_binary("widget", "/srv/widget/widget", "deploy")
        assert unit.file_name == "widget.service"

    def test_is_immutable(self):
        unit = ServiceUnit.for_binary("widget", "/srv/widget/widget", "deploy")
        with pytest.raises(ValidationError):
            unit.name = "other"

    def test_rejects_empty_name(self):
        with pytest.raises(ValidationError):
            ServiceUnit.for_binary("", "/srv/widget/widget", "deploy")


class TestWriteUnitFile:
    def test_writes_content(self, tmp_path):
        path = unit_file_path(tmp_path, "widget")

        written = write_unit_file(path, EXPECTED_UNIT)

        assert written == tmp_path / "widget.service"
        assert written.read_text() == EXPECTED_UNIT

    def test_file_is_not_executable(self, tmp_path):
        path = write_unit_file(tmp_path / "widget.service", EXPECTED_UNIT)

        mode = stat.S_IMODE(path.stat().st_mode)
        assert mode & 0o111 == 0
        assert mode & stat.S_IRUSR
        assert mode & stat.S_IWUSR

    def test_overwrites_existing_file(self, tmp_path):
        path = tmp_path / "widget.service"
        path.write_text("stale content that is much longer than the new unit" * 100)

        write_unit_file(path, EXPECTED_UNIT)

        assert path.read_text() == EXPECTED_UNIT

    def test_unwritable_location_raises(self, tmp_path):
        path = tmp_path / "missing-dir" / "widget.service"

        with pytest.raises(DescriptorWriteError) as exc_info:
            write_unit_file(path, EXPECTED_UNIT)

        assert exc_info.value.context["path"] == str(path)
