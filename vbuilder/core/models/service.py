"""
systemd unit model.

ServiceUnit holds the four values substituted into the unit template and
renders the final text.
"""

from __future__ import annotations

import posixpath

from pydantic import BaseModel, ConfigDict, Field

DESCRIPTION_PREFIX = "vortex.studio"
UNIT_SUFFIX = ".service"

UNIT_TEMPLATE = """[Unit]
Description={description_prefix}/{name} Service
After=network.target

[Service]
ExecStart={exec_start}
Restart=always
User={user}
WorkingDirectory={working_directory}
RestartSec=10

[Install]
WantedBy=multi-user.target
"""


class ServiceUnit(BaseModel):
    """A rendered-on-demand systemd service unit."""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    name: str = Field(min_length=1)
    exec_start: str = Field(min_length=1)
    user: str = ""
    working_directory: str

    @classmethod
    def for_binary(cls, name: str, binary_path: str, user: str) -> ServiceUnit:
        """Build a unit whose working directory is the binary's directory."""
        return cls(
            name=name,
            exec_start=binary_path,
            user=user,
            working_directory=posixpath.dirname(binary_path),
        )

    @property
    def file_name(self) -> str:
        """Unit file name, e.g. `widget.service`."""
        return f"{self.name}{UNIT_SUFFIX}"

    def render(self) -> str:
        """Render the unit file text."""
        return UNIT_TEMPLATE.format(
            description_prefix=DESCRIPTION_PREFIX,
            name=self.name,
            exec_start=self.exec_start,
            user=self.user,
            working_directory=self.working_directory,
        )
