"""
systemd unit file generation.
"""

import os
from pathlib import Path

from ..core.exceptions import DescriptorWriteError
from ..core.models.service import ServiceUnit

UNIT_FILE_MODE = 0o644


def current_user() -> str:
    """User the service runs as, taken from $USER."""
    return os.environ.get("USER", "")


def render_unit(service_name: str, binary_path: Path | str, user: str | None = None) -> str:
    """Render unit file content.

    Args:
        service_name: Unit display name
        binary_path: Absolute path to the service binary
        user: User to run the service as (defaults to $USER)

    Returns:
        systemd unit file content
    """
    unit = ServiceUnit.for_binary(
        name=service_name,
        binary_path=str(binary_path),
        user=current_user() if user is None else user,
    )
    return unit.render()


def unit_file_path(project_dir: Path | str, service_name: str) -> Path:
    """Where the unit file is written inside the project."""
    return Path(project_dir) / f"{service_name}.service"


def write_unit_file(path: Path | str, content: str) -> Path:
    """
    Write unit content to `path`, replacing any existing file.

    Raises:
        DescriptorWriteError: The file could not be written
    """
    path = Path(path)
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, UNIT_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise DescriptorWriteError(
            f"failed to write service file: {e.strerror or e}",
            path=str(path),
            cause=e,
        ) from e
    return path
