"""
go.mod module name resolution.

The service name is the last path segment of the module declared in the
project's go.mod, e.g. `module github.com/acme/widget` gives `widget`.
"""

from pathlib import Path

from ..core.exceptions import (
    ManifestNotFoundError,
    ManifestReadError,
    ModuleDeclarationMissingError,
)

MANIFEST_NAME = "go.mod"
MODULE_KEYWORD = "module"

_QUOTES = "\"`"


def manifest_path(project_path: Path | str) -> Path:
    """Path of the go.mod file for a project directory."""
    return Path(project_path) / MANIFEST_NAME


def parse_module_path(line: str) -> str | None:
    """
    Extract the module path from a single go.mod line.

    Returns:
        The module path, or None if the line is not a module directive.
    """
    parts = line.split()
    if len(parts) < 2 or parts[0] != MODULE_KEYWORD:
        return None
    return parts[1].strip(_QUOTES)


def service_name_from_module(module_path: str) -> str:
    """Return the final `/`-separated segment of a module path."""
    return module_path.rstrip("/").rsplit("/", 1)[-1]


def resolve_module_name(project_path: Path | str) -> str:
    """
    Resolve the service name from a project's go.mod.

    Args:
        project_path: Go project directory

    Returns:
        The last segment of the declared module path

    Raises:
        ManifestNotFoundError: go.mod cannot be opened
        ManifestReadError: go.mod could not be read, or the module path is not UTF-8
        ModuleDeclarationMissingError: no module directive was found
    """
    path = manifest_path(project_path)

    try:
        # Invalid bytes elsewhere in the file must not hide the module line
        f = open(path, encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        raise ManifestNotFoundError(
            f"failed to open {MANIFEST_NAME} file: {e.strerror or e}",
            manifest_path=str(path),
            cause=e,
        ) from e

    with f:
        try:
            for line in f:
                module_path = parse_module_path(line)
                if module_path is not None:
                    return _service_name(module_path, path)
        except OSError as e:
            raise ManifestReadError(
                f"failed to read {MANIFEST_NAME} file: {e.strerror or e}",
                manifest_path=str(path),
                cause=e,
            ) from e

    raise ModuleDeclarationMissingError(
        f"module name not found in {MANIFEST_NAME}",
        manifest_path=str(path),
    )


def _service_name(module_path: str, path: Path) -> str:
    try:
        module_path.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ManifestReadError(
            f"module path in {MANIFEST_NAME} is not valid UTF-8",
            manifest_path=str(path),
            cause=e,
        ) from e

    name = service_name_from_module(module_path)
    if not name:
        raise ModuleDeclarationMissingError(
            f"module path {module_path!r} in {MANIFEST_NAME} has no usable name",
            manifest_path=str(path),
        )
    return name
