"""
Custom exception hierarchy for vbuilder.

Every pipeline step raises a subclass of VBuilderException so the CLI can
report the failure and stop forward progress without tracebacks.
"""

from __future__ import annotations


class VBuilderException(Exception):
    """
    Base exception for all vbuilder errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (file paths, commands, etc.)
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigFileError(VBuilderException):
    """A TOML config file could not be read or parsed.

    Settings loading records it instead of raising; the CLI reports it as a
    warning and continues with the remaining sources.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Manifest Errors
# =============================================================================


class ManifestError(VBuilderException):
    """Base class for go.mod resolution errors."""

    def __init__(
        self,
        message: str,
        *,
        manifest_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if manifest_path:
            ctx["manifest_path"] = manifest_path
        super().__init__(message, context=ctx, cause=cause)
        self.manifest_path = manifest_path


class ManifestNotFoundError(ManifestError):
    """The go.mod file does not exist or cannot be opened."""

    pass


class ManifestReadError(ManifestError):
    """The go.mod file was opened but reading it failed part way through."""

    pass


class ModuleDeclarationMissingError(ManifestError):
    """No usable `module` directive was found in go.mod."""

    pass


# =============================================================================
# Execution Errors
# =============================================================================


class ExecutionError(VBuilderException):
    """
    Base class for external process errors.

    Carries the failing command and, when the process ran, its exit status.
    """

    def __init__(
        self,
        message: str,
        *,
        command: list[str] | None = None,
        exit_code: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if command:
            ctx["command"] = " ".join(command)
        if exit_code is not None:
            ctx["exit_code"] = exit_code
        super().__init__(message, context=ctx, cause=cause)
        self.command = command
        self.returncode = exit_code


class ProcessLaunchError(ExecutionError):
    """The external program could not be started (missing, not executable)."""

    pass


class BuildError(ExecutionError):
    """`go build` exited non-zero or could not be started."""

    pass


class InstallError(ExecutionError):
    """
    One of the privileged installation commands failed.

    `step` names the state that failed: copy, reload, enable or start.
    """

    def __init__(
        self,
        message: str,
        *,
        step: str,
        command: list[str] | None = None,
        exit_code: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        ctx["step"] = step
        super().__init__(message, command=command, exit_code=exit_code, context=ctx, cause=cause)
        self.step = step


# =============================================================================
# Filesystem Errors
# =============================================================================


class PathResolutionError(VBuilderException):
    """An absolute path for the project or its binary could not be determined."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, context=ctx, cause=cause)


class DescriptorWriteError(VBuilderException):
    """The rendered .service file could not be written."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, context=ctx, cause=cause)
