"""
Core types for vbuilder.

This module provides:
- Custom exception hierarchy
- Configuration models and settings loading
- Service interfaces (logger, presenter)
"""

from .exceptions import (
    BuildError,
    ConfigFileError,
    DescriptorWriteError,
    ExecutionError,
    InstallError,
    ManifestError,
    ManifestNotFoundError,
    ManifestReadError,
    ModuleDeclarationMissingError,
    PathResolutionError,
    ProcessLaunchError,
    VBuilderException,
)

__all__ = [
    "BuildError",
    "ConfigFileError",
    "DescriptorWriteError",
    "ExecutionError",
    "InstallError",
    "ManifestError",
    "ManifestNotFoundError",
    "ManifestReadError",
    "ModuleDeclarationMissingError",
    "PathResolutionError",
    "ProcessLaunchError",
    "VBuilderException",
]
