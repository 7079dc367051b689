"""
Pipeline step services for vbuilder.
"""

from .builder import GoBuilder
from .installer import SystemdInstaller
from .manifest import resolve_module_name
from .pipeline import PipelineOptions, PipelineResult, ProjectSetupPipeline
from .process import CommandRunner

__all__ = [
    "CommandRunner",
    "GoBuilder",
    "PipelineOptions",
    "PipelineResult",
    "ProjectSetupPipeline",
    "SystemdInstaller",
    "resolve_module_name",
]
