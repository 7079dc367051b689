"""
Pydantic models for vbuilder.

All models use Pydantic v2.
"""

from .config import BuildConfig, InstallConfig, LoggingConfig
from .service import ServiceUnit

__all__ = [
    "BuildConfig",
    "InstallConfig",
    "LoggingConfig",
    "ServiceUnit",
]
