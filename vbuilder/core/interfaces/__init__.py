"""
Interface definitions for vbuilder services.
"""

from .logger import ILogger
from .presenter import IPresenter

__all__ = [
    "ILogger",
    "IPresenter",
]
