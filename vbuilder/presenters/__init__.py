"""
Presenters for vbuilder output.
"""

from .console import ConsolePresenter

__all__ = ["ConsolePresenter"]
