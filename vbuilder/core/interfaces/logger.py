"""
Logger interface for build and install diagnostics.

The pipeline reports progress to the user through IPresenter; ILogger
records the same steps, plus the exact commands run, for later inspection.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Diagnostic log sink taking stdlib-style `%` format arguments."""

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Record command lines and exit statuses."""

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Record a completed pipeline step."""

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Record a problem the run continues past, such as a broken config file."""

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Record the step failure that ended a run."""
