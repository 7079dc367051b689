"""
Diagnostic logging for vbuilder runs.

Each run can append to ~/.vbuilder/vbuilder.log and, when `logging.console`
is set, echo the same records to stderr. Both outputs share the level from
the `[logging]` config section.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig

LOG_FILE_PATH = Path.home() / ".vbuilder" / "vbuilder.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class BuilderLogger(ILogger):
    """
    stdlib logger configured from a LoggingConfig section.

    The rotating log file keeps a few runs of `go build` and `systemctl`
    history without growing unbounded.
    """

    MAX_FILE_SIZE = 10 * 1024 * 1024
    BACKUP_COUNT = 3

    def __init__(
        self,
        config: LoggingConfig,
        log_file: Path | None = None,
        name: str = "vbuilder",
    ) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(config.level.upper())
        self._logger.handlers.clear()
        self._logger.propagate = False

        if config.console:
            self._attach(logging.StreamHandler(sys.stderr))
        if config.file:
            handler = self._open_log_file(log_file or LOG_FILE_PATH)
            if handler is not None:
                self._attach(handler)

    def _attach(self, handler: logging.Handler) -> None:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        self._logger.addHandler(handler)

    def _open_log_file(self, path: Path) -> RotatingFileHandler | None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            return RotatingFileHandler(path, maxBytes=self.MAX_FILE_SIZE, backupCount=self.BACKUP_COUNT)
        except OSError as e:
            # Continue without the log file
            print(f"vbuilder: file logging disabled ({e})", file=sys.stderr)
            return None

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)


class NullLogger(ILogger):
    """Discards everything; used when both outputs are disabled and in tests."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass


def create_logger(config: LoggingConfig) -> ILogger:
    """Create the logger for one run from the `[logging]` config section."""
    if not config.console and not config.file:
        return NullLogger()
    return BuilderLogger(config)
