"""
Console presenter for terminal output.

Progress lines ("Service file created at: ...") go to stdout; errors and
warnings go to stderr. ANSI colors are used only when stdout is a terminal.
"""

import sys

from ..core.interfaces.presenter import IPresenter

RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RESET = "\033[0m"


class ConsolePresenter(IPresenter):
    """Writes pipeline progress and failures to the terminal."""

    def __init__(self, out=None, err=None) -> None:
        self._out = out or sys.stdout
        self._err = err or sys.stderr
        self._color = self._out.isatty()

    def print(self, message: str) -> None:
        self._emit(message, self._out)

    def print_error(self, message: str) -> None:
        self._emit(f"Error: {message}", self._err, RED)

    def print_warning(self, message: str) -> None:
        self._emit(f"Warning: {message}", self._err, YELLOW)

    def print_success(self, message: str) -> None:
        self._emit(message, self._out, GREEN)

    def _emit(self, text: str, stream, color: str | None = None) -> None:
        if color and self._color:
            text = f"{color}{text}{RESET}"
        print(text, file=stream)
