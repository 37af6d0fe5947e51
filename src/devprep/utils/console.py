"""Human-readable status output."""

import sys
from typing import Optional, TextIO

RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[0;34m"
RESET = "\033[0m"


class Console:
    """Prints marked status lines to stderr.

    Markers:
        [+] progress, [-] error, [!] warning, [i] information
    """

    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None):
        self.stream = stream if stream is not None else sys.stderr
        if color is None:
            color = hasattr(self.stream, "isatty") and self.stream.isatty()
        self.color = color

    def _emit(self, marker: str, color: str, message: str) -> None:
        if self.color:
            marker = f"{color}{marker}{RESET}"
        print(f"{marker} {message}", file=self.stream)

    def status(self, message: str) -> None:
        self._emit("[+]", GREEN, message)

    def error(self, message: str) -> None:
        self._emit("[-]", RED, message)

    def warning(self, message: str) -> None:
        self._emit("[!]", YELLOW, message)

    def info(self, message: str) -> None:
        self._emit("[i]", BLUE, message)

    def line(self, message: str = "") -> None:
        """Print an unmarked line."""
        print(message, file=self.stream)
