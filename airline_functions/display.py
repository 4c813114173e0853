"""
display.py - Line-Oriented Display Sink

Every lesson writes its observations through a Display. A display prints
each line when verbose and keeps it in ``lines`` when recording, so the
interactive tutorial and the tests observe exactly the same output.
"""

from __future__ import annotations
from typing import Any, List, Optional, TextIO
import sys


class Display:
    """
    Callable display sink, used like a console log.

    Example:
        display = Display(verbose=False)
        display("Hello", 42)
        display.lines   # ['Hello 42']
    """

    def __init__(
        self,
        verbose: bool = True,
        record: bool = True,
        stream: Optional[TextIO] = None,
    ):
        """
        Create a display.

        Args:
            verbose: Print each line (default: True)
            record: Keep each line in ``lines`` (default: True)
            stream: Where verbose output goes (default: sys.stdout at write time)
        """
        self.verbose = verbose
        self.record = record
        self.stream = stream
        self.lines: List[str] = []

    def __call__(self, *parts: Any) -> None:
        line = " ".join(str(part) for part in parts)
        if self.record:
            self.lines.append(line)
        if self.verbose:
            print(line, file=self.stream or sys.stdout)

    def clear(self) -> None:
        """Forget all recorded lines."""
        self.lines.clear()

    def contains(self, text: str) -> bool:
        """True if any recorded line contains ``text``."""
        return any(text in line for line in self.lines)


# Print-only display used when a caller does not supply one.
CONSOLE = Display(verbose=True, record=False)
