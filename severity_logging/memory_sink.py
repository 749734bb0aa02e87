# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""In-memory sink for testing."""

import threading
from typing import Any

from .sink import LineSink, format_line


class MemoryLineSink(LineSink):
    """Sink that stores formatted lines in memory without output.

    Useful for testing to verify logging behavior without touching files or
    cluttering test output. Lines are stored without the trailing newline.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._lock = threading.Lock()

    def write(self, template: str, *args: Any) -> None:
        line = format_line(template, *args)
        with self._lock:
            self._lines.append(line)

    @property
    def lines(self) -> list[str]:
        """Snapshot of the captured lines, oldest first."""
        with self._lock:
            return list(self._lines)

    def clear(self) -> None:
        """Clear all stored lines (useful for testing)."""
        with self._lock:
            self._lines.clear()

    def has_line(self, text: str) -> bool:
        """Check if any captured line contains ``text`` (substring match)."""
        return any(text in line for line in self.lines)
