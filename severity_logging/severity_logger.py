# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Severity-filtering logger that writes through a line sink."""

from typing import Any

from .logger import Logger
from .severity import Severity
from .sink import LineSink


class SeverityLogger(Logger):
    """Logger that drops messages below a threshold and labels the rest.

    Enabled messages are written to the sink as ``"<SEVERITY> " + template``
    with the caller's arguments untouched, so formatting happens in the sink.
    The sink is borrowed: closing it is left to whoever created it.

    Example:
        >>> sink = MemoryLineSink()
        >>> logger = SeverityLogger(Severity.INFO, sink)
        >>> logger.info("%d + %d is equal to %d", 3, 5, 8)
        >>> sink.lines
        ['INFO 3 + 5 is equal to 8']
    """

    def __init__(self, threshold: Severity, sink: LineSink):
        """Initialize severity logger.

        Args:
            threshold: Lowest severity that is emitted
            sink: Sink that formats and writes emitted lines
        """
        self._threshold = threshold
        self._sink = sink

    @property
    def threshold(self) -> Severity:
        return self._threshold

    @property
    def sink(self) -> LineSink:
        return self._sink

    def is_enabled(self, severity: Severity) -> bool:
        return severity >= self._threshold

    def log(self, severity: Severity, template: str, *args: Any) -> None:
        if not self.is_enabled(severity):
            return
        self._sink.write(f"{severity.label} {template}", *args)

    def __repr__(self) -> str:
        threshold = getattr(self._threshold, "name", self._threshold)
        return f"SeverityLogger(threshold={threshold}, sink={self._sink!r})"
