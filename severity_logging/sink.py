# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Line sinks: the writers behind a severity logger.

A sink receives a printf-style template plus positional arguments and writes
exactly one newline-terminated line per call. Sinks serialize concurrent
writers themselves; the loggers on top of them hold no locks.
"""

import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, Optional, TextIO

# Date, time and microseconds, e.g. "2016/10/10 18:09:42.444874 "
TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S.%f "


def format_line(template: str, *args: Any) -> str:
    """Substitute ``args`` into ``template``.

    Without arguments the template is returned verbatim, so a literal ``%``
    in a plain message does not need escaping.
    """
    if args:
        return template % args
    return template


class LineSink(ABC):
    """Abstract base class for line sinks."""

    @abstractmethod
    def write(self, template: str, *args: Any) -> None:
        """Format and write one line.

        Args:
            template: printf-style template
            *args: Values substituted into the template
        """
        pass


class StreamLineSink(LineSink):
    """Thread-safe sink writing lines to a text stream.

    Args:
        stream: Text stream to write to (file, sys.stdout, StringIO, ...)
        timestamps: Prefix each line with the local date and time
        owns_stream: Close the stream in :meth:`close`
        clock: Source of the current time for timestamps
    """

    def __init__(
        self,
        stream: TextIO,
        timestamps: bool = False,
        owns_stream: bool = False,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._stream = stream
        self._timestamps = timestamps
        self._owns_stream = owns_stream
        self._clock = clock or datetime.now
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream

    @property
    def timestamps(self) -> bool:
        return self._timestamps

    def write(self, template: str, *args: Any) -> None:
        line = format_line(template, *args)
        if not line.endswith("\n"):
            line += "\n"
        with self._lock:
            if self._timestamps:
                line = self._clock().strftime(TIMESTAMP_FORMAT) + line
            self._stream.write(line)
            self._stream.flush()

    def close(self) -> None:
        """Close the underlying stream if this sink owns it."""
        if self._owns_stream:
            with self._lock:
                self._stream.close()

    def __enter__(self) -> "StreamLineSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        name = getattr(self._stream, "name", type(self._stream).__name__)
        return f"StreamLineSink({name!r}, timestamps={self._timestamps})"


class LoggingLineSink(LineSink):
    """Sink that forwards lines to a configured stdlib logger.

    Template and arguments are passed through unformatted, so the stdlib
    formats lazily and its handlers provide the locking and any timestamp.

    Unless ``level`` is given, each line is logged at the stdlib level
    matching its leading severity token (FATAL maps to CRITICAL), so the
    stdlib logger's own level does not drop serious lines.

    Args:
        logger: Target stdlib logger
        level: Fixed stdlib level for every line
    """

    def __init__(self, logger: logging.Logger, level: Optional[int] = None):
        self._logger = logger
        self._level = level

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def _level_for(self, template: str) -> int:
        if self._level is not None:
            return self._level
        token = template.split(" ", 1)[0]
        return _STDLIB_LEVELS.get(token, logging.INFO)

    def write(self, template: str, *args: Any) -> None:
        self._logger.log(self._level_for(template), template, *args)

    def __repr__(self) -> str:
        return f"LoggingLineSink({self._logger.name!r})"


_STDLIB_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "FATAL": logging.CRITICAL,
}
