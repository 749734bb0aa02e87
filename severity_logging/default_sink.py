# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Default file sink.

Creates a uniquely named, timestamping log file in the working directory:

    App_2016-10-10--18-09-42.44439598_32859.log

Each line written to it starts with the local date and time, for example
``2016/10/10 18:09:42.444874 INFO 3 + 5 is equal to 8``.
"""

import logging
import os
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, TextIO

from .exceptions import SinkOpenError
from .sink import StreamLineSink

logger = logging.getLogger(__name__)


class FileLineSink(StreamLineSink):
    """Timestamping sink that owns an open log file."""

    def __init__(
        self,
        path: Path,
        stream: TextIO,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        super().__init__(stream, timestamps=True, owns_stream=True, clock=clock)
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def __repr__(self) -> str:
        return f"FileLineSink({str(self._path)!r})"


def _file_timestamp(timestamp_ns: int) -> str:
    """Render epoch nanoseconds as ``YYYY-MM-DD--HH-MM-SS.ffffffff`` local time.

    The fraction keeps at most 8 digits, drops trailing zeros and is omitted
    entirely (with its dot) when zero.
    """
    seconds, nanos = divmod(timestamp_ns, 1_000_000_000)
    stamp = datetime.fromtimestamp(seconds).strftime("%Y-%m-%d--%H-%M-%S")
    fraction = f"{nanos:09d}"[:8].rstrip("0")
    if fraction:
        stamp += "." + fraction
    return stamp


def default_log_file_name(
    prefix: str,
    timestamp_ns: Optional[int] = None,
    pid: Optional[int] = None,
) -> str:
    """Build ``<prefix>_<timestamp>_<pid>.log``.

    Args:
        prefix: Leading part of the file name
        timestamp_ns: Epoch time in nanoseconds (default: now)
        pid: Process id (default: current process)

    Returns:
        File name without directory
    """
    if timestamp_ns is None:
        timestamp_ns = time.time_ns()
    if pid is None:
        pid = os.getpid()
    return f"{prefix}_{_file_timestamp(timestamp_ns)}_{pid}.log"


def open_default_sink(
    prefix: str,
    directory: Optional[str] = None,
) -> FileLineSink:
    """Open a new timestamping log file sink.

    The file is created (or opened write-only without truncation if it
    somehow exists) in ``directory``, defaulting to the current working
    directory.

    Args:
        prefix: Leading part of the file name
        directory: Directory to create the file in

    Returns:
        FileLineSink owning the open file; close it when done

    Raises:
        SinkOpenError: If the file cannot be opened
    """
    path = Path(directory or Path.cwd()) / default_log_file_name(prefix)
    try:
        fd = os.open(path, os.O_CREAT | os.O_WRONLY, 0o666)
    except OSError as e:
        raise SinkOpenError(str(path), e) from e
    try:
        stream = os.fdopen(fd, "w", encoding="utf-8")
    except OSError as e:
        os.close(fd)
        raise SinkOpenError(str(path), e) from e

    logger.debug("Opened log file %s", path)
    return FileLineSink(path, stream)


def open_default_sink_or_exit(
    prefix: str,
    directory: Optional[str] = None,
) -> FileLineSink:
    """Open the default sink, terminating the process if that fails.

    For programs that cannot run without a log destination. Library code and
    services should call :func:`open_default_sink` and handle the error.

    Raises:
        SystemExit: If the file cannot be opened
    """
    try:
        return open_default_sink(prefix, directory)
    except SinkOpenError as e:
        logger.critical("%s", e)
        raise SystemExit(1) from e
