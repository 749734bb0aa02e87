# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Severity Logging.

A small severity-filtering facade over a line-oriented text sink. Calls are
classified into five ordered severities (DEBUG < INFO < WARNING < ERROR <
FATAL); calls below the configured threshold are dropped and the rest are
written with the severity name as the leading token.

Example:
    >>> import sys
    >>> from severity_logging import Severity, SeverityLogger, StreamLineSink
    >>>
    >>> logger = SeverityLogger(Severity.WARNING, StreamLineSink(sys.stdout))
    >>> logger.error("%s", "This is an error log")
    ERROR This is an error log
    >>> logger.debug("%s", "This is a debug log")
    >>>
    >>> # Skip building expensive arguments when they would be dropped
    >>> if logger.is_debug_enabled():
    ...     logger.debug("The state of the process is: %s", dump_state())
"""

__version__ = "0.1.0"

from .default_sink import (
    FileLineSink,
    default_log_file_name,
    open_default_sink,
    open_default_sink_or_exit,
)
from .exceptions import SeverityLoggingError, SinkOpenError
from .factory import create_logger
from .logger import Logger
from .memory_sink import MemoryLineSink
from .null_logger import NULL_LOGGER, NullLogger, ensure_logger
from .severity import Severity
from .severity_logger import SeverityLogger
from .sink import LineSink, LoggingLineSink, StreamLineSink

__all__ = [
    "__version__",
    "FileLineSink",
    "LineSink",
    "Logger",
    "LoggingLineSink",
    "MemoryLineSink",
    "NULL_LOGGER",
    "NullLogger",
    "Severity",
    "SeverityLogger",
    "SeverityLoggingError",
    "SinkOpenError",
    "StreamLineSink",
    "create_logger",
    "default_log_file_name",
    "ensure_logger",
    "open_default_sink",
    "open_default_sink_or_exit",
]
