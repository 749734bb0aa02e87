# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory functions for creating logger instances."""

import logging
import os
import sys
from typing import Optional, Union

from .default_sink import open_default_sink
from .logger import Logger
from .memory_sink import MemoryLineSink
from .null_logger import NULL_LOGGER
from .severity import Severity
from .severity_logger import SeverityLogger
from .sink import LineSink, StreamLineSink

logger = logging.getLogger(__name__)

SINK_TYPES = ("stdout", "stderr", "file", "memory", "null", "silent")


def _default(value: Optional[str], env_var: str, fallback: str) -> str:
    """Helper to pick an explicit value, then env var, then fallback."""
    return (value or os.getenv(env_var) or fallback)


def _resolve_level(level: Union[Severity, str, None]) -> Severity:
    if isinstance(level, Severity):
        return level
    return Severity.from_name(_default(level, "LOG_LEVEL", "INFO"))


def _create_sink(
    sink_type: str,
    file_prefix: Optional[str],
    directory: Optional[str],
) -> LineSink:
    if sink_type == "stdout":
        return StreamLineSink(sys.stdout)
    if sink_type == "stderr":
        return StreamLineSink(sys.stderr)
    if sink_type == "memory":
        return MemoryLineSink()
    if sink_type == "file":
        prefix = _default(file_prefix, "LOG_FILE_PREFIX", "app")
        return open_default_sink(prefix, directory)
    raise ValueError(
        f"Unknown sink_type: {sink_type}. "
        f"Must be one of: {', '.join(SINK_TYPES)}"
    )


def create_logger(
    level: Union[Severity, str, None] = None,
    sink_type: Optional[str] = None,
    file_prefix: Optional[str] = None,
    directory: Optional[str] = None,
) -> Logger:
    """Factory function to create a logger instance.

    Args:
        level: Lowest emitted severity, as a Severity or a name.
            Defaults to LOG_LEVEL env or "INFO".
        sink_type: Where lines go. Options: "stdout", "stderr", "file",
            "memory", "null" (alias "silent"). Defaults to LOG_SINK env or
            "stdout".
        file_prefix: File name prefix for the "file" sink.
            Defaults to LOG_FILE_PREFIX env or "app".
        directory: Directory for the "file" sink (default: working directory)

    Returns:
        Logger instance; the shared null logger for "null"

    Raises:
        ValueError: If the level or sink_type is not recognized
        SinkOpenError: If the "file" sink cannot be opened

    Example:
        >>> # Plain lines on stdout at INFO and above
        >>> logger = create_logger(level="INFO", sink_type="stdout")
        >>>
        >>> # Timestamped log file in the working directory
        >>> logger = create_logger(level="DEBUG", sink_type="file", file_prefix="SimpleMath")
        >>>
        >>> # Logging disabled
        >>> logger = create_logger(sink_type="null")
    """
    severity = _resolve_level(level)
    sink_type = _default(sink_type, "LOG_SINK", "stdout").lower()

    if sink_type in ("null", "silent"):
        return NULL_LOGGER

    sink = _create_sink(sink_type, file_prefix, directory)
    logger.debug("Created %s severity logger at %s", sink_type, severity.name)
    return SeverityLogger(severity, sink)
