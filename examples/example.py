#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Example usage of the severity_logging module.

This script demonstrates filtering by severity, guarding expensive log
arguments, and writing to the default timestamped log file.
"""

import sys

from severity_logging import (
    NULL_LOGGER,
    Severity,
    SeverityLogger,
    StreamLineSink,
    open_default_sink,
)


def expensive_debug_dump() -> str:
    """Stand-in for something too slow to run in production."""
    return "Hard to generate string"


def main():
    """Demonstrate logging functionality."""

    print("=" * 60)
    print("Severity Logging Examples")
    print("=" * 60)
    print()

    # Example 1: plain lines on stdout, WARNING and above
    print("Example 1: WARNING threshold on stdout")
    print("-" * 60)
    logger = SeverityLogger(Severity.WARNING, StreamLineSink(sys.stdout))
    logger.error("%s", "This is an error log")
    logger.warning("%s", "This is a warning log")
    logger.debug("%s", "This debug log is suppressed")
    print()

    # Example 2: skip building arguments that would be dropped
    print("Example 2: Guarding expensive arguments")
    print("-" * 60)
    logger = SeverityLogger(Severity.DEBUG, StreamLineSink(sys.stdout))
    if logger.is_debug_enabled():
        logger.debug("The state of the process is: %s", expensive_debug_dump())
    print()

    # Example 3: default log file in the working directory
    print("Example 3: Default timestamped log file")
    print("-" * 60)
    with open_default_sink("SimpleMath") as sink:
        logger = SeverityLogger(Severity.INFO, sink)
        logger.info("%d + %d is equal to %d", 3, 5, 8)
        logger.debug("%s", "Addition is complete")
    print(f"Wrote {sink.path}")
    print()

    # Example 4: logging disabled for a component
    print("Example 4: Null logger")
    print("-" * 60)
    NULL_LOGGER.error("%s", "Nobody sees this")
    print(f"is_fatal_enabled: {NULL_LOGGER.is_fatal_enabled()}")


if __name__ == "__main__":
    main()
