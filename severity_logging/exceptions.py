# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Exceptions for severity logging."""


class SeverityLoggingError(Exception):
    """Base exception for severity logging errors."""
    pass


class SinkOpenError(SeverityLoggingError):
    """Raised when a log file sink cannot be opened."""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        super().__init__(f"Failed to open log file {path}: {cause}")
