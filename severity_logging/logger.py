# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Abstract logger interface."""

from abc import ABC, abstractmethod
from typing import Any

from .severity import Severity


class Logger(ABC):
    """Abstract base class for severity loggers.

    Subclasses implement :meth:`log` and :meth:`is_enabled`; the per-severity
    methods are thin shortcuts over those two.
    """

    @abstractmethod
    def log(self, severity: Severity, template: str, *args: Any) -> None:
        """Log a message at the given severity.

        Args:
            severity: Severity of the message
            template: printf-style template with positional placeholders
            *args: Values substituted into the template
        """
        pass

    @abstractmethod
    def is_enabled(self, severity: Severity) -> bool:
        """Return True if messages at the given severity would be emitted.

        Args:
            severity: Severity to check
        """
        pass

    def debug(self, template: str, *args: Any) -> None:
        """Log a debug-level message."""
        self.log(Severity.DEBUG, template, *args)

    def info(self, template: str, *args: Any) -> None:
        """Log an info-level message."""
        self.log(Severity.INFO, template, *args)

    def warning(self, template: str, *args: Any) -> None:
        """Log a warning-level message."""
        self.log(Severity.WARNING, template, *args)

    def error(self, template: str, *args: Any) -> None:
        """Log an error-level message."""
        self.log(Severity.ERROR, template, *args)

    def fatal(self, template: str, *args: Any) -> None:
        """Log a fatal-level message.

        Only logs; the process keeps running.
        """
        self.log(Severity.FATAL, template, *args)

    def is_debug_enabled(self) -> bool:
        """Return True if debug-level messages would be emitted."""
        return self.is_enabled(Severity.DEBUG)

    def is_info_enabled(self) -> bool:
        """Return True if info-level messages would be emitted."""
        return self.is_enabled(Severity.INFO)

    def is_warning_enabled(self) -> bool:
        """Return True if warning-level messages would be emitted."""
        return self.is_enabled(Severity.WARNING)

    def is_error_enabled(self) -> bool:
        """Return True if error-level messages would be emitted."""
        return self.is_enabled(Severity.ERROR)

    def is_fatal_enabled(self) -> bool:
        """Return True if fatal-level messages would be emitted."""
        return self.is_enabled(Severity.FATAL)
