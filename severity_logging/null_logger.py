# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Null logger used where no logger is configured."""

from typing import Any, Optional

from .logger import Logger
from .severity import Severity


class NullLogger(Logger):
    """Logger that never emits anything.

    Stands in for "no logger configured", so components can hold a logger
    unconditionally and skip None checks. Every query returns False, which
    also lets callers skip building expensive log arguments.
    """

    def log(self, severity: Severity, template: str, *args: Any) -> None:
        pass

    def is_enabled(self, severity: Severity) -> bool:
        return False

    def __repr__(self) -> str:
        return "NullLogger()"


NULL_LOGGER = NullLogger()


def ensure_logger(logger: Optional[Logger]) -> Logger:
    """Return ``logger``, or the shared null logger when it is None."""
    return NULL_LOGGER if logger is None else logger
