# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Ordered severity levels."""

from enum import IntEnum


class Severity(IntEnum):
    """Log severities in increasing order of seriousness.

    Filtering relies only on the ordering: a logger configured with a
    threshold emits every severity greater than or equal to it.
    """

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4

    @property
    def label(self) -> str:
        """Upper-case token written at the start of emitted lines."""
        return self.name

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        """Parse a severity name.

        Args:
            name: Case-insensitive severity name (e.g. "info", "WARNING").
                "WARN" and "CRITICAL" are accepted as aliases.

        Returns:
            Matching Severity

        Raises:
            ValueError: If the name is not a known severity
        """
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(
                f"Invalid log level: {name}. Must be one of {[s.name for s in cls]}"
            ) from exc


_ALIASES = {
    "WARN": "WARNING",
    "CRITICAL": "FATAL",
}
