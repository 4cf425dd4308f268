"""Coarse failure classification.

An ErrorKind says what sort of problem occurred (bad data, I/O, something else)
independently of the concrete exception that caused it. Callers branch on the
kind; they never need to inspect the cause type.
"""

from __future__ import annotations

from enum import Enum, auto

__all__ = ["ErrorKind"]


class ErrorKind(Enum):
    """Closed set of failure kinds.

    The display names ("InvalidData", "Io", "Other") are stable and used when
    an error carries neither a message nor a cause.
    """

    INVALID_DATA = auto()
    IO = auto()
    OTHER = auto()

    def __str__(self) -> str:
        """Return the display name."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @property
    def key(self) -> str:
        """Lower snake-case key, as used in config files."""
        return self.name.lower()

    @classmethod
    def from_key(cls, key: str) -> ErrorKind | None:
        """Look up a kind by config key, or None if unknown."""
        try:
            return cls[key.strip().upper()]
        except KeyError:
            return None
