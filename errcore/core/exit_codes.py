"""Process exit codes for reporting an Error at a program boundary.

The core never exits; a boundary that ends the process looks up the code for
the error's kind here (or in a ReportConfig override).
"""

from __future__ import annotations

from enum import IntEnum

from .kind import ErrorKind

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for errors surfaced to a shell.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: Unclassified failure (ErrorKind.OTHER)
    - 2: Invalid data (ErrorKind.INVALID_DATA)
    - 3: I/O failure (ErrorKind.IO)
    """

    OK = 0
    OTHER_ERROR = 1
    DATA_ERROR = 2
    IO_ERROR = 3

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        """Check if this code indicates success."""
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        """Check if this code indicates an error."""
        return self != ErrorCode.OK

    @classmethod
    def for_kind(cls, kind: ErrorKind) -> ErrorCode:
        """Default exit code for an error kind."""
        match kind:
            case ErrorKind.INVALID_DATA:
                return cls.DATA_ERROR
            case ErrorKind.IO:
                return cls.IO_ERROR
            case ErrorKind.OTHER:
                return cls.OTHER_ERROR
