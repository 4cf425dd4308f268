"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX at the
point where an Error finally leaves the program.
"""

from __future__ import annotations

from itertools import islice
from typing import TYPE_CHECKING

from errcore.core.config import ReportConfig
from errcore.core.error import Cause, Error, iter_chain
from errcore.core.exit_codes import ErrorCode
from errcore.output.console import RichConsole, Style

if TYPE_CHECKING:
    from errcore.output.console import ConsoleProtocol

__all__ = ["error_exit_code", "print_error", "report_error"]


def _text(failure: Cause) -> str:
    if isinstance(failure, Error):
        return str(failure)
    # str() of a bare exception such as OSError() is empty
    return str(failure) or type(failure).__name__


def print_error(
    error: Cause,
    console: ConsoleProtocol,
    config: ReportConfig | None = None,
) -> None:
    """Print an error and, if enabled, its chain of causes.

    A cause whose text repeats the line above is skipped; that is what a
    kind-only wrapper around an exception looks like.
    """
    cfg = config or ReportConfig()
    previous = _text(error)
    console.error(previous)
    if not cfg.show_chain:
        return

    printed = 0
    for cause in islice(iter_chain(error), 1, None):
        if printed >= cfg.max_depth:
            break
        text = _text(cause)
        if text == previous:
            continue
        console.print(f"caused by: {text}", Style.DIM)
        previous = text
        printed += 1


def error_exit_code(error: Cause, config: ReportConfig | None = None) -> int:
    """Get exit code for an error.

    Errors map by kind; any other failure is unclassified.
    """
    cfg = config or ReportConfig()
    if isinstance(error, Error):
        return cfg.exit_code_for(error.kind())
    return int(ErrorCode.OTHER_ERROR)


def report_error(
    error: Cause,
    console: ConsoleProtocol | None = None,
    config: ReportConfig | None = None,
) -> int:
    """Print error to console (stderr by default) and return its exit code.

    Example:
        match load_header(path):
            case Err(error):
                raise SystemExit(report_error(error))
            case Ok(header):
                ...
    """
    print_error(error, console or RichConsole(), config)
    return error_exit_code(error, config)
