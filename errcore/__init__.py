"""Classified errors with preserved causes, and Result adapters that produce them."""

from errcore.core import (
    Err,
    Error,
    ErrorKind,
    Failure,
    Ok,
    Result,
    iter_chain,
    try_call,
    try_catching,
)

__version__ = "0.1.0"

__all__ = [
    "Err",
    "Error",
    "ErrorKind",
    "Failure",
    "Ok",
    "Result",
    "iter_chain",
    "try_call",
    "try_catching",
    "__version__",
]
