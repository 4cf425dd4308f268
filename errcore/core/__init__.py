"""Core error types and result adaptation."""

from .config import ReportConfig, load_config, load_config_or_default
from .error import DEFAULT_CONVERSIONS, Cause, Error, Failure, iter_chain, source_of
from .exit_codes import ErrorCode
from .kind import ErrorKind
from .result import Err, Ok, Result, is_err, is_ok, try_call, try_catching

__all__ = [
    # config
    "ReportConfig",
    "load_config",
    "load_config_or_default",
    # error
    "Cause",
    "DEFAULT_CONVERSIONS",
    "Error",
    "Failure",
    "iter_chain",
    "source_of",
    # exit codes
    "ErrorCode",
    # kind
    "ErrorKind",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    "try_call",
    "try_catching",
]
