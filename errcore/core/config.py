"""Typed reporting configuration.

Controls how an Error is presented when it reaches a program boundary: whether
the cause chain is printed, how deep, and which exit code each kind maps to.

Example config (errcore.toml, or [tool.errcore] in pyproject.toml):

    [report]
    show_chain = true
    max_depth = 8

    [exit_codes]
    invalid_data = 65
    io = 74
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from .error import Error
from .exit_codes import ErrorCode
from .kind import ErrorKind
from .result import Err, Ok, Result, try_catching
from .structured import StrDict, get_bool, get_int, get_table

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ReportConfig",
    "load_config",
    "load_config_or_default",
]

DEFAULT_MAX_DEPTH = 8


def _no_overrides() -> Mapping[ErrorKind, int]:
    """Factory for an empty, read-only override table."""
    return MappingProxyType({})


def _invalid(message: str) -> Err[Error]:
    return Err(Error.with_message(ErrorKind.INVALID_DATA, message))


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """How errors are reported at a program boundary.

    Attributes:
        show_chain: Print one "caused by" line per underlying cause.
        max_depth: Maximum number of causes printed.
        exit_codes: Per-kind exit code overrides.
    """

    show_chain: bool = True
    max_depth: int = DEFAULT_MAX_DEPTH
    exit_codes: Mapping[ErrorKind, int] = field(default_factory=_no_overrides)

    def exit_code_for(self, kind: ErrorKind) -> int:
        """Exit code for kind: the override if configured, else the default."""
        override = self.exit_codes.get(kind)
        if override is not None:
            return override
        return int(ErrorCode.for_kind(kind))

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Result[ReportConfig, Error]:
        """Create ReportConfig from a mapping (parsed TOML)."""
        for name in ("report", "exit_codes"):
            if name in data and get_table(data, name) is None:
                return _invalid(f"[{name}] must be a table")

        report: StrDict = get_table(data, "report") or {}
        codes: StrDict = get_table(data, "exit_codes") or {}

        show_chain = get_bool(report, "show_chain")
        if "show_chain" in report and show_chain is None:
            return _invalid("report.show_chain must be a boolean")

        max_depth = get_int(report, "max_depth")
        if "max_depth" in report and (max_depth is None or max_depth < 0):
            return _invalid("report.max_depth must be a non-negative integer")

        overrides: dict[ErrorKind, int] = {}
        for key in codes:
            kind = ErrorKind.from_key(key)
            if kind is None:
                return _invalid(f"exit_codes.{key}: unknown error kind")
            code = get_int(codes, key)
            # 0 would report a failure as success
            if code is None or not 1 <= code <= 255:
                return _invalid(f"exit_codes.{key} must be an integer in 1..255")
            overrides[kind] = code

        return Ok(
            cls(
                show_chain=True if show_chain is None else show_chain,
                max_depth=DEFAULT_MAX_DEPTH if max_depth is None else max_depth,
                exit_codes=MappingProxyType(overrides),
            )
        )


def _parse_toml(path: Path) -> Result[StrDict, Error]:
    """Read and parse a TOML file, classifying read and decode failures."""
    import tomllib

    content = try_catching((OSError,), path.read_bytes).with_context_fn(
        ErrorKind.IO, lambda: f"cannot read config: {path}"
    )
    if isinstance(content, Err):
        return content

    raw = content.value
    return try_catching(
        (UnicodeDecodeError, tomllib.TOMLDecodeError),
        lambda: tomllib.loads(raw.decode("utf-8")),
    ).with_context_fn(ErrorKind.INVALID_DATA, lambda: f"invalid config: {path}")


def load_config(path: Path) -> Result[ReportConfig, Error]:
    """Load reporting configuration from a TOML file.

    For a pyproject.toml the [tool.errcore] table is used; a missing table
    means defaults.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(ReportConfig) on success, Err(Error) on failure. Read failures have
        kind IO, malformed content has kind INVALID_DATA.
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    data = result.value
    if path.name == "pyproject.toml":
        tool: StrDict = get_table(data, "tool") or {}
        data = get_table(tool, "errcore") or {}

    return ReportConfig.from_dict(data)


def load_config_or_default(path: Path) -> ReportConfig:
    """Load config from file, or return default config on any failure.

    This is useful when config is optional.
    """
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return ReportConfig()
