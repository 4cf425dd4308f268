"""Opaque error value carrying a kind, an optional message and an optional cause.

An Error is what fallible code hands back to its caller once a low-level failure
has been classified. It keeps the original failure as its cause so nothing is
lost, and renders the most specific text available.

Usage:
    try:
        data = path.read_bytes()
    except OSError as e:
        raise Error.with_error(ErrorKind.IO, e, f"cannot read {path}") from e

    err = Error(ErrorKind.INVALID_DATA, message="bad header")
    err.kind()      # ErrorKind.INVALID_DATA
    err.message()   # "bad header"
    err.source()    # None
    str(err)        # "bad header"

Rendering rule: the message if there is one, else the cause's own text, else
the kind's display name.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from .kind import ErrorKind

__all__ = [
    "Cause",
    "DEFAULT_CONVERSIONS",
    "Error",
    "Failure",
    "iter_chain",
    "source_of",
]


@runtime_checkable
class Failure(Protocol):
    """Structural capability of a failure that can name what caused it.

    Exceptions already provide this through str() and __cause__; the protocol
    lets plain value types take part in a cause chain without inheriting from
    anything.
    """

    def source(self) -> Cause | None:
        """Return the immediate cause, or None at the end of the chain."""
        ...


type Cause = BaseException | Failure


# -----------------------------------------------------------------------------
# Internal shapes
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Simple:
    kind: ErrorKind


@dataclass(frozen=True, slots=True)
class SimpleMessage:
    kind: ErrorKind
    message: str


@dataclass(frozen=True, slots=True)
class Custom:
    kind: ErrorKind
    error: Cause


@dataclass(frozen=True, slots=True)
class CustomMessage:
    custom: Custom
    message: str


type Repr = Simple | SimpleMessage | Custom | CustomMessage


def _shape(kind: ErrorKind, error: Cause | None, message: str | None) -> Repr:
    if error is None:
        return Simple(kind) if message is None else SimpleMessage(kind, message)
    custom = Custom(kind, error)
    return custom if message is None else CustomMessage(custom, message)


# Exception type -> kind. Lookup walks the MRO, so OSError covers
# FileNotFoundError, PermissionError, etc.
DEFAULT_CONVERSIONS: Mapping[type[BaseException], ErrorKind] = MappingProxyType(
    {OSError: ErrorKind.IO}
)


class Error(Exception):
    """Classified error with an optional message and an optional cause.

    The combination of arguments picks the shape once and for all:

    - Error(kind): kind only
    - Error(kind, message=text): kind and message
    - Error(kind, error): kind and cause
    - Error(kind, error, text): kind, cause and message

    When the cause is an exception it is also set as __cause__, so tracebacks
    and other generic exception tooling show the chain.
    """

    def __init__(
        self,
        kind: ErrorKind,
        error: Cause | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(kind, error, message)
        self._repr: Repr = _shape(kind, error, message)
        if isinstance(error, BaseException):
            self.__cause__ = error

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_kind(cls, kind: ErrorKind) -> Error:
        """Create an error from a bare kind."""
        return cls(kind)

    @classmethod
    def with_message(cls, kind: ErrorKind, message: str) -> Error:
        """Create an error with a message and no cause."""
        return cls(kind, message=message)

    @classmethod
    def with_message_fn(cls, kind: ErrorKind, message: Callable[[], str]) -> Error:
        """Create an error whose message is produced by calling message() once, now."""
        return cls.with_message(kind, message())

    @classmethod
    def with_error(cls, kind: ErrorKind, error: Cause, message: str) -> Error:
        """Create an error wrapping a cause, with a message of its own."""
        return cls(kind, error, message)

    @classmethod
    def with_error_fn(
        cls,
        kind: ErrorKind,
        error: Cause,
        message: Callable[[], str],
    ) -> Error:
        """Like with_error, with the message produced by calling message() once, now."""
        return cls.with_error(kind, error, message())

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        conversions: Mapping[type[BaseException], ErrorKind] = DEFAULT_CONVERSIONS,
    ) -> Error:
        """Convert a platform exception using a fixed type -> kind table.

        The most specific registered base class of exc decides the kind. The
        result has no message and exc as its cause. An Error is returned as is.

        Raises:
            TypeError: If no base class of exc has a registered conversion.
        """
        if isinstance(exc, Error):
            return exc
        for klass in type(exc).__mro__:
            if issubclass(klass, BaseException) and klass in conversions:
                return cls(conversions[klass], exc)
        raise TypeError(f"no conversion to Error for {type(exc).__name__}")

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def kind(self) -> ErrorKind:
        """The kind this error was constructed with."""
        match self._repr:
            case CustomMessage(custom=custom):
                return custom.kind
            case Simple(kind=kind) | SimpleMessage(kind=kind) | Custom(kind=kind):
                return kind

    def message(self) -> str | None:
        """The message provided at construction, or None."""
        match self._repr:
            case SimpleMessage(message=message) | CustomMessage(message=message):
                return message
            case _:
                return None

    def source(self) -> Cause | None:
        """The wrapped cause, or None."""
        match self._repr:
            case Custom(error=error) | CustomMessage(custom=Custom(error=error)):
                return error
            case _:
                return None

    def __str__(self) -> str:
        match self._repr:
            case Simple(kind=kind):
                return str(kind)
            case SimpleMessage(message=message) | CustomMessage(message=message):
                return message
            case Custom(error=error):
                return str(error)

    def __repr__(self) -> str:
        return f"Error({self._repr!r})"


def source_of(failure: object) -> Cause | None:
    """Return the immediate cause of any describable failure.

    Exceptions are walked through __cause__ (implicit __context__ is not part
    of the chain); other Failure values through source().
    """
    if isinstance(failure, Error):
        return failure.source()
    if isinstance(failure, BaseException):
        return failure.__cause__
    if isinstance(failure, Failure):
        return failure.source()
    return None


def iter_chain(failure: Cause) -> Iterator[Cause]:
    """Yield failure, then each successive cause until the chain ends.

    A link that was already yielded ends the walk.
    """
    seen: set[int] = set()
    current: Cause | None = failure
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = source_of(current)
