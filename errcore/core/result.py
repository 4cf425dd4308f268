"""Result type for explicit error handling.

This module provides a Result type similar to Rust's Result<T, E>, extended
with adapters that classify a failure as an Error without losing it.

Usage:
    def read_header(path: Path) -> Result[Header, Error]:
        data = try_call(path.read_bytes).with_kind(ErrorKind.IO)
        if isinstance(data, Err):
            return data
        return try_call(parse_header, data.value).with_context(
            ErrorKind.INVALID_DATA, "bad header"
        )

    match read_header(path):
        case Ok(header):
            print(f"version {header.version}")
        case Err(error):
            print(f"error: {error}")

The with_* adapters are pass-through on Ok: the same object comes back and
no message is built. On Err the original failure becomes the cause of a new
Error.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeGuard

from .error import Cause, Error
from .kind import ErrorKind

__all__ = ["Err", "Ok", "Result", "is_err", "is_ok", "try_call", "try_catching"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Represents a successful result containing a value.

    Attributes:
        value: The success value.
    """

    value: T

    def is_ok(self) -> bool:
        """Returns True."""
        return True

    def is_err(self) -> bool:
        """Returns False."""
        return False

    def unwrap(self) -> T:
        """Returns the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Returns the contained value, ignoring default."""
        return self.value

    def unwrap_err(self) -> None:
        """Raises ValueError since this is Ok.

        Raises:
            ValueError: Always, since Ok has no error.
        """
        raise ValueError(f"called unwrap_err on Ok: {self.value}")

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Applies a function to the contained value."""
        return Ok(f(self.value))

    def map_err[E, F](self, f: Callable[[E], F]) -> Ok[T]:
        """Returns self unchanged (no error to map)."""
        return self

    def flat_map[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Applies a function that returns a Result."""
        return f(self.value)

    def with_kind(self, kind: ErrorKind) -> Ok[T]:
        """Returns self unchanged."""
        return self

    def with_context(self, kind: ErrorKind, message: str) -> Ok[T]:
        """Returns self unchanged."""
        return self

    def with_context_fn(self, kind: ErrorKind, f: Callable[[], str]) -> Ok[T]:
        """Returns self unchanged. f is never called."""
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Represents a failed result containing an error.

    Attributes:
        error: The error value.
    """

    error: E

    def is_ok(self) -> bool:
        """Returns False."""
        return False

    def is_err(self) -> bool:
        """Returns True."""
        return True

    def unwrap(self) -> None:
        """Raises ValueError with the error.

        When the error is an exception it becomes the ValueError's __cause__.

        Raises:
            ValueError: Always, containing the error.
        """
        if isinstance(self.error, BaseException):
            raise ValueError(f"called unwrap on Err: {self.error}") from self.error
        raise ValueError(f"called unwrap on Err: {self.error}")

    def unwrap_or[T](self, default: T) -> T:
        """Returns the default value."""
        return default

    def unwrap_err(self) -> E:
        """Returns the contained error."""
        return self.error

    def map[T, U](self, f: Callable[[T], U]) -> Err[E]:
        """Returns self unchanged (no value to map)."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Applies a function to the contained error.

        Args:
            f: Function to apply to the error.

        Returns:
            Err with the transformed error.
        """
        return Err(f(self.error))

    def flat_map[T, U](self, f: Callable[[T], Result[U, E]]) -> Err[E]:
        """Returns self unchanged (no value to flat_map)."""
        return self

    def with_kind(self: Err[Cause], kind: ErrorKind) -> Err[Error]:
        """Wraps the error as the cause of a new Error tagged with kind.

        Args:
            kind: Classification for the new Error.

        Returns:
            Err holding an Error with no message and the original as cause.
        """
        return Err(Error(kind, self.error))

    def with_context(self: Err[Cause], kind: ErrorKind, message: str) -> Err[Error]:
        """Wraps the error as the cause of a new Error with a message.

        Args:
            kind: Classification for the new Error.
            message: Text shown in place of the cause's own text.

        Returns:
            Err holding an Error with kind, message and the original as cause.
        """
        return Err(Error.with_error(kind, self.error, message))

    def with_context_fn(
        self: Err[Cause], kind: ErrorKind, f: Callable[[], str]
    ) -> Err[Error]:
        """Like with_context, with the message produced by calling f once.

        Args:
            kind: Classification for the new Error.
            f: Zero-argument message producer. Only ever called on Err.

        Returns:
            Err holding an Error with kind, message and the original as cause.
        """
        return Err(Error.with_error_fn(kind, self.error, f))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result
type Result[T, E] = Ok[T] | Err[E]


def is_ok[T, E](result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Type guard that checks if a Result is Ok.

    This function narrows the type for static type checkers.

    Example:
        result: Result[int, Error] = Ok(42)
        if is_ok(result):
            # Type checker knows result is Ok[int] here
            print(result.value)
    """
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Type guard that checks if a Result is Err."""
    return isinstance(result, Err)


def try_catching[T, **P](
    catch: tuple[type[Exception], ...],
    f: Callable[P, T],
    /,
    *args: P.args,
    **kwargs: P.kwargs,
) -> Result[T, Exception]:
    """Call f(*args, **kwargs) and capture exceptions matching catch as Err.

    Anything not matching catch propagates.

    Args:
        catch: Exception types to turn into Err.
        f: Callable to run.
        *args: Positional arguments for f.
        **kwargs: Keyword arguments for f.

    Returns:
        Ok(return value) or Err(exception).

    Example:
        try_catching((OSError,), path.read_bytes).with_kind(ErrorKind.IO)
    """
    try:
        return Ok(f(*args, **kwargs))
    except catch as e:
        return Err(e)


def try_call[T, **P](
    f: Callable[P, T],
    /,
    *args: P.args,
    **kwargs: P.kwargs,
) -> Result[T, Exception]:
    """Call f(*args, **kwargs) and capture any Exception as Err.

    Example:
        try_call(int, "ff", base=16)  # Ok(255)
        try_call(path.read_text, encoding="utf-8").with_kind(ErrorKind.IO)
    """
    return try_catching((Exception,), f, *args, **kwargs)
