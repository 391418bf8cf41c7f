"""Result type for flat error handling (like Rust's Result<T, E>).

A fallible function returns ``Ok(value)`` on success or ``Err(error)`` on
failure instead of raising. Callers branch on ``result.ok`` (or match on the
variant) and unwrap with one of four accessors:

    throw(message=None)  data, or raise the error
    or_(fallback)        data, or the fallback
    else_(callback)      data, or callback(error)
    and_(callback)       callback(data) on success, failures are dropped

``or``, ``else`` and ``and`` are keywords, hence the trailing underscores.

Example:
    def to_number(text: str) -> Result[float, ValueError]:
        try:
            return Ok(float(text))
        except ValueError:
            return Err(ValueError(f"Couldn't convert {text} to number"))

    match to_number("abc"):
        case Ok(value):
            print(value)
        case Err(error):
            print(error)
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal, Never

from fallible.config import settings
from fallible.constants import DEFAULT_ERROR_MESSAGE

# Silent unless the host enables DEBUG for "fallible"
logger = logging.getLogger(__name__)

# Error payloads throw() knows how to turn into a raised exception
type ErrorType = str | BaseException | None


class UnwrapError(Exception):
    """throw() was called on a Failure whose error is not an exception."""

    def __init__(self, message: str, error: object = None):
        super().__init__(message)
        self.error = error


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success result.

    ``Ok()`` carries ``None``. There is no ``error`` attribute.
    """

    data: T = None  # type: ignore[assignment]
    ok: Literal[True] = field(default=True, init=False, repr=False)

    def throw(self, message: str | None = None) -> T:
        """Return the payload. Never raises."""
        return self.data

    def or_(self, fallback: T) -> T:
        """Return the payload, ignoring ``fallback``."""
        return self.data

    def else_(self, callback: Callable[[Never], T]) -> T:
        """Return the payload without calling ``callback``."""
        return self.data

    def and_(self, callback: Callable[[T], object]) -> None:
        """Call ``callback`` with the payload."""
        callback(self.data)

    unwrap = throw
    unwrap_or = or_
    unwrap_or_else = else_


@dataclass(frozen=True, slots=True)
class Err[E: ErrorType]:
    """Failure result.

    ``Err()`` carries ``None``. There is no ``data`` attribute.
    """

    error: E = None  # type: ignore[assignment]
    ok: Literal[False] = field(default=False, init=False, repr=False)

    def throw(self, message: str | None = None) -> Never:
        """Raise the error.

        String and absent errors are raised as ``UnwrapError`` with the first
        non-empty text of ``message``, the error string and
        ``DEFAULT_ERROR_MESSAGE``.

        Exceptions are raised as themselves. A non-empty ``message`` replaces
        the exception's message in place, so the caller's error object is
        changed unless ``settings.copy_on_override`` is set. The new text
        still renders the way the exception class renders its message:
        ``KeyError`` quotes it, and ``OSError`` keeps its ``[Errno N]`` prefix
        and filename around the replaced ``strerror``.

        Raises:
            UnwrapError: error is None, a string or another non-exception value
            BaseException: the stored exception
        """
        error = self.error

        if isinstance(error, BaseException):
            if message:
                error = _override_message(error, message)
            logger.debug(f"Raising {type(error).__name__} (message overridden: {bool(message)})")
            raise error

        if error is None or isinstance(error, str):
            text = message or error or DEFAULT_ERROR_MESSAGE
        else:
            text = message or str(error)

        logger.debug(f"Raising UnwrapError for {type(error).__name__} error: {text}")
        raise UnwrapError(text, error=error)

    def or_[U](self, fallback: U) -> U:
        """Return ``fallback``."""
        return fallback

    def else_[U](self, callback: Callable[[E], U]) -> U:
        """Return ``callback(error)``."""
        return callback(self.error)

    def and_(self, callback: Callable[[Never], object]) -> None:
        """Drop the failure without calling ``callback``."""

    unwrap = throw
    unwrap_or = or_
    unwrap_or_else = else_


type Result[T, E: ErrorType] = Ok[T] | Err[E]

# OSError renders errno, strerror and filename instead of args
_OSERROR_FIELDS = ("errno", "strerror", "filename", "filename2")


def _override_message(error: BaseException, message: str) -> BaseException:
    if settings.copy_on_override:
        error = _shallow_copy(error)

    error.args = (message,)
    if isinstance(error, OSError):
        error.strerror = message
    if "message" in vars(error):
        error.message = message  # type: ignore[attr-defined]
    return error


def _shallow_copy(error: BaseException) -> BaseException:
    # Bypass __init__, subclasses may not accept their own args back
    clone = type(error).__new__(type(error), *error.args)
    clone.__dict__.update(vars(error))
    if isinstance(error, OSError):
        for name in _OSERROR_FIELDS:
            setattr(clone, name, getattr(error, name))
    clone.__cause__ = error.__cause__
    clone.__context__ = error.__context__
    clone.__suppress_context__ = error.__suppress_context__
    return clone
