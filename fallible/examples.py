"""Reference functions that return Results.

Small, dependency-free callers used by the docs and the test suite.
"""

import math
from enum import StrEnum

from fallible.result import Err, Ok, Result


def to_number(text: str) -> Result[int | float, ValueError]:
    """Parse ``text`` as a number, integers stay integers. NaN is rejected."""
    for parse in (int, float):
        try:
            value = parse(text)
        except ValueError:
            continue
        if not math.isnan(value):
            return Ok(value)
        break

    return Err(ValueError(f"Couldn't convert {text} to number"))


def check_flag(flag: bool) -> Result[None, None]:
    if not flag:
        return Err()

    return Ok()


def classify_status(code: int) -> Result[int, str]:
    """Accept 2xx status codes, report the others as "Low" or "High"."""
    if 200 <= code < 300:
        return Ok(code)

    if code < 200:
        return Err("Low")

    return Err("High")


class ErrorKind(StrEnum):
    """Failure categories carried by KindError."""

    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID = "invalid"


class KindError(Exception):
    """Structured error tagged with an ErrorKind."""

    def __init__(self, kind: ErrorKind):
        super().__init__()
        self.kind = kind


def fail_with(kind: ErrorKind) -> Result[None, KindError]:
    return Err(KindError(kind))
