"""
Lowering Maybe into a value.

Functions for leaving the Maybe context at the end of a pipeline: as a raw
value, a default, or a kungfu Result.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from ..maybe import Absent, Maybe, Present


def unsafe[T](maybe: Maybe[T]) -> T:
    """
    Unwrap, raises AbsentValueError on Absent.

    **When to use:** When you're certain the value is there, or want a
    missing value to surface as an exception.
    """
    return maybe.unwrap()


def or_else[T, D](maybe: Maybe[T], default: D) -> T | D:
    """
    Return value or default.

    Example:
        from monadkit import lift as L

        name = L.down.or_else(find_name(user_id), default="Guest")
    """
    return maybe.get_or_else(default)


def to_result[T, E](maybe: Maybe[T], *, error: Callable[[], E]) -> Result[T, E]:
    """
    Present(v) becomes Ok(v), Absent becomes Error(error()).

    NOTE: error is a thunk (zero-arg callable) to avoid computing
          the error when the value is present.
    """
    match maybe:
        case Present(value):
            return Ok(value)
        case Absent():
            return Error(error())


__all__ = (
    "unsafe",
    "or_else",
    "to_result",
)
