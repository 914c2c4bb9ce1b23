"""
Lifting values into Maybe.

Functions for turning plain values, Optional, kungfu Result and
exception-based code into Maybe.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from ..maybe import ABSENT, Maybe, Present, of_nullable


def pure[T](value: T) -> Maybe[T]:
    """
    Lift value into Present, None included.

    **When to use:** When you have a plain value and need to start a chain.

    Example:
        from monadkit import lift as L

        user = L.up.pure(User(id=42))  # Present(User(id=42))
    """
    return Present(value)


def optional[T](value: T | None) -> Maybe[T]:
    """
    Convert Optional to Maybe. None becomes Absent.

    **When to use:** Database lookups, cache checks, config reads, anywhere
    you get Optional and want to stop writing None checks.
    """
    return of_nullable(value)


def from_result[T, E](result: Result[T, E]) -> Maybe[T]:
    """
    Ok(v) becomes Present(v), Error(_) becomes Absent.

    NOTE: the error is dropped. Keep the Result if you need it.
    """
    match result:
        case Ok(value):
            return Present(value)
        case Error(_):
            return ABSENT


def catching[T](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], object] | None = None,
) -> Maybe[T]:
    """
    Run thunk, turn a raised exception into Absent.

    **When to use:** Bridge between exception-based code and Maybe pipelines.
    on_error observes the exception (for logging), its return value is ignored.

    Example:
        from monadkit import lift as L
        import json

        payload = L.up.catching(lambda: json.loads(raw))

    NOTE: Catches all Exception subclasses. For specific exceptions,
          use try/except manually.
    """
    try:
        return Present(thunk())
    except Exception as exc:
        if on_error is not None:
            on_error(exc)
        return ABSENT


__all__ = (
    "pure",
    "optional",
    "from_result",
    "catching",
)
