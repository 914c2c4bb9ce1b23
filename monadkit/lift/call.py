"""
Calling functions with automatic lifting.

For functions that return T | None: call them and get a Maybe back.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from ..maybe import Maybe, of_nullable


def lifted[T, **P](func: Callable[P, T | None]) -> Callable[P, Maybe[T]]:
    """
    Decorator making an Optional-returning function return Maybe.

    Example:
        from monadkit import lift as L

        @L.lifted
        def find_user(user_id: int) -> User | None:
            return users.get(user_id)

        find_user(42).map(lambda user: user.name)
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Maybe[T]:
        return of_nullable(func(*args, **kwargs))

    return wrapper


def call[T, **P](
    func: Callable[P, T | None],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Maybe[T]:
    """
    Call func with arguments and lift the result.

    **When to use:** Lift at the call site and leave func itself plain.

    Example:
        from monadkit import lift as L

        L.call(users.get, 42).map(lambda user: user.name)
    """
    return of_nullable(func(*args, **kwargs))


__all__ = (
    "call",
    "lifted",
)
