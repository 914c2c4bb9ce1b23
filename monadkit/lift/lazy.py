"""
Bridge to kungfu async pipelines.

to_lazy hands a finished Maybe to a LazyCoroResult chain; from_lazy runs a
LazyCoroResult and brings the outcome back as a Maybe.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import LazyCoroResult, Result

from ..maybe import Maybe
from .down import to_result
from .up import from_result


def to_lazy[T, E](maybe: Maybe[T], *, error: Callable[[], E]) -> LazyCoroResult[T, E]:
    """
    Lift Maybe into LazyCoroResult. Absent becomes Error(error()).

    Nothing runs until the result is awaited.

    Example:
        from monadkit import lift as L

        pipeline = (
            L.to_lazy(L.call(users.get, 42), error=lambda: NotFound(42))
            .then(lambda user: fetch_profile(user.id))
            .map(lambda profile: profile.name)
        )
        result = await pipeline
    """

    async def run() -> Result[T, E]:
        return to_result(maybe, error=error)

    return LazyCoroResult(run)


async def from_lazy[T, E](lazy: LazyCoroResult[T, E]) -> Maybe[T]:
    """Run lazy and convert: Ok(v) -> Present(v), Error(_) -> Absent."""
    result = await lazy
    return from_result(result)


__all__ = ("to_lazy", "from_lazy")
