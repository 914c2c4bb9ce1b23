"""
Log
===

Append-only record carried by Writer. A tuple underneath, so a Log handed
out by Writer.run() cannot be changed behind the Writer's back and a
Writer stays hashable when its value is.
"""

from __future__ import annotations

from collections.abc import Iterable


class Log[A](tuple[A, ...]):
    """
    Immutable monoid of log entries.

    Log() is the neutral element and combine is concatenation, so
    Log().combine(x) == x == x.combine(Log()) and combining is associative.
    """

    __slots__ = ()

    def __new__(cls, entries: Iterable[A] = (), /) -> Log[A]:
        return super().__new__(cls, entries)

    @staticmethod
    def of[T](*entries: T) -> Log[T]:
        return Log(entries)

    def combine(self, other: Iterable[A], /) -> Log[A]:
        """Entries of self followed by entries of other."""
        return Log((*self, *other))

    def tell(self, entry: A, /) -> Log[A]:
        return Log((*self, entry))

    def __repr__(self) -> str:
        return f"Log({list(self)!r})"


__all__ = ("Log",)
