"""Traverse for Maybe

All-or-nothing map over a collection: every handler result must be
Present, the first Absent stops the walk."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import assert_never

from ..maybe import ABSENT, Absent, Maybe, Present


def traverse[A, T](
    items: Iterable[A],
    handler: Callable[[A], Maybe[T]],
) -> Maybe[list[T]]:
    """Monadic map: A -> Maybe[T]. Sequential, handler is not called after the first Absent."""
    values: list[T] = []
    for item in items:
        match handler(item):
            case Present(value):
                values.append(value)
            case Absent():
                return ABSENT
            case _ as unreachable:
                assert_never(unreachable)
    return Present(values)


__all__ = ("traverse",)
