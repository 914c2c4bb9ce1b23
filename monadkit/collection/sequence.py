"""Sequence for Maybe

Structure flipping: [Maybe[T]] -> Maybe[[T]]."""

from __future__ import annotations

from collections.abc import Iterable

from .._helpers import identity
from ..maybe import Maybe
from .traverse import traverse


def sequence[T](maybes: Iterable[Maybe[T]]) -> Maybe[list[T]]:
    """
    Flip structure: [Maybe[T]] -> Maybe[[T]].

    Implemented as traverse(id).
    """
    return traverse(maybes, identity)


__all__ = ("sequence",)
