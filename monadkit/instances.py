"""
Typeclass instances
===================

A MonadInstance is a dispatch table (unit, map, chain) describing one
container family. Generic code, such as the law checks in
monadkit.laws, is written against the table instead of a concrete class.

For custom monads:
1. Subclass monadkit.Monad (or write any class with map and chain)
2. Build MonadInstance(name=..., unit=YourMonad.unit)
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass, field

from .identity import Identity
from .maybe import Maybe, of
from .writer import Writer


def _map(m: typing.Any, transform: Callable[[typing.Any], typing.Any]) -> typing.Any:
    return m.map(transform)


def _chain(m: typing.Any, transform: Callable[[typing.Any], typing.Any]) -> typing.Any:
    return m.chain(transform)


@dataclass(frozen=True, slots=True)
class MonadInstance[M]:
    """
    Dispatch table for one monad family.

    map and chain default to calling the methods of the same name on the
    wrapped value, which is right for every Monad subclass.
    """

    name: str
    unit: Callable[[typing.Any], M]
    map: Callable[[M, Callable[[typing.Any], typing.Any]], M] = field(default=_map)
    chain: Callable[[M, Callable[[typing.Any], M]], M] = field(default=_chain)


IDENTITY: typing.Final[MonadInstance[Identity[typing.Any]]] = MonadInstance(
    name="identity",
    unit=Identity.unit,
)

MAYBE: typing.Final[MonadInstance[Maybe[typing.Any]]] = MonadInstance(name="maybe", unit=of)

WRITER: typing.Final[MonadInstance[Writer[typing.Any, typing.Any]]] = MonadInstance(
    name="writer",
    unit=Writer.unit,
)

__all__ = ("IDENTITY", "MAYBE", "WRITER", "MonadInstance")
