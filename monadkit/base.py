"""
Functor and Monad contracts
===========================

Functor:
- contains a value and can be built from it (unit)
- can be mapped

Monad adds chain (flat-map): map a function that already returns a
wrapped value without ending up with a wrapper inside a wrapper.
"""

from __future__ import annotations

import abc
from collections.abc import Callable


class Functor[A](abc.ABC):
    """
    A wrapper around one value that can be mapped.

    Functor laws:
    - Identity: m.map(identity) == m
    - Composition: m.map(f).map(g) == m.map(compose(f, g))

    map never mutates the receiver, it returns a new instance.
    """

    __slots__ = ()

    @abc.abstractmethod
    def map[B](self, transform: Callable[[A], B], /) -> Functor[B]:
        """Apply transform to the wrapped value, keep the wrapper shape."""


class Monad[A](Functor[A]):
    """
    A Functor with unit and chain.

    Monadic laws:
    - Left identity: unit(a).chain(f) == f(a)
    - Right identity: m.chain(unit) == m
    - Associativity: m.chain(f).chain(g) == m.chain(x => f(x).chain(g))
    """

    __slots__ = ()

    @staticmethod
    @abc.abstractmethod
    def unit[B](value: B, /) -> Monad[B]:
        """Lift a raw value into the simplest wrapped form."""

    @abc.abstractmethod
    def map[B](self, transform: Callable[[A], B], /) -> Monad[B]:
        """Functor fmap, the result is a Monad of the same family."""

    @abc.abstractmethod
    def chain[B](self, transform: Callable[[A], Monad[B]], /) -> Monad[B]:
        """
        Monadic bind (>>=).

        The result of transform is returned as is, never re-wrapped.
        """


__all__ = ("Functor", "Monad")
