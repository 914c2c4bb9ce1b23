"""
Pointfree helpers
=================

map and chain pulled out of the containers, so wrapper-aware stages can be
fed to compose() and the wrapped value supplied last:

    shout = compose(
        fmap(capitalize),
        fmap(enhance),
        tap(print),
    )
    shout(of_nullable("functional programming"))
"""

from __future__ import annotations

from collections.abc import Callable

from ._types import Effect
from .base import Functor, Monad


def map_over[A, B](functor: Functor[A], transform: Callable[[A], B], /) -> Functor[B]:
    """Externalized map: map_over(m, f) == m.map(f)."""
    return functor.map(transform)


def fmap[A, B](transform: Callable[[A], B], /) -> Callable[[Functor[A]], Functor[B]]:
    """Curried map: fmap(f)(m) == m.map(f)."""

    def stage(functor: Functor[A]) -> Functor[B]:
        return functor.map(transform)

    return stage


def bind[A, B](transform: Callable[[A], Monad[B]], /) -> Callable[[Monad[A]], Monad[B]]:
    """Curried chain: bind(f)(m) == m.chain(f)."""

    def stage(monad: Monad[A]) -> Monad[B]:
        return monad.chain(transform)

    return stage


def tap[A](effect: Effect[A], /) -> Callable[[Functor[A]], Functor[A]]:
    """
    Run a side effect on the wrapped value, pass it through unchanged.

    Effects are for observation only (printing, logging, debugging). The
    effect runs wherever map would run, so it is skipped on Absent.
    """

    def observe(value: A) -> A:
        effect(value)
        return value

    def stage(functor: Functor[A]) -> Functor[A]:
        return functor.map(observe)

    return stage


__all__ = ("bind", "fmap", "map_over", "tap")
