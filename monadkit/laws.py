"""
Functor and monad law checks
============================

Each check builds both sides of a law through a MonadInstance and compares
them with ==. Useful in tests of custom monads.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from ._helpers import identity
from .compose import compose
from .instances import MonadInstance


def functor_identity[M](instance: MonadInstance[M], m: M) -> bool:
    """m.map(identity) == m"""
    return instance.map(m, identity) == m


def functor_composition[M](
    instance: MonadInstance[M],
    m: M,
    f: Callable[[typing.Any], typing.Any],
    g: Callable[[typing.Any], typing.Any],
) -> bool:
    """m.map(f).map(g) == m.map(compose(f, g))"""
    return instance.map(instance.map(m, f), g) == instance.map(m, compose(f, g))


def left_identity[M](
    instance: MonadInstance[M],
    value: typing.Any,
    f: Callable[[typing.Any], M],
) -> bool:
    """unit(a).chain(f) == f(a)"""
    return instance.chain(instance.unit(value), f) == f(value)


def right_identity[M](instance: MonadInstance[M], m: M) -> bool:
    """m.chain(unit) == m"""
    return instance.chain(m, instance.unit) == m


def associativity[M](
    instance: MonadInstance[M],
    m: M,
    f: Callable[[typing.Any], M],
    g: Callable[[typing.Any], M],
) -> bool:
    """m.chain(f).chain(g) == m.chain(x => f(x).chain(g))"""
    lhs = instance.chain(instance.chain(m, f), g)
    rhs = instance.chain(m, lambda x: instance.chain(f(x), g))
    return lhs == rhs


@dataclass(frozen=True, slots=True)
class LawReport:
    instance: str
    functor_identity: bool
    functor_composition: bool
    left_identity: bool
    right_identity: bool
    associativity: bool

    @property
    def all_hold(self) -> bool:
        return all((
            self.functor_identity,
            self.functor_composition,
            self.left_identity,
            self.right_identity,
            self.associativity,
        ))


def check_monad_laws[M](
    instance: MonadInstance[M],
    value: typing.Any,
    *,
    f: Callable[[typing.Any], M],
    g: Callable[[typing.Any], M],
    map_f: Callable[[typing.Any], typing.Any] = identity,
    map_g: Callable[[typing.Any], typing.Any] = identity,
    subject: M | None = None,
) -> LawReport:
    """
    Run every law for one instance.

    f and g are monadic (a -> M b) and feed the monad laws; map_f and
    map_g are plain functions for the functor composition law. The laws
    that need a wrapped value use subject, or unit(value) when omitted.

    Example:
        report = check_monad_laws(
            MAYBE,
            5,
            f=lambda x: of(x + 1),
            g=lambda x: of(x * 2),
            subject=empty(),
        )
        assert report.all_hold
    """
    m = instance.unit(value) if subject is None else subject
    return LawReport(
        instance=instance.name,
        functor_identity=functor_identity(instance, m),
        functor_composition=functor_composition(instance, m, map_f, map_g),
        left_identity=left_identity(instance, value, f),
        right_identity=right_identity(instance, m),
        associativity=associativity(instance, m, f, g),
    )


__all__ = (
    "LawReport",
    "associativity",
    "check_monad_laws",
    "functor_composition",
    "functor_identity",
    "left_identity",
    "right_identity",
)
