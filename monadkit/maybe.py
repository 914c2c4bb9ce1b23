"""
Maybe monad
===========

Optional value as a tagged union:
- Present(value) - a value is there
- Absent() - no value

map and chain on Absent short-circuit and never call the transform, so a
pipeline needs no None checks between stages. Absence is data, it is never
raised; the caller branches on the final variant once, at the end.

Example:
    of_nullable(find_user(user_id))
        .map(lambda user: user.name)
        .map(str.upper)
        .get_or_else("anonymous")
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

from ._errors import AbsentValueError
from ._types import Predicate, Thunk
from .base import Monad


@dataclass(frozen=True, slots=True)
class Present[A](Monad[A]):
    """Variant holding a value. Present(None) is legal, only of_nullable interprets None."""

    value: A

    @staticmethod
    def unit[B](value: B, /) -> Present[B]:
        return Present(value)

    # Functor / Monad operations

    def map[B](self, transform: Callable[[A], B], /) -> Present[B]:
        return Present(transform(self.value))

    def chain[B](self, transform: Callable[[A], Maybe[B]], /) -> Maybe[B]:
        return transform(self.value)

    def filter(self, predicate: Predicate[A], /) -> Maybe[A]:
        """Keep the value only if predicate holds."""
        if predicate(self.value):
            return self
        return ABSENT

    def or_else(self, alternative: Maybe[A], /) -> Maybe[A]:
        return self

    # Inspection

    def is_present(self) -> bool:
        return True

    def is_absent(self) -> bool:
        return False

    def get_or_else[D](self, default: D, /) -> A | D:
        return self.value

    def get_or_call[D](self, thunk: Thunk[D], /) -> A | D:
        return self.value

    def unwrap(self) -> A:
        return self.value


@dataclass(frozen=True, slots=True)
class Absent(Monad[typing.Any]):
    """Variant without a value. Every Absent equals every other Absent."""

    @staticmethod
    def unit[B](value: B, /) -> Present[B]:
        return Present(value)

    # Functor / Monad operations

    def map(self, transform: Callable[[typing.Any], typing.Any], /) -> Absent:
        return self

    def chain(self, transform: Callable[[typing.Any], typing.Any], /) -> Absent:
        return self

    def filter(self, predicate: Predicate[typing.Any], /) -> Absent:
        return self

    def or_else[A](self, alternative: Maybe[A], /) -> Maybe[A]:
        return alternative

    # Inspection

    def is_present(self) -> bool:
        return False

    def is_absent(self) -> bool:
        return True

    def get_or_else[D](self, default: D, /) -> D:
        return default

    def get_or_call[D](self, thunk: Thunk[D], /) -> D:
        return thunk()

    def unwrap(self) -> typing.NoReturn:
        raise AbsentValueError()


type Maybe[A] = Present[A] | Absent

ABSENT: typing.Final = Absent()


# ============================================================================
# Constructors
# ============================================================================


def of[A](value: A, /) -> Maybe[A]:
    """Wrap value unconditionally, None included."""
    return Present(value)


def empty() -> Absent:
    return ABSENT


def of_nullable[A](value: A | None, /) -> Maybe[A]:
    """
    None becomes Absent, anything else Present.

    This is the only place where the None sentinel is interpreted.
    """
    if value is None:
        return ABSENT
    return Present(value)


# ============================================================================
# Elimination
# ============================================================================


def fold[A, R](
    maybe: Maybe[A],
    /,
    *,
    on_present: Callable[[A], R],
    on_absent: Thunk[R],
) -> R:
    """
    Branch on the final variant.

    Example:
        message = fold(
            pipeline,
            on_present=lambda text: f"ok: {text}",
            on_absent=lambda: "nothing to say",
        )
    """
    match maybe:
        case Present(value):
            return on_present(value)
        case Absent():
            return on_absent()
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "ABSENT",
    "Absent",
    "Maybe",
    "Present",
    "empty",
    "fold",
    "of",
    "of_nullable",
)
