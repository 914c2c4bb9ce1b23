"""
Function composition
====================

Chain unary functions left to right: compose(f, g, h)(x) == h(g(f(x))).

The composed function does nothing until it gets its input, so the data
can be supplied last.
"""

from __future__ import annotations

import functools
import typing
from collections.abc import Callable

from ._errors import EmptyCompositionError


@typing.overload
def compose[A, B](f1: Callable[[A], B], /) -> Callable[[A], B]: ...


@typing.overload
def compose[A, B, C](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    /,
) -> Callable[[A], C]: ...


@typing.overload
def compose[A, B, C, D](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    /,
) -> Callable[[A], D]: ...


@typing.overload
def compose[A, B, C, D, R](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], R],
    /,
) -> Callable[[A], R]: ...


@typing.overload
def compose(
    *functions: Callable[[typing.Any], typing.Any],
) -> Callable[[typing.Any], typing.Any]: ...


def compose(
    *functions: Callable[[typing.Any], typing.Any],
) -> Callable[[typing.Any], typing.Any]:
    """
    Compose unary functions into one, applied left to right.

    The output type of each function must match the input type of the next.

    Example:
        capitalize_and_enhance = compose(capitalize, enhance)
        capitalize_and_enhance("test")  # "Test is awesome"

    Raises EmptyCompositionError when called without functions.
    """
    if not functions:
        raise EmptyCompositionError()
    return functools.reduce(_then, functions)


def _then[A, B, C](
    first: Callable[[A], B],
    second: Callable[[B], C],
) -> Callable[[A], C]:
    def composed(value: A) -> C:
        return second(first(value))

    return composed


def pipe(value: typing.Any, /, *functions: Callable[[typing.Any], typing.Any]) -> typing.Any:
    """
    Feed value through functions left to right right away.

    pipe(x, f, g) == compose(f, g)(x). With no functions the value is
    returned unchanged.
    """
    return functools.reduce(lambda acc, fn: fn(acc), functions, value)


__all__ = ("compose", "pipe")
