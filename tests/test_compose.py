"""Tests for compose and pipe."""

from __future__ import annotations

import pytest

from monadkit import EmptyCompositionError, compose, pipe

from ._helpers import capitalize, enhance


def test_compose_applies_left_to_right() -> None:
    assert compose(capitalize, enhance)("test") == "Test is awesome"


@pytest.mark.parametrize("x", [-3, 0, 1, 17])
def test_compose_three_equals_nested_calls(x: int) -> None:
    def f(v: int) -> int:
        return v + 1

    def g(v: int) -> int:
        return v * 2

    def h(v: int) -> str:
        return str(v)

    assert compose(f, g, h)(x) == h(g(f(x)))


def test_compose_single_function() -> None:
    assert compose(str.upper)("abc") == "ABC"


def test_compose_many_functions() -> None:
    add_one = lambda v: v + 1  # noqa: E731
    assert compose(*[add_one] * 10)(0) == 10


def test_compose_changes_types_along_the_chain() -> None:
    word_count = compose(str.split, len, lambda n: f"{n} words")
    assert word_count("functional programming is awesome") == "4 words"


def test_compose_without_functions_fails_fast() -> None:
    with pytest.raises(EmptyCompositionError):
        compose()


def test_compose_is_lazy(counter) -> None:
    composed = compose(counter, counter)
    assert counter.calls == 0
    composed("x")
    assert counter.calls == 2


def test_pipe_runs_immediately() -> None:
    assert pipe("test", capitalize, enhance) == "Test is awesome"


def test_pipe_without_functions_returns_value() -> None:
    assert pipe(42) == 42
