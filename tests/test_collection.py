"""Tests for sequence and traverse."""

from __future__ import annotations

from monadkit import Absent, Present, empty, lift as L, of, sequence, traverse


def test_sequence_all_present() -> None:
    assert sequence([of(1), of(2), of(3)]) == Present([1, 2, 3])


def test_sequence_with_absent() -> None:
    assert sequence([of(1), empty(), of(3)]) == Absent()


def test_sequence_empty_input() -> None:
    assert sequence([]) == Present([])


def test_traverse_parses_everything() -> None:
    parse = lambda raw: L.up.catching(lambda: int(raw))  # noqa: E731
    assert traverse(["1", "2", "3"], parse) == Present([1, 2, 3])
    assert traverse(["1", "x", "3"], parse) == Absent()


def test_traverse_stops_at_first_absent() -> None:
    seen: list[int] = []

    def handler(x: int):
        seen.append(x)
        return empty() if x == 2 else of(x)

    assert traverse([1, 2, 3, 4], handler) == Absent()
    assert seen == [1, 2]
