"""Tests for map_over, fmap, bind and tap."""

from __future__ import annotations

from monadkit import Absent, Identity, Present, bind, compose, empty, fmap, map_over, of, of_nullable, tap

from ._helpers import capitalize, enhance


def test_map_over_is_externalized_map() -> None:
    assert map_over(map_over(Identity("test"), capitalize), enhance) == Identity("Test is awesome")


def test_fmap_stages_compose() -> None:
    pipeline = compose(fmap(capitalize), fmap(enhance))
    assert pipeline(of_nullable("functional programming")) == Present("Functional programming is awesome")
    assert pipeline(of_nullable(None)) == Absent()


def test_bind_stages_compose() -> None:
    pipeline = compose(bind(lambda x: of(x + 1)), bind(lambda x: of(x * 2)))
    assert pipeline(of(5)) == Present(12)
    assert pipeline(empty()) == Absent()


def test_tap_passes_value_through() -> None:
    seen: list[str] = []
    pipeline = compose(fmap(capitalize), fmap(enhance), tap(seen.append))

    assert pipeline(of("test")) == Present("Test is awesome")
    assert seen == ["Test is awesome"]


def test_tap_skipped_on_absent(counter) -> None:
    assert tap(counter)(empty()) == Absent()
    assert counter.calls == 0


def test_tap_prints(capsys) -> None:
    tap(print)(Identity("hello"))
    assert capsys.readouterr().out == "hello\n"
