"""Tests for the Writer monad and Log."""

from __future__ import annotations

import pytest

from monadkit import Log, Writer, writer_of


def test_log_monoid() -> None:
    a, b, c = Log.of(1), Log.of(2, 3), Log.of(4)
    assert Log().combine(a) == a
    assert a.combine(Log()) == a
    assert a.combine(b).combine(c) == a.combine(b.combine(c)) == Log.of(1, 2, 3, 4)


def test_log_operations_return_new_logs() -> None:
    log = Log.of("a")
    assert log.tell("b") == Log.of("a", "b")
    assert log.combine(Log.of("c")) == Log.of("a", "c")
    assert log == Log.of("a")


def test_log_cannot_be_mutated() -> None:
    log = Log.of("a")
    with pytest.raises(AttributeError):
        log.append("b")  # type: ignore[attr-defined]


def test_unit_has_empty_log() -> None:
    assert Writer.unit(5).run() == (5, Log())


def test_map_keeps_log() -> None:
    assert writer_of(2, "two").map(lambda x: x * 10) == Writer(20, Log.of("two"))


def test_chain_concatenates_logs_in_order() -> None:
    def add_one(x: int) -> Writer[int, str]:
        return writer_of(x + 1, f"add_one({x})")

    def double(x: int) -> Writer[int, str]:
        return writer_of(x * 2, f"double({x})")

    value, log = writer_of(5, "start").chain(add_one).chain(double).run()
    assert value == 12
    assert list(log) == ["start", "add_one(5)", "double(6)"]


def test_tell_and_with_log() -> None:
    told = Writer.tell("a", "b")
    assert told.value is None
    assert told.log == Log.of("a", "b")
    assert Writer.unit(1).with_log("x").with_log("y").log == Log.of("x", "y")


def test_listen_exposes_log() -> None:
    (value, log), _ = writer_of("v", "entry").listen().run()
    assert value == "v"
    assert log == Log.of("entry")


def test_censor_and_map_log() -> None:
    w = writer_of(1, "secret", "public")
    censored = w.censor(lambda log: [e for e in log if e != "secret"])
    assert censored.log == Log.of("public")
    assert isinstance(censored.log, Log)
    assert w.map_log(str.upper).log == Log.of("SECRET", "PUBLIC")


def test_run_result_cannot_change_original_writer() -> None:
    original = writer_of(1, "a")
    mapped = original.map(str)
    _, log = mapped.run()

    extended = log.tell("x")

    assert list(extended) == ["a", "x"]
    assert original.log == Log.of("a")
    assert mapped.log == Log.of("a")
    with pytest.raises(AttributeError):
        log.append("x")  # type: ignore[attr-defined]


def test_writer_is_hashable() -> None:
    assert hash(writer_of(1, "a")) == hash(writer_of(1, "a"))
    assert len({writer_of(1, "a"), writer_of(1, "a"), writer_of(2)}) == 2
