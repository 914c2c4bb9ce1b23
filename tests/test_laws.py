"""Functor and monad laws across every container."""

from __future__ import annotations

import pytest

from monadkit import (
    IDENTITY,
    MAYBE,
    WRITER,
    Identity,
    LawReport,
    MonadInstance,
    check_monad_laws,
    empty,
    of,
    writer_of,
)
from monadkit.laws import associativity, functor_composition, functor_identity, left_identity, right_identity

CASES = [
    pytest.param(IDENTITY, lambda x: Identity(x + 1), lambda x: Identity(x * 2), None, id="identity"),
    pytest.param(MAYBE, lambda x: of(x + 1), lambda x: of(x * 2), None, id="maybe-present"),
    pytest.param(MAYBE, lambda x: of(x + 1), lambda x: of(x * 2), empty(), id="maybe-absent"),
    pytest.param(MAYBE, lambda x: empty(), lambda x: of(x * 2), None, id="maybe-absent-midway"),
    pytest.param(
        WRITER,
        lambda x: writer_of(x + 1, "f"),
        lambda x: writer_of(x * 2, "g"),
        writer_of(5, "seed"),
        id="writer",
    ),
]


@pytest.mark.parametrize(("instance", "f", "g", "subject"), CASES)
@pytest.mark.parametrize("value", [0, 5, -7])
def test_laws_hold(instance: MonadInstance, f, g, subject, value: int) -> None:
    report = check_monad_laws(
        instance,
        value,
        f=f,
        g=g,
        map_f=lambda x: x + 3,
        map_g=lambda x: x * 4,
        subject=subject,
    )
    assert isinstance(report, LawReport)
    assert report.instance == instance.name
    assert report.all_hold, report


def test_individual_laws_on_maybe() -> None:
    m = of("test")
    assert functor_identity(MAYBE, m)
    assert functor_composition(MAYBE, m, str.upper, lambda s: s + "!")
    assert left_identity(MAYBE, "test", lambda s: of(len(s)))
    assert right_identity(MAYBE, m)
    assert associativity(MAYBE, m, lambda s: of(len(s)), lambda n: of(n * 2))


def test_broken_monad_is_detected() -> None:
    # unit that tags the value breaks right identity
    broken = MonadInstance(name="broken", unit=lambda x: Identity((x, "tagged")))
    assert not right_identity(broken, Identity(1))


def test_instances_declare_their_container() -> None:
    from monadkit import instances

    assert "Maybe" in instances.__annotations__["MAYBE"]
    assert "Identity" in instances.__annotations__["IDENTITY"]
    assert "Writer" in instances.__annotations__["WRITER"]
    assert MAYBE.unit(1) == of(1)
