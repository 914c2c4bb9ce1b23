"""Writer Monad

A value paired with an accumulated Log. Stages write log entries next to
their result instead of printing, and the caller reads the whole log once
the pipeline is done."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from ..base import Monad
from .log import Log


@dataclass(frozen=True, slots=True)
class Writer[T, W](Monad[T]):
    """Writer Monad.

    Monadic laws:
    - Left identity: unit(a).chain(f) == f(a)
    - Right identity: m.chain(unit) == m
    - Associativity: m.chain(f).chain(g) == m.chain(x => f(x).chain(g))
    """

    value: T
    log: Log[W] = field(default_factory=Log)

    @staticmethod
    def unit[V](value: V, /) -> Writer[V, typing.Any]:
        """Lift a value with an empty log."""
        return Writer(value, Log())

    @staticmethod
    def tell[LogEntry](*entries: LogEntry) -> Writer[None, LogEntry]:
        """Write entries to the log without producing a value."""
        return Writer(None, Log.of(*entries))

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> Writer[U, W]:
        """Functor fmap - apply function to value, preserve log."""
        return Writer(f(self.value), self.log)

    def map_log[V](self, f: Callable[[W], V], /) -> Writer[T, V]:
        """Transform every log entry."""
        return Writer(self.value, Log(f(entry) for entry in self.log))

    # Monad operations

    def chain[U](self, f: Callable[[T], Writer[U, W]], /) -> Writer[U, W]:
        """Monadic bind (>>=): run f, append its log after ours."""
        next_writer = f(self.value)
        return Writer(next_writer.value, self.log.combine(next_writer.log))

    # Writer operations

    def with_log(self, *entries: W) -> Writer[T, W]:
        """Add entries to log without changing the value."""
        return Writer(self.value, self.log.combine(Log.of(*entries)))

    def listen(self) -> Writer[tuple[T, Log[W]], W]:
        """Get access to the log along with the value."""
        return Writer((self.value, self.log), self.log)

    def censor(self, f: Callable[[Log[W]], Iterable[W]], /) -> Writer[T, W]:
        """Rewrite the whole log."""
        return Writer(self.value, Log(f(self.log)))

    def run(self) -> tuple[T, Log[W]]:
        return self.value, self.log


# Convenience Constructors
def writer_of[T, W](value: T, *log_entries: W) -> Writer[T, W]:
    """Create Writer with value and optional log entries."""
    return Writer(value, Log.of(*log_entries))


__all__ = ("Writer", "writer_of")
