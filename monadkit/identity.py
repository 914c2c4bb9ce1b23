"""Identity monad, the simplest container: always holds its value."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .base import Monad


@dataclass(frozen=True, slots=True)
class Identity[A](Monad[A]):
    """Always-present wrapper. Never empty."""

    value: A

    @staticmethod
    def unit[B](value: B, /) -> Identity[B]:
        return Identity(value)

    def map[B](self, transform: Callable[[A], B], /) -> Identity[B]:
        return Identity(transform(self.value))

    def chain[B](self, transform: Callable[[A], Identity[B]], /) -> Identity[B]:
        return transform(self.value)

    def unwrap(self) -> A:
        return self.value


__all__ = ("Identity",)
