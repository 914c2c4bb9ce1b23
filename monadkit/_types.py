"""
Core type definitions for monadkit.

Aliases shared across the library.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Transform = plain unary function, the unit of composition
type Transform[A, B] = Callable[[A], B]

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Thunk = zero-arg callable, used to defer computing defaults and errors
type Thunk[T] = Callable[[], T]

# Effect = observation-only callable, its return value is ignored
type Effect[T] = Callable[[T], object]

__all__ = (
    "Effect",
    "Predicate",
    "Thunk",
    "Transform",
)
