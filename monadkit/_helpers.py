"""Internal helpers for monadkit.

Small functions used across multiple modules."""

from __future__ import annotations

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

__all__ = ("identity",)
