"""Collection operations for Maybe."""

from .sequence import sequence
from .traverse import traverse

__all__ = (
    "sequence",
    "traverse",
)
