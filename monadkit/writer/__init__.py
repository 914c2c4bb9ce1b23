"""
Writer Monad
============

Writer - a value plus an accumulated Log:
- Log[W] (monoid: empty + combine)
- Writer[T, W] (map keeps the log, chain concatenates logs)
"""

from .log import Log
from .monad import Writer, writer_of

__all__ = (
    "Log",
    "Writer",
    "writer_of",
)
