"""
Small library for composing functions and wrapping values in monads.

Core building blocks:
- compose / pipe: chain unary functions left to right
- Functor / Monad: the map and chain contracts
- Identity, Maybe (Present | Absent), Writer: containers implementing them
- fmap / bind / tap: curried map and chain, so stages plug into compose

Architecture:
- Containers are frozen dataclasses, every operation returns a new instance
- MonadInstance is the dispatch table generic code (laws) is written against
- lift bridges Maybe with Optional, exceptions and kungfu Result
"""

# Core types
from ._types import Effect, Predicate, Thunk, Transform

# Composition
from .compose import compose, pipe

# Contracts
from .base import Functor, Monad

# Containers
from .identity import Identity
from .maybe import ABSENT, Absent, Maybe, Present, empty, fold, of, of_nullable

# Writer monad
from . import writer
from .writer import Log, Writer, writer_of

# Pointfree helpers
from .pointfree import bind, fmap, map_over, tap

# Typeclass instances and laws
from . import laws
from .instances import IDENTITY, MAYBE, WRITER, MonadInstance
from .laws import LawReport, check_monad_laws

# Lift helpers
from . import lift

# Collection operations
from .collection import sequence, traverse

# Errors
from ._errors import AbsentValueError, EmptyCompositionError

__all__ = (
    # Types
    "Effect",
    "Predicate",
    "Thunk",
    "Transform",
    # Composition
    "compose",
    "pipe",
    # Contracts
    "Functor",
    "Monad",
    # Containers
    "Identity",
    "ABSENT",
    "Absent",
    "Maybe",
    "Present",
    "empty",
    "fold",
    "of",
    "of_nullable",
    # Writer
    "writer",
    "Log",
    "Writer",
    "writer_of",
    # Pointfree
    "bind",
    "fmap",
    "map_over",
    "tap",
    # Instances and laws
    "laws",
    "IDENTITY",
    "MAYBE",
    "WRITER",
    "MonadInstance",
    "LawReport",
    "check_monad_laws",
    # Lift module (namespace import)
    "lift",
    # Collection
    "sequence",
    "traverse",
    # Errors
    "AbsentValueError",
    "EmptyCompositionError",
)
