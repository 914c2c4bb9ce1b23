"""
Lift helpers with semantic namespaces.

Supports two import styles:
    from monadkit import lift as L   # Recommended
    from monadkit import lift        # Explicit

Architecture:
- L.up.*    - lifting values into Maybe
- L.down.*  - lowering Maybe into a value or a kungfu Result
- L.call()  - calling Optional-returning functions with lifting
- L.to_lazy / L.from_lazy - bridge to kungfu LazyCoroResult

Examples:
    from monadkit import lift as L

    # Lifting values
    user = L.up.pure(User(id=42))
    maybe = L.up.optional(db_result)
    parsed = L.up.catching(lambda: int(raw))

    # Calling functions
    user = L.call(users.get, 42)

    # Lowering
    name = L.down.or_else(user.map(lambda u: u.name), default="Guest")
    result = L.down.to_result(user, error=lambda: NotFound(42))

    # Decorators
    @L.lifted
    def find(user_id: int) -> User | None: ...
"""

from __future__ import annotations

# Import namespaces
from . import down as down_ns
from . import up as up_ns

# From up namespace
from .up import catching, from_result, optional, pure

# From call namespace
from .call import call, lifted

# From down namespace
from .down import or_else, to_result, unsafe

# kungfu bridge
from .lazy import from_lazy, to_lazy

# Namespace aliases: L.up.*, L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "pure",
    "optional",
    "from_result",
    "catching",
    # Call
    "call",
    "lifted",
    # Down
    "to_result",
    "unsafe",
    "or_else",
    # kungfu bridge
    "to_lazy",
    "from_lazy",
)
