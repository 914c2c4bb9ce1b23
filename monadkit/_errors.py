from __future__ import annotations

class EmptyCompositionError(Exception):
    """compose() was called without any functions."""

    def __init__(self) -> None:
        super().__init__("compose() needs at least one function")

class AbsentValueError(Exception):
    """unwrap() was called on an absent value."""

    hint: str | None

    def __init__(self, hint: str | None = None) -> None:
        self.hint = hint
        message = "Called unwrap() on Absent"
        if hint is not None:
            message = f"{message}: {hint}"
        super().__init__(message)

__all__ = ("AbsentValueError", "EmptyCompositionError")
