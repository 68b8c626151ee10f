"""
Error taxonomy for objscan.

Every failure the traversal engine raises on its own behalf carries an
ErrorKind and a human-readable reason. Failures raised by user callbacks
are never wrapped: they reach the caller as the original exception.

Error Kinds:
    NOT_CALLABLE     — The supplied callback cannot be invoked
    EMPTY_SEED       — reduce() without an initial value on an empty container
    NO_RECEIVER_SLOT — A receiver was given to a callback with no parameter for it
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """The failure modes raised by the engine itself."""
    NOT_CALLABLE = "not_callable"
    EMPTY_SEED = "empty_seed"
    NO_RECEIVER_SLOT = "no_receiver_slot"


class TraversalError(Exception):
    """Base class for failures detected by a traversal operation."""

    def __init__(self, kind: ErrorKind, reason: str, operation: Optional[str] = None):
        self.kind = kind
        self.reason = reason
        self.operation = operation
        prefix = f"{operation}: " if operation else ""
        super().__init__(f"[{kind.value}] {prefix}{reason}")


class NotCallableError(TraversalError, TypeError):
    """Raised before any entry is visited when the callback is not callable."""

    def __init__(self, callback: object, operation: Optional[str] = None):
        self.callback = callback
        super().__init__(
            ErrorKind.NOT_CALLABLE,
            f"{type(callback).__name__} object is not callable",
            operation,
        )


class EmptySeedError(TraversalError, TypeError):
    """Raised by reduce() when there is no initial value and no entry to seed from."""

    def __init__(self, operation: Optional[str] = "reduce"):
        super().__init__(
            ErrorKind.EMPTY_SEED,
            "reduce of empty container with no initial value",
            operation,
        )


class ReceiverError(TraversalError, TypeError):
    """Raised before any entry is visited when a receiver would displace the value argument."""

    def __init__(self, callback: object, operation: Optional[str] = None):
        self.callback = callback
        name = getattr(callback, "__qualname__", type(callback).__name__)
        super().__init__(
            ErrorKind.NO_RECEIVER_SLOT,
            f"{name} takes no positional parameter for the receiver",
            operation,
        )
