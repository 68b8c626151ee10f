"""
Invocation Contract — how every operation calls a user callback.

Argument shapes:
    for_each / map / filter / some / every  — (value, key, container)
    reduce                                  — (accumulator, value, key, container)

The container argument is the caller's own object, never a copy.

An optional receiver binds the callback the way a method is bound to its
instance: the receiver arrives as the first positional argument, ahead of
the contract's arguments. A bound method is rebound, so the receiver takes
the place of its original instance. The binding lasts for one operation
only, and a callback with no positional parameter left for the receiver is
rejected.

A callback may declare fewer positional parameters than the contract
supplies; trailing arguments it cannot accept are dropped. Builtin classes
such as bool, int and str take the value only.
"""

from __future__ import annotations

import functools
import inspect
from enum import Enum
from typing import Any, Callable, Optional

from .errors import NotCallableError, ReceiverError


class _Missing(Enum):
    """Sentinel type for arguments that were not supplied."""
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


# Marks an absent receiver or reduce() initial value; None is a real argument
MISSING = _Missing.MISSING

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def ensure_callable(callback: Any, operation: Optional[str] = None) -> None:
    """
    Reject a callback that cannot be invoked.

    Raises:
        NotCallableError: If callback is not callable
    """
    if not callable(callback):
        raise NotCallableError(callback, operation)


def positional_capacity(callback: Callable[..., Any]) -> Optional[int]:
    """
    Count the positional arguments a callable accepts.

    Builtin classes count as taking one argument. Otherwise returns None
    when there is no upper bound: the callable takes *args, or its
    signature cannot be inspected.
    """
    if isinstance(callback, type) and callback.__module__ == "builtins":
        return 1

    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return 1 if isinstance(callback, type) else None

    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in _POSITIONAL_KINDS:
            count += 1
    return count


def _prepare(
    callback: Callable[..., Any],
    receiver: Any,
    operation: Optional[str],
) -> tuple[Callable[..., Any], Optional[int]]:
    """Resolve the function to call and how many contract arguments it takes."""
    if receiver is MISSING:
        return callback, positional_capacity(callback)

    function = callback.__func__ if inspect.ismethod(callback) else callback
    capacity = positional_capacity(function)
    if capacity == 0:
        raise ReceiverError(callback, operation)

    remaining = None if capacity is None else capacity - 1
    return functools.partial(function, receiver), remaining


def bind_receiver(
    callback: Callable[..., Any],
    receiver: Any = MISSING,
    operation: Optional[str] = None,
) -> Callable[..., Any]:
    """
    Bind callback to receiver, or return it untouched when there is none.

    Raises:
        ReceiverError: If callback has no positional parameter for the receiver
    """
    target, _ = _prepare(callback, receiver, operation)
    return target


class Invocation:
    """
    A callback prepared for one operation.

    Validation, receiver binding and signature inspection all happen once,
    at construction, before any entry of the container is read.
    """

    def __init__(
        self,
        operation: str,
        callback: Callable[..., Any],
        receiver: Any = MISSING,
    ):
        ensure_callable(callback, operation)
        self.operation = operation
        self.callback = callback
        self.receiver = receiver
        self._target, self._capacity = _prepare(callback, receiver, operation)

    def __call__(self, *args: Any) -> Any:
        if self._capacity is not None:
            args = args[:self._capacity]
        return self._target(*args)

    def __repr__(self) -> str:
        return f"Invocation({self.operation!r}, {self.callback!r})"
