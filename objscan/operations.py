"""
The six traversal operations over key-value containers.

Each operation is one linear scan over a snapshot of the canonical key
order, with one of three exit policies:

    exhaustive          — for_each, map, filter, reduce
    first truthy stops  — some
    first falsy stops   — every

Snapshot policy (shared by all six):
    - the key order is captured once, before the first callback runs
    - each value is read from the container at visit time
    - a key removed after the snapshot is skipped
    - a key added after the snapshot is never visited

The input container is never written to. map() and filter() build a new
plain dict that has no tie to the input's class.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterator

from .errors import EmptySeedError
from .invocation import MISSING, Invocation
from .logger import get_logger
from .ordering import ordered_keys

log = get_logger(__name__)

__all__ = ["for_each", "map", "filter", "reduce", "some", "every"]


# =============================================================================
# SCAN
# =============================================================================

def _scan(container: Mapping[Any, Any], operation: str) -> Iterator[tuple[str, Any]]:
    """Snapshot the key order now and return an iterator over present entries."""
    snapshot = ordered_keys(container)
    log.debug("%s: scanning %d key(s)", operation, len(snapshot))

    def visit() -> Iterator[tuple[str, Any]]:
        for key in snapshot:
            if key not in container:
                log.debug("%s: key %r removed during scan, skipping", operation, key)
                continue
            yield key, container[key]

    return visit()


# =============================================================================
# EXHAUSTIVE OPERATIONS
# =============================================================================

def for_each(
    container: Mapping[Any, Any],
    callback: Callable[..., Any],
    receiver: Any = MISSING,
) -> None:
    """Call callback(value, key, container) for every entry."""
    invoke = Invocation("for_each", callback, receiver)
    for key, value in _scan(container, "for_each"):
        invoke(value, key, container)


def map(
    container: Mapping[Any, Any],
    callback: Callable[..., Any],
    receiver: Any = MISSING,
) -> dict[str, Any]:
    """
    Build a new dict with the same keys and transformed values.

    The value stored under each key is callback(value, key, container).
    Only string keys are visited, so {1: "a"} maps to an empty dict.
    """
    invoke = Invocation("map", callback, receiver)
    result: dict[str, Any] = {}
    for key, value in _scan(container, "map"):
        result[key] = invoke(value, key, container)
    return result


def filter(
    container: Mapping[Any, Any],
    callback: Callable[..., Any],
    receiver: Any = MISSING,
) -> dict[str, Any]:
    """
    Build a new dict of the entries the callback accepts.

    Accepted entries keep their original value. Every entry is tested.
    Non-string keys are never tested and never copied.
    """
    invoke = Invocation("filter", callback, receiver)
    result: dict[str, Any] = {}
    for key, value in _scan(container, "filter"):
        if invoke(value, key, container):
            result[key] = value
    return result


def reduce(
    container: Mapping[Any, Any],
    callback: Callable[..., Any],
    initial: Any = MISSING,
) -> Any:
    """
    Fold the container into one value.

    The callback is called as callback(accumulator, value, key, container)
    and its result becomes the next accumulator.

    With an initial value, folding starts from it and covers every entry;
    an empty container returns initial untouched. Without one, the first
    entry's value is the seed and folding starts at the second entry.

    Raises:
        NotCallableError: If callback is not callable
        EmptySeedError: If no initial value is given and there are no entries
    """
    invoke = Invocation("reduce", callback)
    scan = _scan(container, "reduce")

    if initial is MISSING:
        try:
            _, accumulator = next(scan)
        except StopIteration:
            log.debug("reduce: no entries and no initial value")
            raise EmptySeedError() from None
    else:
        accumulator = initial

    for key, value in scan:
        accumulator = invoke(accumulator, value, key, container)
    return accumulator


# =============================================================================
# SHORT-CIRCUIT OPERATIONS
# =============================================================================

def some(
    container: Mapping[Any, Any],
    callback: Callable[..., Any],
    receiver: Any = MISSING,
) -> bool:
    """True as soon as one entry passes; False for an empty container."""
    invoke = Invocation("some", callback, receiver)
    for key, value in _scan(container, "some"):
        if invoke(value, key, container):
            log.debug("some: stopped at key %r", key)
            return True
    return False


def every(
    container: Mapping[Any, Any],
    callback: Callable[..., Any],
    receiver: Any = MISSING,
) -> bool:
    """False as soon as one entry fails; True for an empty container."""
    invoke = Invocation("every", callback, receiver)
    for key, value in _scan(container, "every"):
        if not invoke(value, key, container):
            log.debug("every: stopped at key %r", key)
            return False
    return True
