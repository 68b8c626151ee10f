"""
Key-Order Resolver — the canonical enumeration rule for containers.

A container's own string keys are enumerated in two groups:

    1. Integer keys  — canonical non-negative integers ("0", "7", "42",
                       never "007", "-1" or "1.0") up to MAX_INTEGER_KEY,
                       ascending by numeric value
    2. Other keys    — in the order they were first added to the container

Creation order is the container's own iteration order: a dict keeps a key
in place when its value is reassigned and moves it to the end when it is
deleted and added again.

Non-string keys do not take part in the order and are never visited.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from .logger import get_logger

log = get_logger(__name__)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# Largest key that still sorts numerically (2**32 - 2)
MAX_INTEGER_KEY = 2 ** 32 - 2

INTEGER_KEY_PATTERN = re.compile(r"0|[1-9][0-9]*")


# =============================================================================
# KEY CLASSIFICATION
# =============================================================================

def is_integer_key(key: object) -> bool:
    """Check if a key belongs to the ascending integer group."""
    if not isinstance(key, str):
        return False
    if INTEGER_KEY_PATTERN.fullmatch(key) is None:
        return False
    return int(key) <= MAX_INTEGER_KEY


# =============================================================================
# RESOLVER
# =============================================================================

def ordered_keys(container: Mapping[Any, Any]) -> list[str]:
    """
    Return the canonical key order of a container.

    The result is a fresh list, so callers can hold it as a snapshot while
    the container changes underneath. Non-string keys such as 1 are left
    out, with a warning; use the string form "1".
    """
    integer_keys: list[str] = []
    other_keys: list[str] = []
    skipped = 0

    for key in container.keys():
        if not isinstance(key, str):
            skipped += 1
        elif is_integer_key(key):
            integer_keys.append(key)
        else:
            other_keys.append(key)

    if skipped:
        log.warning("Ignoring %d non-string key(s); only string keys are enumerated", skipped)

    integer_keys.sort(key=int)
    return integer_keys + other_keys


def keys(container: Mapping[Any, Any]) -> list[str]:
    """Own string keys in canonical order."""
    return ordered_keys(container)


def values(container: Mapping[Any, Any]) -> list[Any]:
    """Values in canonical key order."""
    return [container[key] for key in ordered_keys(container)]


def entries(container: Mapping[Any, Any]) -> list[tuple[str, Any]]:
    """(key, value) pairs in canonical key order."""
    return [(key, container[key]) for key in ordered_keys(container)]
