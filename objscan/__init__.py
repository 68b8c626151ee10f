# objscan
# Traversal and aggregation operations for key-value containers

"""
Six operations over any Mapping, in canonical key order:

    for_each, map, filter, reduce, some, every

Canonical order puts integer keys first, ascending, followed by the
remaining string keys in creation order. The operations are plain
functions that take the container as an argument; nothing is added to
dict or any other container class.
"""

from .errors import (
    EmptySeedError,
    ErrorKind,
    NotCallableError,
    ReceiverError,
    TraversalError,
)
from .invocation import MISSING
from .operations import every, filter, for_each, map, reduce, some
from .ordering import entries, is_integer_key, keys, ordered_keys, values

__version__ = "0.1.0"

__all__ = [
    "MISSING",
    "EmptySeedError",
    "ErrorKind",
    "NotCallableError",
    "ReceiverError",
    "TraversalError",
    "entries",
    "every",
    "filter",
    "for_each",
    "is_integer_key",
    "keys",
    "map",
    "ordered_keys",
    "reduce",
    "some",
    "values",
]
