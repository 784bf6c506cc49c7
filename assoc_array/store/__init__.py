"""Storage module for Assoc-Array."""

from .associative_array import AssociativeArray
from .errors import AssociativeArrayError, InvalidKeyError, KeyNotFoundError
from .pair import KVPair

__all__ = [
    "AssociativeArray",
    "AssociativeArrayError",
    "InvalidKeyError",
    "KeyNotFoundError",
    "KVPair",
]
