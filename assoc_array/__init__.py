"""
Assoc-Array: Array-Backed Associative Container

A small key/value container that stores its pairs in a growable list,
finds keys by linear search and doubles its capacity when it runs out
of slots. No hashing is involved.
"""

from .store import AssociativeArray, InvalidKeyError, KeyNotFoundError, KVPair

__version__ = "1.0.0"

__all__ = ["AssociativeArray", "InvalidKeyError", "KeyNotFoundError", "KVPair"]
