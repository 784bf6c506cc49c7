"""
Associative Array Module

This module implements the core key/value container.

Pairs live in a plain Python list of slots. Lookups walk the occupied
slots from the front and compare keys with ==, so every lookup is O(size).
When a new key arrives and every slot is taken, the list doubles in length.
Removal moves the last pair into the vacated slot, so the order of the
remaining pairs is not preserved once something has been removed.

Instances are not thread-safe. Callers sharing one across threads must
provide their own locking.
"""

import logging
from typing import Generic, List, Optional, TypeVar

from ..config.settings import settings
from .errors import InvalidKeyError, KeyNotFoundError
from .pair import KVPair

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class AssociativeArray(Generic[K, V]):
    """
    Array-backed associative container.

    Usage:
        pairs = AssociativeArray()
        pairs.set("a", 1)
        pairs.get("a")        # Returns 1
        pairs.has_key("b")    # Returns False
        str(pairs)            # "{a:1}"

    Invariants:
        - size() <= capacity
        - slots 0 .. size()-1 hold a pair, every other slot is None
        - no two stored pairs have equal keys

    Attributes:
        capacity: Number of slots currently allocated (read-only)
    """

    def __init__(self, capacity: Optional[int] = None):
        """
        Initialize an empty associative array.

        Args:
            capacity: Initial number of slots (default from
                settings.DEFAULT_CAPACITY)

        Raises:
            ValueError: If capacity is not positive
        """
        if capacity is None:
            capacity = settings.DEFAULT_CAPACITY
        if capacity <= 0:
            raise ValueError("capacity must be positive")

        self._size = 0
        self._pairs: List[Optional[KVPair]] = [None] * capacity

    @property
    def capacity(self) -> int:
        """Number of slots in the backing list."""
        return len(self._pairs)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def set(self, key: K, value: V) -> None:
        """
        Associate value with key. Later calls to get(key) return value.

        Args:
            key: The key to store (any value except None)
            value: The value to associate with the key

        Raises:
            InvalidKeyError: If key is None

        Time Complexity: O(size), plus O(capacity) when the list grows
        """
        if key is None:
            raise InvalidKeyError()

        index = self._find(key)
        if index is not None:
            self._pairs[index].val = value
            return

        if self._size >= len(self._pairs):
            self._expand()
        self._pairs[self._size] = KVPair(key, value)
        self._size += 1

    def get(self, key: K) -> V:
        """
        Retrieve the value associated with key.

        Args:
            key: The key to look up (None is accepted and never found)

        Returns:
            The stored value

        Raises:
            KeyNotFoundError: If no pair has a key equal to key

        Time Complexity: O(size)
        """
        index = self._find(key)
        if index is None:
            raise KeyNotFoundError(key)
        return self._pairs[index].val

    def has_key(self, key: K) -> bool:
        """
        Check whether key is present.

        Args:
            key: The key to check

        Returns:
            True if a pair with an equal key is stored, False otherwise
        """
        return self._find(key) is not None

    def remove(self, key: K) -> None:
        """
        Remove the pair associated with key. Missing keys are ignored.

        The last stored pair is moved into the freed slot, so this is O(1)
        once the key has been found, but it reorders the remaining pairs.

        Args:
            key: The key to remove
        """
        index = self._find(key)
        if index is None:
            return

        self._size -= 1
        self._pairs[index] = self._pairs[self._size]
        self._pairs[self._size] = None

    def size(self) -> int:
        """Get the number of stored pairs."""
        return self._size

    def clone(self) -> "AssociativeArray[K, V]":
        """
        Create an independent copy of this associative array.

        The copy's backing list holds exactly size() slots, and each pair
        is cloned (see KVPair.clone), so mutating either array never
        affects the other.

        Returns:
            A new AssociativeArray with the same pairs in the same slots
        """
        duplicate = type(self).__new__(type(self))
        duplicate._pairs = [self._pairs[i].clone() for i in range(self._size)]
        duplicate._size = self._size
        logger.debug("Cloned associative array with %d pairs", self._size)
        return duplicate

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.has_key(key)

    def __str__(self) -> str:
        return "{" + ", ".join(str(self._pairs[i]) for i in range(self._size)) + "}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _expand(self) -> None:
        """Double the number of slots, keeping existing pairs in place."""
        old_capacity = len(self._pairs)
        # A clone of an empty array has zero slots.
        new_capacity = max(old_capacity * 2, 1)
        self._pairs.extend([None] * (new_capacity - old_capacity))
        logger.debug("Expanded capacity from %d to %d", old_capacity, new_capacity)

    def _find(self, key: K) -> Optional[int]:
        """
        Find the slot holding key.

        Args:
            key: The key to search for

        Returns:
            Index of the first pair whose key equals key, or None

        Time Complexity: O(size)
        """
        for i in range(self._size):
            if self._pairs[i].key == key:
                return i
        return None
