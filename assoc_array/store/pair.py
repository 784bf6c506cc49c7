"""
Key/Value Pair Module

A single association held in one slot of an AssociativeArray.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


def _duplicate(obj: Any) -> Any:
    """
    Copy obj for a cloned pair.

    Instances with their own clone() method are cloned with it. Everything
    else goes through copy.deepcopy; objects deepcopy cannot handle (locks,
    generators, open files) are shared by reference.
    """
    clone = getattr(obj, "clone", None)
    if callable(clone) and not isinstance(obj, type):
        return clone()
    try:
        return copy.deepcopy(obj)
    except TypeError:
        logger.debug("Sharing uncopyable %s by reference", type(obj).__name__)
        return obj


@dataclass
class KVPair:
    """
    A key paired with its value.

    Attributes:
        key: The key (compared with ==, never None once stored)
        val: The value associated with the key
    """
    key: Any
    val: Any

    def clone(self) -> "KVPair":
        """
        Create an independent copy of this pair.

        Returns:
            A new KVPair holding duplicates of the key and the value
        """
        return KVPair(_duplicate(self.key), _duplicate(self.val))

    def __str__(self) -> str:
        return f"{self.key}:{self.val}"
