"""
Error Definitions

Exceptions raised by the associative array. Both concrete errors also
derive from the matching builtin so callers can catch ``ValueError`` or
``KeyError`` as they would for a dict.
"""

from typing import Any


class AssociativeArrayError(Exception):
    """Base class for all associative array errors."""


class InvalidKeyError(AssociativeArrayError, ValueError):
    """Raised by set() when the key is None."""

    def __init__(self, message: str = "key must not be None"):
        super().__init__(message)


class KeyNotFoundError(AssociativeArrayError, KeyError):
    """
    Raised when no stored pair has a key equal to the requested one.

    Attributes:
        key: The key that could not be found
    """

    def __init__(self, key: Any):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key not found: {self.key!r}"
