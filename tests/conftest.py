"""
Pytest Configuration and Fixtures

This module provides shared fixtures for all tests.
"""

import pytest

from assoc_array.store import AssociativeArray


# ============================================================================
# AssociativeArray Fixtures
# ============================================================================

@pytest.fixture
def store() -> AssociativeArray:
    """Create a fresh AssociativeArray with the default capacity (16 slots)."""
    return AssociativeArray()


@pytest.fixture
def small_store() -> AssociativeArray:
    """Create an AssociativeArray with 2 slots for growth testing."""
    return AssociativeArray(capacity=2)


@pytest.fixture
def populated_store() -> AssociativeArray:
    """Create an AssociativeArray holding a:1, b:2, c:3 in that order."""
    pairs = AssociativeArray()
    pairs.set("a", 1)
    pairs.set("b", 2)
    pairs.set("c", 3)
    return pairs
