"""
Tests for KVPair

These tests verify the key/value record:
- str() rendering as key:val
- clone() producing an independent pair

Run with: python -m pytest tests/test_pair.py -v
"""

import threading

from assoc_array.store import KVPair


class Cloneable:
    """Value type exposing its own clone() method."""

    def __init__(self, items):
        self.items = list(items)
        self.clones = 0

    def clone(self) -> "Cloneable":
        self.clones += 1
        return Cloneable(self.items)


class TestKVPairStr:
    """Test string rendering."""

    def test_str(self):
        """Test key and value are joined with a colon."""
        assert str(KVPair("a", 1)) == "a:1"

    def test_str_uses_str_of_parts(self):
        """Test rendering uses str() rather than repr()."""
        assert str(KVPair(1.5, None)) == "1.5:None"


class TestKVPairClone:
    """Test clone() method."""

    def test_clone_is_distinct_object(self):
        """Test the clone is a new pair with equal fields."""
        pair = KVPair("a", 1)
        copy = pair.clone()

        assert copy is not pair
        assert copy == pair

    def test_clone_deep_copies_mutable_value(self):
        """Test mutable values are duplicated rather than shared."""
        pair = KVPair("a", [1, 2])
        copy = pair.clone()
        copy.val.append(3)

        assert pair.val == [1, 2]
        assert copy.val == [1, 2, 3]

    def test_clone_deep_copies_mutable_key(self):
        """Test mutable keys are duplicated rather than shared."""
        pair = KVPair(["k"], "v")
        copy = pair.clone()

        assert copy.key == ["k"]
        assert copy.key is not pair.key

    def test_clone_prefers_clone_method(self):
        """Test a value's own clone() is used when available."""
        value = Cloneable([1, 2])
        pair = KVPair("a", value)
        copy = pair.clone()

        assert value.clones == 1
        assert copy.val is not value
        assert copy.val.items == [1, 2]

    def test_clone_field_update_is_independent(self):
        """Test reassigning val on the clone leaves the original alone."""
        pair = KVPair("a", 1)
        copy = pair.clone()
        copy.val = 2

        assert pair.val == 1

    def test_clone_class_key(self):
        """Test a class with a clone method is not called as if it were an instance."""
        pair = KVPair(Cloneable, 1)
        copy = pair.clone()

        assert copy.key is Cloneable
        assert copy.val == 1

    def test_clone_uncopyable_value(self):
        """Test a lock value is shared by reference."""
        lock = threading.Lock()
        pair = KVPair("lock", lock)
        copy = pair.clone()

        assert copy is not pair
        assert copy.val is lock

    def test_clone_generator_value(self):
        """Test a generator value is shared by reference."""
        values = (i for i in range(3))
        copy = KVPair("gen", values).clone()

        assert copy.val is values
