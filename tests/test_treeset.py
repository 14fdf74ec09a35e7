"""Tests for TreeSet adapter."""

import pytest
from pyordered.comparators import number_comparator, string_comparator
from pyordered.rbtree import ConcurrentModificationError
from pyordered.treeset import TreeSet


class TestTreeSet:
    """Test TreeSet operations."""

    def test_create_empty(self):
        """Test an empty set."""
        s = TreeSet(number_comparator)
        assert s.empty()
        assert s.size() == 0
        assert s.first() is None
        assert s.last() is None
        assert s.values() == []

    def test_create_with_items(self):
        """Test initial items are added and deduplicated."""
        s = TreeSet(number_comparator, 3, 1, 2, 3)
        assert s.size() == 3
        assert s.values() == [1, 2, 3]

    def test_add(self):
        """Test adding several items at once."""
        s = TreeSet(number_comparator)
        s.add()
        s.add(1)
        s.add(2, 2, 3)
        s.add()
        assert not s.empty()
        assert len(s) == 3
        assert s.values() == [1, 2, 3]
        assert s.reversed_values() == [3, 2, 1]

    def test_contains(self):
        """Test membership of several items."""
        s = TreeSet(number_comparator, 3, 1, 2)
        assert s.contains()
        assert s.contains(1)
        assert s.contains(1, 2, 3)
        assert not s.contains(1, 2, 3, 4)
        assert 2 in s
        assert 4 not in s

    def test_remove(self):
        """Test removing items, including missing ones."""
        s = TreeSet(number_comparator, 3, 1, 2)
        s.remove()
        s.remove(1)
        s.remove(4)
        s.remove(1, 3, 1)
        assert s.values() == [2]
        s.remove(2)
        assert s.empty()

    def test_add_if(self):
        """Test conditional add replaces an equal item only when allowed."""
        by_name = lambda a, b: string_comparator(a[0], b[0])
        newer = lambda old, new: new[1] > old[1]
        s = TreeSet(by_name)
        s.add_if(("x", 1), newer)
        s.add_if(("x", 0), newer)
        assert s.values() == [("x", 1)]
        s.add_if(("x", 5), newer)
        assert s.values() == [("x", 5)]
        assert s.size() == 1

    def test_first_last(self):
        """Test extremal items."""
        s = TreeSet(string_comparator, "c", "a", "b")
        assert s.first() == "a"
        assert s.last() == "c"

    def test_iteration(self):
        """Test iterating items."""
        s = TreeSet(string_comparator, "c", "a", "b")
        assert list(s) == ["a", "b", "c"]
        it = s.iterator()
        seen = []
        while it.next():
            seen.append(it.key())
        assert seen == ["a", "b", "c"]

    def test_clear(self):
        """Test clear."""
        s = TreeSet(number_comparator, 1, 2)
        s.clear()
        assert s.empty()

    def test_str(self):
        """Test string representation."""
        s = TreeSet(number_comparator, 2, 1, 3)
        assert str(s) == "TreeSet\n1, 2, 3"

    def test_iterator_values_are_items(self):
        """Test the set iterator reports items from both key and value."""
        s = TreeSet(number_comparator, 3, 1, 2)
        it = s.iterator()
        assert it.value() is None
        seen = []
        while it.next():
            assert it.key() == it.value()
            seen.append(it.value())
        assert seen == [1, 2, 3]

        assert it.last()
        assert it.value() == 3
        assert it.prev()
        assert it.value() == 2
        assert it.first()
        assert it.value() == 1
        it.end()
        assert it.prev()
        assert it.value() == 3
        it.begin()
        assert not it.prev()

    def test_for_loop_remove_raises(self):
        """Test removing an item while looping over the set raises."""
        s = TreeSet(number_comparator, *range(1, 11))
        with pytest.raises(ConcurrentModificationError):
            for item in s:
                if item == 1:
                    s.remove(4)
