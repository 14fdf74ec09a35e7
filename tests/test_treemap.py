"""Tests for TreeMap adapter."""

import pytest
from pyordered.comparators import number_comparator, string_comparator
from pyordered.rbtree import ConcurrentModificationError
from pyordered.treemap import TreeMap


@pytest.fixture
def m():
    tree_map = TreeMap(number_comparator)
    for key, value in zip([5, 6, 7, 3, 4, 1, 2], "efgcdab"):
        tree_map.put(key, value)
    return tree_map


class TestTreeMap:
    """Test TreeMap operations."""

    def test_create_empty(self):
        """Test an empty map."""
        tree_map = TreeMap(string_comparator)
        assert tree_map.empty()
        assert tree_map.size() == 0
        assert tree_map.min() == (None, None)
        assert tree_map.max() == (None, None)
        assert tree_map.floor("a") == (None, None)
        assert tree_map.ceiling("a") == (None, None)

    def test_put_and_get(self, m):
        """Test insertion and lookup."""
        assert m.size() == 7
        assert len(m) == 7
        assert m.get(3) == ("c", True)
        assert m.get(9) == (None, False)
        m.put(3, "C")
        assert m.get(3) == ("C", True)
        assert m.size() == 7

    def test_remove(self, m):
        """Test removal."""
        m.remove(5)
        m.remove(5)
        m.remove(42)
        assert m.keys() == [1, 2, 3, 4, 6, 7]
        assert 5 not in m

    def test_ordered_views(self, m):
        """Test keys and values follow key order."""
        assert m.keys() == [1, 2, 3, 4, 5, 6, 7]
        assert m.values() == list("abcdefg")
        assert m.reversed_values() == list("gfedcba")
        assert list(m) == [1, 2, 3, 4, 5, 6, 7]

    def test_min_max(self, m):
        """Test extremal pairs."""
        assert m.min() == (1, "a")
        assert m.max() == (7, "g")

    def test_floor_ceiling(self, m):
        """Test floor and ceiling pairs."""
        m.remove(4)
        assert m.floor(4) == (3, "c")
        assert m.ceiling(4) == (5, "e")
        assert m.floor(0) == (None, None)
        assert m.ceiling(8) == (None, None)

    def test_clear(self, m):
        """Test clear."""
        m.clear()
        assert m.empty()
        assert m.keys() == []

    def test_iterator(self, m):
        """Test map iterator in both directions."""
        it = m.iterator()
        pairs = []
        while it.next():
            pairs.append((it.key(), it.value()))
        assert pairs == list(zip(range(1, 8), "abcdefg"))

        assert it.last()
        assert it.key() == 7
        assert it.prev()
        assert it.value() == "f"
        assert it.first()
        assert it.key() == 1
        it.end()
        assert it.prev()
        assert it.key() == 7
        it.begin()
        assert it.next()
        assert it.key() == 1

    def test_iterator_invalidated(self, m):
        """Test map iterator fails fast after structural change."""
        it = m.iterator()
        it.first()
        m.remove(1)
        with pytest.raises(ConcurrentModificationError):
            it.next()

    def test_str(self):
        """Test string representation."""
        tree_map = TreeMap(string_comparator)
        tree_map.put("b", 2)
        tree_map.put("a", 1)
        assert str(tree_map) == "TreeMap\nmap[a:1 b:2]"
        assert str(TreeMap(string_comparator)) == "TreeMap\nmap[]"
