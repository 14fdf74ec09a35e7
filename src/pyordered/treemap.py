"""
Ordered map backed by a red-black tree.

TreeMap keeps its keys sorted by the comparator it was created with and
forwards every operation to the underlying Tree.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, Optional, TypeVar

from .rbtree import Tree, TreeIterator

K = TypeVar("K")
V = TypeVar("V")


class MapIterator(Generic[K, V]):
    """Stateful key/value cursor over a TreeMap."""

    def __init__(self, iterator: TreeIterator[K, V]):
        self.iterator = iterator

    def next(self) -> bool:
        """Move to the next entry; False once past the last one."""
        return self.iterator.next()

    def prev(self) -> bool:
        """Move to the previous entry; False once before the first one."""
        return self.iterator.prev()

    def key(self) -> Optional[K]:
        """Current key, or None outside the sequence."""
        return self.iterator.key()

    def value(self) -> Optional[V]:
        """Current value, or None outside the sequence."""
        return self.iterator.value()

    def begin(self) -> None:
        """Reset before the first entry."""
        self.iterator.begin()

    def end(self) -> None:
        """Reset after the last entry."""
        self.iterator.end()

    def first(self) -> bool:
        """Move to the first entry; False if the map is empty."""
        return self.iterator.first()

    def last(self) -> bool:
        """Move to the last entry; False if the map is empty."""
        return self.iterator.last()


class TreeMap(Generic[K, V]):
    """Map whose keys are kept in comparator order."""

    def __init__(self, comparator: Callable[[K, K], int]):
        self.tree: Tree[K, V] = Tree(comparator)

    def __len__(self) -> int:
        return self.tree.size()

    def __contains__(self, key: K) -> bool:
        return key in self.tree

    def __iter__(self) -> Iterator[K]:
        return iter(self.tree)

    def __str__(self) -> str:
        pairs = " ".join(f"{k}:{v}" for k, v in self.tree.items())
        return f"TreeMap\nmap[{pairs}]"

    def put(self, key: K, value: V) -> None:
        """Insert or replace the value stored under key."""
        self.tree.put(key, value)

    def get(self, key: K) -> tuple[Optional[V], bool]:
        """
        Look up key.

        Returns:
            (value, True) if found, otherwise (None, False)
        """
        return self.tree.get(key)

    def remove(self, key: K) -> None:
        """Remove key; missing keys are ignored."""
        self.tree.remove(key)

    def empty(self) -> bool:
        """Check if map is empty."""
        return self.tree.empty()

    def size(self) -> int:
        """Get number of entries in map."""
        return self.tree.size()

    def keys(self) -> list[K]:
        """Return all keys in ascending order."""
        return self.tree.keys()

    def values(self) -> list[V]:
        """Return all values in ascending key order."""
        return self.tree.values()

    def reversed_values(self) -> list[V]:
        """Return all values in descending key order."""
        return self.tree.reversed_values()

    def clear(self) -> None:
        """Remove all entries."""
        self.tree.clear()

    def min(self) -> tuple[Optional[K], Optional[V]]:
        """Return the smallest key and its value, or (None, None) if empty."""
        entry = self.tree.left()
        if entry is None:
            return None, None
        return entry.key, entry.value

    def max(self) -> tuple[Optional[K], Optional[V]]:
        """Return the largest key and its value, or (None, None) if empty."""
        entry = self.tree.right()
        if entry is None:
            return None, None
        return entry.key, entry.value

    def floor(self, key: K) -> tuple[Optional[K], Optional[V]]:
        """
        Find the largest key less than or equal to key.

        A floor may not exist, either because the map is empty or because every
        key is larger than key; (None, None) is returned then.
        """
        entry, found = self.tree.floor(key)
        if not found:
            return None, None
        return entry.key, entry.value

    def ceiling(self, key: K) -> tuple[Optional[K], Optional[V]]:
        """
        Find the smallest key greater than or equal to key.

        A ceiling may not exist, either because the map is empty or because every
        key is smaller than key; (None, None) is returned then.
        """
        entry, found = self.tree.ceiling(key)
        if not found:
            return None, None
        return entry.key, entry.value

    def iterator(self) -> MapIterator[K, V]:
        """Get a cursor positioned before the first entry."""
        return MapIterator(self.tree.iterator())
