"""
Ordered set backed by a red-black tree.

Items are stored as tree keys; every key maps to the same marker value.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, Optional, TypeVar

from .rbtree import Tree, TreeIterator

T = TypeVar("T")

_ITEM_EXISTS = object()


class SetIterator(Generic[T]):
    """Stateful item cursor over a TreeSet."""

    def __init__(self, iterator: TreeIterator[T, object]):
        self.iterator = iterator

    def next(self) -> bool:
        """Move to the next item; False once past the last one."""
        return self.iterator.next()

    def prev(self) -> bool:
        """Move to the previous item; False once before the first one."""
        return self.iterator.prev()

    def value(self) -> Optional[T]:
        """Current item, or None outside the sequence."""
        return self.iterator.key()

    key = value

    def begin(self) -> None:
        """Reset before the first item."""
        self.iterator.begin()

    def end(self) -> None:
        """Reset after the last item."""
        self.iterator.end()

    def first(self) -> bool:
        """Move to the first item; False if the set is empty."""
        return self.iterator.first()

    def last(self) -> bool:
        """Move to the last item; False if the set is empty."""
        return self.iterator.last()


class TreeSet(Generic[T]):
    """Set whose items are kept in comparator order."""

    def __init__(self, comparator: Callable[[T, T], int], *items: T):
        """
        Initialize set.

        Args:
            comparator: Three-way comparison function for items
            *items: Initial items
        """
        self.tree: Tree[T, object] = Tree(comparator)
        self.add(*items)

    def __len__(self) -> int:
        return self.tree.size()

    def __contains__(self, item: T) -> bool:
        return item in self.tree

    def __iter__(self) -> Iterator[T]:
        return iter(self.tree)

    def __str__(self) -> str:
        return "TreeSet\n" + ", ".join(str(item) for item in self.tree)

    def add(self, *items: T) -> None:
        """Add one or more items."""
        for item in items:
            self.tree.put(item, _ITEM_EXISTS)

    def add_if(self, item: T, predicate: Callable[[T, T], bool]) -> None:
        """
        Add item unless an equal item is present and predicate rejects it.

        Args:
            item: Item to add
            predicate: Called as predicate(existing, item) when an equal item
                is present; the stored item is replaced if it returns True
        """
        self.tree.put_if(item, _ITEM_EXISTS, predicate)

    def remove(self, *items: T) -> None:
        """Remove one or more items; missing items are ignored."""
        for item in items:
            self.tree.remove(item)

    def contains(self, *items: T) -> bool:
        """
        Check that all items are present.

        Returns True when called without items: every set contains the empty set.
        """
        return all(item in self.tree for item in items)

    def empty(self) -> bool:
        """Check if set is empty."""
        return self.tree.empty()

    def size(self) -> int:
        """Get number of items in set."""
        return self.tree.size()

    def clear(self) -> None:
        """Remove all items."""
        self.tree.clear()

    def values(self) -> list[T]:
        """Return all items in ascending order."""
        return self.tree.keys()

    def reversed_values(self) -> list[T]:
        """Return all items in descending order."""
        return self.tree.reversed_keys()

    def first(self) -> Optional[T]:
        """Smallest item, or None if the set is empty."""
        entry = self.tree.left()
        return entry.key if entry is not None else None

    def last(self) -> Optional[T]:
        """Largest item, or None if the set is empty."""
        entry = self.tree.right()
        return entry.key if entry is not None else None

    def iterator(self) -> SetIterator[T]:
        """Get a cursor positioned before the first item."""
        return SetIterator(self.tree.iterator())
