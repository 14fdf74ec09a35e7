"""
Red-Black Tree engine.

This module provides a self-balancing binary search tree ordered by a
caller-supplied three-way comparator, together with a stateful bidirectional
iterator over its nodes. It is the storage engine behind TreeMap and TreeSet.

The tree is not thread-safe: callers sharing one tree between threads must
serialize access themselves.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Generic, Iterator, NamedTuple, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")

Comparator = Callable[[K, K], int]


class Color(IntEnum):
    """Node color tag."""
    red = 0
    black = 1


class ConcurrentModificationError(RuntimeError):
    """Raised when an iterator is stepped after its tree changed structurally."""
    pass


class Entry(NamedTuple):
    """Key/value snapshot of a tree node."""
    key: Any
    value: Any


class _Node(Generic[K, V]):
    __slots__ = ("key", "value", "color", "left", "right", "parent")

    def __init__(self, key: K, value: V, color: Color = Color.red,
                 parent: Optional[_Node[K, V]] = None):
        self.key = key
        self.value = value
        self.color = color
        self.left: Optional[_Node[K, V]] = None
        self.right: Optional[_Node[K, V]] = None
        self.parent = parent

    def __repr__(self) -> str:
        return f"<{self.color.name} {self.key!r}:{self.value!r}>"

    def entry(self) -> Entry:
        return Entry(self.key, self.value)

    def grandparent(self) -> Optional[_Node[K, V]]:
        if self.parent is None:
            return None
        return self.parent.parent

    def sibling(self) -> Optional[_Node[K, V]]:
        if self.parent is None:
            return None
        if self is self.parent.left:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Optional[_Node[K, V]]:
        if self.parent is None:
            return None
        return self.parent.sibling()

    def leftmost(self) -> _Node[K, V]:
        node = self
        while node.left is not None:
            node = node.left
        return node

    def rightmost(self) -> _Node[K, V]:
        node = self
        while node.right is not None:
            node = node.right
        return node

    def successor(self) -> Optional[_Node[K, V]]:
        """In-order successor using parent/child links only."""
        if self.right is not None:
            return self.right.leftmost()
        node = self
        while node.parent is not None and node is node.parent.right:
            node = node.parent
        return node.parent

    def predecessor(self) -> Optional[_Node[K, V]]:
        """In-order predecessor using parent/child links only."""
        if self.left is not None:
            return self.left.rightmost()
        node = self
        while node.parent is not None and node is node.parent.left:
            node = node.parent
        return node.parent


def _color(node: Optional[_Node]) -> Color:
    # Absent children are black leaves.
    return Color.black if node is None else node.color


class Tree(Generic[K, V]):
    """
    Red-Black Tree keyed by a three-way comparator.

    Every key comparison goes through the comparator supplied at construction;
    keys are never compared with ``==`` or ``<``. The comparator must define a
    strict total order, otherwise the tree's behavior is undefined.
    """

    def __init__(self, comparator: Comparator):
        """
        Initialize an empty tree.

        Args:
            comparator: Function returning negative, zero, or positive when its
                first argument is less than, equal to, or greater than its second
        """
        self.comparator = comparator
        self._root: Optional[_Node[K, V]] = None
        self._size = 0
        # Bumped on every structural change, checked by iterators.
        self._version = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: K) -> bool:
        return self._lookup(key) is not None

    def __iter__(self) -> Iterator[K]:
        """
        Yield keys in ascending order.

        Raises:
            ConcurrentModificationError: If the tree changes structurally while
                the generator is suspended
        """
        version = self._version
        node = self._root.leftmost() if self._root is not None else None
        while node is not None:
            yield node.key
            if self._version != version:
                raise ConcurrentModificationError("Tree was modified during iteration")
            node = node.successor()

    def __str__(self) -> str:
        lines = ["RedBlackTree"]
        if self._root is not None:
            self._draw(self._root, "", True, lines)
        return "\n".join(lines)

    def _draw(self, node: _Node[K, V], prefix: str, is_tail: bool, lines: list[str]) -> None:
        if node.right is not None:
            self._draw(node.right, prefix + ("│   " if is_tail else "    "), False, lines)
        lines.append(prefix + ("└── " if is_tail else "┌── ") + str(node.key))
        if node.left is not None:
            self._draw(node.left, prefix + ("    " if is_tail else "│   "), True, lines)

    def put(self, key: K, value: V) -> None:
        """
        Insert a key/value pair, replacing the value if the key already exists.

        Args:
            key: Key to insert
            value: Value to associate with the key
        """
        self._put(key, value, None)

    def put_if(self, key: K, value: V, predicate: Callable[[K, K], bool]) -> None:
        """
        Insert a key/value pair unless an equal key exists and predicate denies it.

        When an equal key is already stored, ``predicate(existing_key, key)`` is
        called; if it returns True both the stored key and value are replaced,
        otherwise the tree is left untouched.

        Args:
            key: Key to insert
            value: Value to associate with the key
            predicate: Decides whether an existing entry may be replaced
        """
        self._put(key, value, predicate)

    def _put(self, key: K, value: V, predicate: Optional[Callable[[K, K], bool]]) -> None:
        if self._root is None:
            self._root = _Node(key, value, Color.black)
            self._size = 1
            self._version += 1
            return

        node = self._root
        while True:
            cmp = self.comparator(key, node.key)
            if cmp == 0:
                if predicate is None:
                    node.value = value
                elif predicate(node.key, key):
                    node.key = key
                    node.value = value
                return
            child = node.left if cmp < 0 else node.right
            if child is None:
                break
            node = child

        inserted = _Node(key, value, Color.red, parent=node)
        if cmp < 0:
            node.left = inserted
        else:
            node.right = inserted
        self._size += 1
        self._version += 1
        self._insert_fixup(inserted)

    def _insert_fixup(self, node: _Node[K, V]) -> None:
        while node.parent is not None and node.parent.color == Color.red:
            parent = node.parent
            grandparent = node.grandparent()
            uncle = node.uncle()
            if _color(uncle) == Color.red:
                parent.color = Color.black
                uncle.color = Color.black
                grandparent.color = Color.red
                node = grandparent
                continue

            if parent is grandparent.left:
                if node is parent.right:
                    self._rotate_left(parent)
                    node, parent = parent, node
                parent.color = Color.black
                grandparent.color = Color.red
                self._rotate_right(grandparent)
            else:
                if node is parent.left:
                    self._rotate_right(parent)
                    node, parent = parent, node
                parent.color = Color.black
                grandparent.color = Color.red
                self._rotate_left(grandparent)
        self._root.color = Color.black

    def get(self, key: K) -> tuple[Optional[V], bool]:
        """
        Look up the value stored under key.

        Args:
            key: Key to search for

        Returns:
            (value, True) if found, otherwise (None, False)
        """
        node = self._lookup(key)
        if node is None:
            return None, False
        return node.value, True

    def _lookup(self, key: K) -> Optional[_Node[K, V]]:
        node = self._root
        while node is not None:
            cmp = self.comparator(key, node.key)
            if cmp == 0:
                return node
            node = node.left if cmp < 0 else node.right
        return None

    def remove(self, key: K) -> None:
        """
        Remove key from the tree. Removing a missing key is a no-op.

        Args:
            key: Key to remove
        """
        node = self._lookup(key)
        if node is None:
            return

        if node.left is not None and node.right is not None:
            successor = node.right.leftmost()
            node.key = successor.key
            node.value = successor.value
            node = successor

        child = node.left if node.left is not None else node.right
        if child is not None:
            # A lone child under a valid coloring is red: it takes over the black.
            self._replace(node, child)
            if node.color == Color.black:
                child.color = Color.black
        elif node.parent is None:
            self._root = None
        else:
            # The leaf stands in for the absent child while fixup rebalances.
            if node.color == Color.black:
                self._delete_fixup(node)
            self._replace(node, None)

        self._size -= 1
        self._version += 1

    def _delete_fixup(self, node: _Node[K, V]) -> None:
        while node is not self._root and node.color == Color.black:
            parent = node.parent
            if node is parent.left:
                sibling = parent.right
                if sibling.color == Color.red:
                    sibling.color = Color.black
                    parent.color = Color.red
                    self._rotate_left(parent)
                    sibling = parent.right
                if _color(sibling.left) == Color.black and _color(sibling.right) == Color.black:
                    sibling.color = Color.red
                    node = parent
                    continue
                if _color(sibling.right) == Color.black:
                    sibling.left.color = Color.black
                    sibling.color = Color.red
                    self._rotate_right(sibling)
                    sibling = parent.right
                sibling.color = parent.color
                parent.color = Color.black
                sibling.right.color = Color.black
                self._rotate_left(parent)
            else:
                sibling = parent.left
                if sibling.color == Color.red:
                    sibling.color = Color.black
                    parent.color = Color.red
                    self._rotate_right(parent)
                    sibling = parent.left
                if _color(sibling.left) == Color.black and _color(sibling.right) == Color.black:
                    sibling.color = Color.red
                    node = parent
                    continue
                if _color(sibling.left) == Color.black:
                    sibling.right.color = Color.black
                    sibling.color = Color.red
                    self._rotate_left(sibling)
                    sibling = parent.left
                sibling.color = parent.color
                parent.color = Color.black
                sibling.left.color = Color.black
                self._rotate_right(parent)
            break
        node.color = Color.black
        self._root.color = Color.black

    def _replace(self, old: _Node[K, V], new: Optional[_Node[K, V]]) -> None:
        """Link new into old's position under old's parent."""
        if old.parent is None:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        if new is not None:
            new.parent = old.parent

    def _rotate_left(self, node: _Node[K, V]) -> None:
        pivot = node.right
        self._replace(node, pivot)
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: _Node[K, V]) -> None:
        pivot = node.left
        self._replace(node, pivot)
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        pivot.right = node
        node.parent = pivot

    def empty(self) -> bool:
        """Check if tree is empty."""
        return self._size == 0

    def size(self) -> int:
        """Get number of elements in tree."""
        return self._size

    def clear(self) -> None:
        """Remove all elements."""
        self._root = None
        self._size = 0
        self._version += 1

    def keys(self) -> list[K]:
        """Return all keys in ascending order."""
        return list(self)

    def values(self) -> list[V]:
        """Return all values in ascending key order."""
        return [node.value for node in self._nodes()]

    def items(self) -> list[tuple[K, V]]:
        """Return all (key, value) pairs in ascending key order."""
        return [(node.key, node.value) for node in self._nodes()]

    def reversed_keys(self) -> list[K]:
        """Return all keys in descending order."""
        return [node.key for node in self._nodes(reverse=True)]

    def reversed_values(self) -> list[V]:
        """Return all values in descending key order."""
        return [node.value for node in self._nodes(reverse=True)]

    def _nodes(self, reverse: bool = False) -> Iterator[_Node[K, V]]:
        if self._root is None:
            return
        if reverse:
            node = self._root.rightmost()
            while node is not None:
                yield node
                node = node.predecessor()
        else:
            node = self._root.leftmost()
            while node is not None:
                yield node
                node = node.successor()

    def left(self) -> Optional[Entry]:
        """Return the entry with the smallest key, or None if tree is empty."""
        if self._root is None:
            return None
        return self._root.leftmost().entry()

    def right(self) -> Optional[Entry]:
        """Return the entry with the largest key, or None if tree is empty."""
        if self._root is None:
            return None
        return self._root.rightmost().entry()

    min = left
    max = right

    def floor(self, key: K) -> tuple[Optional[Entry], bool]:
        """
        Find the entry with the largest key less than or equal to key.

        Args:
            key: Key to search for

        Returns:
            (entry, True) if a floor exists, otherwise (None, False)
        """
        candidate = None
        node = self._root
        while node is not None:
            cmp = self.comparator(key, node.key)
            if cmp == 0:
                return node.entry(), True
            if cmp < 0:
                node = node.left
            else:
                candidate = node
                node = node.right
        if candidate is None:
            return None, False
        return candidate.entry(), True

    def ceiling(self, key: K) -> tuple[Optional[Entry], bool]:
        """
        Find the entry with the smallest key greater than or equal to key.

        Args:
            key: Key to search for

        Returns:
            (entry, True) if a ceiling exists, otherwise (None, False)
        """
        candidate = None
        node = self._root
        while node is not None:
            cmp = self.comparator(key, node.key)
            if cmp == 0:
                return node.entry(), True
            if cmp < 0:
                candidate = node
                node = node.left
            else:
                node = node.right
        if candidate is None:
            return None, False
        return candidate.entry(), True

    def iterator(self) -> TreeIterator[K, V]:
        """Get an iterator positioned before the first element."""
        return TreeIterator(self)

    def validate(self) -> None:
        """
        Verify that the red-black invariants hold.

        Raises:
            AssertionError: On the first violated invariant
        """
        root = self._root
        assert _color(root) == Color.black, "Root is not black"
        if root is not None:
            assert root.parent is None, "Root has a parent"

        def check(node: Optional[_Node[K, V]]) -> tuple[int, int]:
            """Return (black_height, node_count) of the subtree."""
            if node is None:
                return 1, 0
            if node.color == Color.red:
                assert _color(node.left) == Color.black, f"Red node {node!r} has red left child"
                assert _color(node.right) == Color.black, f"Red node {node!r} has red right child"
            for child in (node.left, node.right):
                if child is not None:
                    assert child.parent is node, f"Broken parent link under {node!r}"
            if node.left is not None:
                assert self.comparator(node.left.key, node.key) < 0, \
                    f"BST order violated at {node!r}"
            if node.right is not None:
                assert self.comparator(node.right.key, node.key) > 0, \
                    f"BST order violated at {node!r}"
            left_height, left_count = check(node.left)
            right_height, right_count = check(node.right)
            assert left_height == right_height, f"Black-height mismatch at {node!r}"
            height = left_height + (1 if node.color == Color.black else 0)
            return height, left_count + right_count + 1

        _, count = check(root)
        assert count == self._size, f"Size {self._size} but {count} reachable nodes"
        # Local child checks miss grandchildren; in-order keys must ascend.
        keys = self.keys()
        for a, b in zip(keys, keys[1:]):
            assert self.comparator(a, b) < 0, "In-order keys are not ascending"


class _Position(IntEnum):
    begin = 0
    between = 1
    end = 2


class TreeIterator(Generic[K, V]):
    """
    Stateful cursor over a tree's entries.

    The cursor starts before the first element. Structural changes to the tree
    (inserting a new key, removing a key, clearing) invalidate the cursor:
    the next call to next() or prev() raises ConcurrentModificationError until
    the cursor is reseated with begin(), end(), first() or last().
    """

    def __init__(self, tree: Tree[K, V]):
        self.tree = tree
        self._node: Optional[_Node[K, V]] = None
        self._position = _Position.begin
        self._version = tree._version

    def _check_version(self) -> None:
        if self._version != self.tree._version:
            raise ConcurrentModificationError("Tree was modified during iteration")

    def next(self) -> bool:
        """
        Move to the next element in ascending order.

        Returns:
            True if the cursor now sits on an element, False if it moved past the end
        """
        self._check_version()
        if self._position == _Position.end:
            return False
        if self._position == _Position.begin:
            root = self.tree._root
            self._node = root.leftmost() if root is not None else None
        else:
            self._node = self._node.successor()

        if self._node is None:
            self._position = _Position.end
            return False
        self._position = _Position.between
        return True

    def prev(self) -> bool:
        """
        Move to the previous element in ascending order.

        Returns:
            True if the cursor now sits on an element, False if it moved before the start
        """
        self._check_version()
        if self._position == _Position.begin:
            return False
        if self._position == _Position.end:
            root = self.tree._root
            self._node = root.rightmost() if root is not None else None
        else:
            self._node = self._node.predecessor()

        if self._node is None:
            self._position = _Position.begin
            return False
        self._position = _Position.between
        return True

    def key(self) -> Optional[K]:
        """Current key, or None before the first or after the last element."""
        return self._node.key if self._node is not None else None

    def value(self) -> Optional[V]:
        """Current value, or None before the first or after the last element."""
        return self._node.value if self._node is not None else None

    def begin(self) -> None:
        """Reset the cursor to before the first element."""
        self._node = None
        self._position = _Position.begin
        self._version = self.tree._version

    def end(self) -> None:
        """Reset the cursor to after the last element."""
        self._node = None
        self._position = _Position.end
        self._version = self.tree._version

    def first(self) -> bool:
        """Move to the first element. Returns False if the tree is empty."""
        self.begin()
        return self.next()

    def last(self) -> bool:
        """Move to the last element. Returns False if the tree is empty."""
        self.end()
        return self.prev()
