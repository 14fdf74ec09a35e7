"""
PyOrdered: ordered containers on a red-black tree

Provides a comparator-driven red-black tree engine with a bidirectional
iterator, plus TreeMap and TreeSet adapters built on it.
"""

__version__ = "0.1.0"

from .rbtree import Color, ConcurrentModificationError, Entry, Tree, TreeIterator
from .treemap import MapIterator, TreeMap
from .treeset import SetIterator, TreeSet
from .comparators import (
    OrderingWarning,
    number_comparator,
    string_comparator,
    time_comparator,
    reverse,
)

__all__ = [
    "Color",
    "ConcurrentModificationError",
    "Entry",
    "Tree",
    "TreeIterator",
    "MapIterator",
    "TreeMap",
    "SetIterator",
    "TreeSet",
    "OrderingWarning",
    "number_comparator",
    "string_comparator",
    "time_comparator",
    "reverse",
]
