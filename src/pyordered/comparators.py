"""
Three-way comparators for common key types.

Each comparator returns -1, 0 or 1 when its first argument is less than,
equal to, or greater than its second, which is the contract Tree, TreeMap and
TreeSet expect.
"""

from __future__ import annotations

import math
import warnings
from datetime import date, datetime, time
from typing import Callable, TypeVar, Union

T = TypeVar("T")

Number = Union[int, float]
Temporal = Union[datetime, date, time]


class OrderingWarning(UserWarning):
    """Warning about values that do not fit a strict total order."""
    pass


def number_comparator(a: Number, b: Number) -> int:
    """
    Compare two numbers.

    NaN is unordered: it compares equal to everything here, which breaks the
    transitivity a tree relies on, so an OrderingWarning is emitted.
    """
    if (isinstance(a, float) and math.isnan(a)) or (isinstance(b, float) and math.isnan(b)):
        warnings.warn(
            "NaN is not totally ordered; tree ordering may become inconsistent",
            OrderingWarning,
            stacklevel=2
        )
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


def string_comparator(a: str, b: str) -> int:
    """Compare two strings code point by code point, shorter prefix first."""
    for ca, cb in zip(a, b):
        if ca != cb:
            return -1 if ord(ca) < ord(cb) else 1
    if len(a) < len(b):
        return -1
    if len(a) > len(b):
        return 1
    return 0


def time_comparator(a: Temporal, b: Temporal) -> int:
    """Compare two datetimes, dates or times chronologically."""
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


def reverse(comparator: Callable[[T, T], int]) -> Callable[[T, T], int]:
    """
    Wrap a comparator to produce the opposite order.

    Args:
        comparator: Comparator to invert

    Returns:
        Comparator ordering keys from largest to smallest
    """
    def compare(a: T, b: T) -> int:
        return comparator(b, a)
    return compare
