"""
Ordering utilities over PreciseNumber (total order, selection, stable sort).

Key behaviours:
- Comparison is exact: operands are commonized and compared as integers.
- min/max/clamp return one of their inputs unchanged (precision is preserved).
- Magnitude selection compares absolute values and returns the signed input.

Notes:
- Ties in `maximum`/`minimum` return the second argument, mirroring `x > y ? x : y`.
- Sorting relies on Python's stable built-in sort.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, Iterable, List, Optional, TypeVar, Union

from .exc import PreciseNumberError
from .number import PreciseNumber, to_precise_number

T = TypeVar("T")

Comparable = Union[PreciseNumber, int, float, Decimal]


# ----------------------------
# Three-way compare
# ----------------------------

def compare(left: PreciseNumber, right: Comparable) -> int:
    """Return -1, 0 or 1 for left <, ==, > right."""
    return left.compare_to(right)


# ----------------------------
# Selection
# ----------------------------

def maximum(x: PreciseNumber, y: PreciseNumber) -> PreciseNumber:
    return x if x > y else y


def minimum(x: PreciseNumber, y: PreciseNumber) -> PreciseNumber:
    return x if x < y else y


def clamp(value: PreciseNumber, lo: Comparable, hi: Comparable) -> PreciseNumber:
    """Clamp `value` into [lo, hi]; bounds may be native numbers.

    Bounds are converted with the typed adapter; lo > hi is rejected.
    """
    lo_p = to_precise_number(lo)
    hi_p = to_precise_number(hi)
    if lo_p > hi_p:
        raise PreciseNumberError(f"clamp: lower bound {lo_p} exceeds upper bound {hi_p}")
    clamped_to_max = hi_p if value > hi_p else value
    return lo_p if value < lo_p else clamped_to_max


def max_magnitude(x: PreciseNumber, y: PreciseNumber) -> PreciseNumber:
    """Input with the larger absolute value (x on ties)."""
    return x if abs(x) >= abs(y) else y


def min_magnitude(x: PreciseNumber, y: PreciseNumber) -> PreciseNumber:
    """Input with the smaller absolute value (x on ties)."""
    return x if abs(x) <= abs(y) else y


# ----------------------------
# Sorting
# ----------------------------

def stable_sort(
    items: Iterable[T],
    *,
    key: Optional[Callable[[T], PreciseNumber]] = None,
    reverse: bool = False,
) -> List[T]:
    """Stable sort by PreciseNumber value (ascending unless `reverse`).

    Items with equal values retain their original insertion order.
    """
    lst = list(items)
    if key is None:
        return sorted(lst, reverse=reverse)
    return sorted(lst, key=key, reverse=reverse)


__all__ = [
    "compare",
    "maximum",
    "minimum",
    "clamp",
    "max_magnitude",
    "min_magnitude",
    "stable_sort",
]
