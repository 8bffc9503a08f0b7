"""
Property helpers for validating sorting results.

Order checks take the same "precedes" predicate as the sorters, so a
descending comparator validates a descending result.

Public API (stable):
    is_nondecreasing(xs, lt=None) -> bool
    first_order_violation_index(xs, lt=None) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    assert_unchanged(before, after) -> None
"""

from __future__ import annotations

import operator
from collections import Counter
from typing import Any, Callable, Dict, Optional, Sequence

__all__ = [
    "is_nondecreasing",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_unchanged",
]


def first_order_violation_index(
    xs: Sequence[Any], lt: Optional[Callable[[Any, Any], bool]] = None
) -> Optional[int]:
    """
    Return the first index i where lt(xs[i+1], xs[i]), or None if ordered.

        i = first_order_violation_index(out)
        assert i is None, f"out of order at i={i}: {out[i]} then {out[i+1]}"
    """
    if lt is None:
        lt = operator.lt
    for i in range(len(xs) - 1):
        if lt(xs[i + 1], xs[i]):
            return i
    return None


def is_nondecreasing(xs: Sequence[Any], lt: Optional[Callable[[Any, Any], bool]] = None) -> bool:
    return first_order_violation_index(xs, lt) is None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """True iff `a` and `b` hold the same multiset of (hashable) values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    Map value -> count_a - count_b for every value whose counts differ.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def assert_unchanged(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert `after` is element-wise identical to `before`.

    Used to check that a length-mismatched call left the storage untouched.
    """
    if len(before) != len(after):
        raise AssertionError(f"Storage changed: length {len(before)} -> {len(after)}")
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Storage changed at index {i}: before={x!r}, after={y!r}")
