"""
Oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth. Custom "precedes"
predicates are turned into a key with `functools.cmp_to_key`, so the oracle
accepts the same comparators as the sorters.

Public API (stable):
    oracle_sort(a, lt=None) -> list
    equals_oracle(a, out, lt=None) -> bool

Networks are not stable, so `equals_oracle` is only exact when equal
elements are indistinguishable (plain ints, floats without NaN, strings).
"""

from __future__ import annotations

import functools
from typing import Any, Callable, List, Optional, Sequence

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[Any], lt: Optional[Callable[[Any, Any], bool]] = None) -> List[Any]:
    """Return a new list with the elements of `a` in nondecreasing order."""
    if lt is None:
        return sorted(a)

    def _cmp(x: Any, y: Any) -> int:
        if lt(x, y):
            return -1
        if lt(y, x):
            return 1
        return 0

    return sorted(a, key=functools.cmp_to_key(_cmp))


def equals_oracle(
    a: Sequence[Any], out: Sequence[Any], lt: Optional[Callable[[Any, Any], bool]] = None
) -> bool:
    return list(out) == oracle_sort(a, lt)
