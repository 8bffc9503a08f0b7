"""
Fixed-size sorters.

`StaticSort(n)` owns the network for n elements and applies it to any
mutable sequence of exactly n elements; `StaticTimSort(n)` adds the
adaptive pre-scan from `staticsort.adaptive` for n >= 8.

Call shapes (all sort in place and return None):

    sorter(seq)                      # whole container, natural `<` order
    sorter(seq, lt)                  # custom strict-weak-order predicate
    sorter.sort_range(seq, first, last[, lt])   # seq[first:last]

If the actual length differs from n the call does nothing. Pass
`strict=True` to get a `LengthMismatchError` instead.

Module-level helpers take n from the call itself and reuse one sorter per
distinct n:

    sort(seq[, lt])                  adaptive_sort(seq[, lt])
    sort_range(seq, first, last[, lt], n=None)
    adaptive_sort_range(seq, first, last[, lt], n=None)
    sort_rows(block)                 # 2-D numpy array, each row sorted

Equal elements may be reordered (not stable). A comparator exception
propagates as is and leaves the sequence partially permuted.
"""

from __future__ import annotations

import operator
from functools import lru_cache
from typing import Any, Optional

import numpy as np

from .access import LengthMismatchError, SequenceView, view_of, view_range
from .adaptive import presorted
from .network.select import Network, network_for
from .network.swap import Comparator

__all__ = [
    "StaticSort",
    "StaticTimSort",
    "sort",
    "adaptive_sort",
    "sort_range",
    "adaptive_sort_range",
    "sort_rows",
]


class StaticSort:
    """Sort sequences of exactly `n` elements with a precomputed network."""

    def __init__(self, n: int, kind: Optional[str] = None) -> None:
        self.network: Network = network_for(n, kind)

    @property
    def n(self) -> int:
        return self.network.n

    def __call__(self, seq: Any, lt: Optional[Comparator] = None, *, strict: bool = False) -> None:
        view = view_of(seq)
        if self._matches(len(view), strict):
            self._run(view, lt if lt is not None else operator.lt)

    def sort_range(
        self,
        seq: Any,
        first: int,
        last: int,
        lt: Optional[Comparator] = None,
        *,
        strict: bool = False,
    ) -> None:
        view = view_range(seq, first, last)
        if self._matches(len(view), strict):
            self._run(view, lt if lt is not None else operator.lt)

    def _matches(self, actual: int, strict: bool) -> bool:
        if actual == self.n:
            return True
        if strict:
            raise LengthMismatchError(self.n, actual)
        return False

    def _run(self, view: SequenceView, lt: Comparator) -> None:
        self.network.apply(view, lt)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.n})"


class StaticTimSort(StaticSort):
    """`StaticSort` that skips the network for ascending or descending input."""

    def _run(self, view: SequenceView, lt: Comparator) -> None:
        if not presorted(view, self.n, lt):
            self.network.apply(view, lt)


# ------------------------- module-level helpers ------------------------- #


@lru_cache(maxsize=None)
def _sorter(n: int, adaptive: bool) -> StaticSort:
    return StaticTimSort(n) if adaptive else StaticSort(n)


def sort(seq: Any, lt: Optional[Comparator] = None) -> None:
    """Sort `seq` in place with the network for len(seq)."""
    _sorter(len(seq), False)(seq, lt)


def adaptive_sort(seq: Any, lt: Optional[Comparator] = None) -> None:
    """Like `sort`, with the run-detection pre-scan for len(seq) >= 8."""
    _sorter(len(seq), True)(seq, lt)


def sort_range(
    seq: Any,
    first: int,
    last: int,
    lt: Optional[Comparator] = None,
    *,
    n: Optional[int] = None,
    strict: bool = False,
) -> None:
    """
    Sort seq[first:last] in place.

    When `n` is given it is the sorter size fixed by the caller and a
    distance mismatch leaves `seq` untouched (or raises with strict=True).
    """
    size = len(view_range(seq, first, last)) if n is None else n
    _sorter(size, False).sort_range(seq, first, last, lt, strict=strict)


def adaptive_sort_range(
    seq: Any,
    first: int,
    last: int,
    lt: Optional[Comparator] = None,
    *,
    n: Optional[int] = None,
    strict: bool = False,
) -> None:
    size = len(view_range(seq, first, last)) if n is None else n
    _sorter(size, True).sort_range(seq, first, last, lt, strict=strict)


def sort_rows(block: np.ndarray) -> None:
    """
    Sort every row of a 2-D numpy array in place under natural `<`.

    Uses the branchless masked form of compare-exchange, so the result for
    each row equals `sort(row)`; rows containing NaN are handled the same way
    (pairs involving NaN are never exchanged).
    """
    if not isinstance(block, np.ndarray):
        raise ValueError(f"sort_rows expects a numpy.ndarray; got {type(block).__name__}")
    if block.ndim != 2:
        raise ValueError(f"sort_rows expects a 2-D array; got ndim={block.ndim}")
    if block.shape[0] == 0:
        return
    network_for(block.shape[1]).apply_rows(block)
