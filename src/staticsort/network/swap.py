"""
Compare-exchange primitives.

Every sorting network in this package reduces to one operation applied to a
fixed list of index pairs:

    swap_if(view, i, j, lt)   # if lt(view[j], view[i]): exchange the slots

Two renditions are provided:

- `swap_if`: the general branching form. Works on any indexable, mutable
  view and any comparator; calls the comparator exactly once per edge.
- `swap_if_rows`: a branchless numpy form that applies one edge to every row
  of a 2-D array at once, using the natural `<` ordering. It is value-identical
  to the branching form on every input, NaN included: a comparison involving
  NaN is False, so the pair is left untouched exactly as `swap_if` would.

Public API (stable):
    exchange(seq, i, j) -> None
    swap_if(view, i, j, lt) -> None
    swap_if_rows(block, i, j) -> None
    apply_edges(view, edges, lt) -> None
    apply_edges_rows(block, edges) -> None
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Tuple

import numpy as np

Comparator = Callable[[Any, Any], bool]
Edge = Tuple[int, int]

__all__ = [
    "Comparator",
    "Edge",
    "exchange",
    "swap_if",
    "swap_if_rows",
    "apply_edges",
    "apply_edges_rows",
]


def exchange(seq: Any, i: int, j: int) -> None:
    """Swap seq[i] and seq[j] in place."""
    if isinstance(seq, np.ndarray):
        # Rows and structured records index as views into `seq`; fancy
        # indexing copies the right-hand side before anything is written.
        seq[[i, j]] = seq[[j, i]]
    else:
        seq[i], seq[j] = seq[j], seq[i]


def swap_if(view: Any, i: int, j: int, lt: Comparator) -> None:
    """Exchange view[i] and view[j] iff lt(view[j], view[i])."""
    if lt(view[j], view[i]):
        swap = getattr(view, "swap", None)
        if swap is None:
            exchange(view, i, j)
        else:
            swap(i, j)


def swap_if_rows(block: np.ndarray, i: int, j: int) -> None:
    """
    Apply edge (i, j) to every row of `block` in place.

    Rows where block[r, j] < block[r, i] get columns i and j exchanged; all
    other rows are untouched.
    """
    lo = block[:, i]
    hi = block[:, j]
    mask = hi < lo
    if not mask.any():
        return
    tmp = lo[mask].copy()
    block[mask, i] = hi[mask]
    block[mask, j] = tmp


def apply_edges(view: Any, edges: Iterable[Edge], lt: Comparator) -> None:
    """Run a compare-exchange sequence against `view`, in listed order."""
    for i, j in edges:
        swap_if(view, i, j, lt)


def apply_edges_rows(block: np.ndarray, edges: Iterable[Edge]) -> None:
    for i, j in edges:
        swap_if_rows(block, i, j)
