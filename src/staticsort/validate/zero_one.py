"""
Exhaustive network verification by the zero-one principle.

A comparator network sorts every length-n input iff it sorts all 2**n
binary inputs. All of them are materialized at once as a (2**n, n) uint8
array, pushed through the network with the masked row form, and checked
for monotone rows.

Public API (stable):
    binary_inputs(n) -> numpy.ndarray
    sorts_all_binary(edges, n) -> bool
    first_unsorted_binary(edges, n) -> list[int] | None
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np

from ..network.swap import Edge, apply_edges_rows

MAX_EXHAUSTIVE_N = 20

__all__ = ["MAX_EXHAUSTIVE_N", "binary_inputs", "sorts_all_binary", "first_unsorted_binary"]


def binary_inputs(n: int) -> np.ndarray:
    """Every 0/1 vector of length n, one per row (row r is r in binary)."""
    if not isinstance(n, int) or n < 0:
        raise ValueError(f"n must be a nonnegative int; got {n!r}")
    if n > MAX_EXHAUSTIVE_N:
        raise ValueError(f"n={n} too large for exhaustive check (max {MAX_EXHAUSTIVE_N})")
    codes = np.arange(1 << n, dtype=np.uint32)[:, None]
    shifts = np.arange(n - 1, -1, -1, dtype=np.uint32)[None, :]
    return ((codes >> shifts) & 1).astype(np.uint8)


def first_unsorted_binary(edges: Iterable[Edge], n: int) -> Optional[List[int]]:
    """Return a binary input the network fails to sort, or None."""
    inputs = binary_inputs(n)
    if n < 2:
        return None
    block = inputs.copy()
    apply_edges_rows(block, edges)
    bad = np.nonzero((block[:, 1:] < block[:, :-1]).any(axis=1))[0]
    if bad.size == 0:
        return None
    return inputs[int(bad[0])].tolist()


def sorts_all_binary(edges: Iterable[Edge], n: int) -> bool:
    return first_unsorted_binary(edges, n) is None
