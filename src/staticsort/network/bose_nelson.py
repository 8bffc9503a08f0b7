"""
General sorting-network generator (Bose-Nelson construction).

The network for n elements is built by recursive halving:

    split(I, M):
        if M <= 1: nothing
        L = M // 2
        split(I, L); split(I + L, M - L); merge(I, I + L, L, M - L)

    merge(I, J, X, Y):   # merge sorted blocks [I, I+X) and [J, J+Y)
        X == Y == 1  -> (I, J)
        X == 1, Y == 2 -> (I, J+1), (I, J)
        X == 2, Y == 1 -> (I, J), (I+1, J)
        otherwise:
            L  = X >> 1
            M' = (Y if X is odd else Y + 1) >> 1
            merge(I, J, L, M')
            merge(I + L, J + M', X - L, Y - M')
            merge(I + L, J, X - L, M')

The three-way merge split is what keeps the comparator count close to
minimal; for n = 2..8 it already matches the optimal counts
(1, 3, 5, 9, 12, 16, 19).

Public API (stable):
    generate(n: int) -> tuple[tuple[int, int], ...]
    comparator_count(n: int) -> int
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple

from .swap import Edge

__all__ = ["generate", "comparator_count"]


@lru_cache(maxsize=None)
def generate(n: int) -> Tuple[Edge, ...]:
    """
    Return the Bose-Nelson edge sequence for `n` elements.

    Parameters
    ----------
    n : int
        Number of elements. Must be >= 0.

    Returns
    -------
    tuple[tuple[int, int], ...]
        Ordered (i, j) pairs with 0 <= i < j < n.

    Raises
    ------
    ValueError
        If `n` is not a nonnegative int.
    """
    _validate_n(n)
    edges: List[Edge] = []
    _split(edges, 0, n)
    return tuple(edges)


def comparator_count(n: int) -> int:
    return len(generate(n))


# ------------------------- recursion ------------------------- #


def _split(out: List[Edge], i: int, m: int) -> None:
    if m <= 1:
        return
    half = m >> 1
    _split(out, i, half)
    _split(out, i + half, m - half)
    _merge(out, i, i + half, half, m - half)


def _merge(out: List[Edge], i: int, j: int, x: int, y: int) -> None:
    if x <= 0 or y <= 0:
        return
    if x == 1 and y == 1:
        out.append((i, j))
    elif x == 1 and y == 2:
        out.append((i, j + 1))
        out.append((i, j))
    elif x == 2 and y == 1:
        out.append((i, j))
        out.append((i + 1, j))
    else:
        lx = x >> 1
        my = (y if x & 1 else y + 1) >> 1
        _merge(out, i, j, lx, my)
        _merge(out, i + lx, j + my, x - lx, y - my)
        _merge(out, i + lx, j, x - lx, my)


def _validate_n(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"n must be an int; got {n!r}")
    if n < 0:
        raise ValueError(f"n must be nonnegative; got {n}")
