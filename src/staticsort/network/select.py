"""
Network selection: which edge list sorts n elements.

`network_for(n)` resolves the per-n choice once and memoizes it:

- n in 2..8  -> the comparator-optimal table (`optimal`)
- n <= 1     -> the empty network (`trivial`)
- otherwise  -> the Bose-Nelson construction (`bose-nelson`)

Networks are immutable values; the cache only ever holds tuples.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, List, Optional, Tuple

import numpy as np

from .bose_nelson import generate
from .optimal import has_optimal, optimal_network
from .swap import Comparator, Edge, apply_edges, apply_edges_rows

KIND_OPTIMAL = "optimal"
KIND_BOSE_NELSON = "bose-nelson"
KIND_TRIVIAL = "trivial"
SUPPORTED_KINDS = {KIND_OPTIMAL, KIND_BOSE_NELSON}

__all__ = [
    "KIND_OPTIMAL",
    "KIND_BOSE_NELSON",
    "KIND_TRIVIAL",
    "SUPPORTED_KINDS",
    "Network",
    "network_for",
]


@dataclass(frozen=True)
class Network:
    n: int
    edges: Tuple[Edge, ...]
    kind: str

    @property
    def size(self) -> int:
        """Number of compare-exchanges executed per call."""
        return len(self.edges)

    def layers(self) -> Tuple[Tuple[Edge, ...], ...]:
        """
        Partition the edges into stages of pairwise-disjoint comparators.

        Each edge goes into the earliest stage after the last stage that
        touched either of its wires, so dependencies keep their order.
        """
        ready = [0] * self.n
        stages: List[List[Edge]] = []
        for i, j in self.edges:
            k = max(ready[i], ready[j])
            if k == len(stages):
                stages.append([])
            stages[k].append((i, j))
            ready[i] = ready[j] = k + 1
        return tuple(tuple(s) for s in stages)

    @property
    def depth(self) -> int:
        return len(self.layers())

    def apply(self, view: Any, lt: Comparator) -> None:
        apply_edges(view, self.edges, lt)

    def apply_rows(self, block: np.ndarray) -> None:
        apply_edges_rows(block, self.edges)


def network_for(n: int, kind: Optional[str] = None) -> Network:
    """
    Return the network used to sort `n` elements.

    Parameters
    ----------
    n : int
        Number of elements (>= 0).
    kind : str | None
        None selects automatically. "bose-nelson" forces the general
        construction; "optimal" requires 2 <= n <= 8.

    Raises
    ------
    ValueError
        On invalid `n`, unknown `kind`, or "optimal" outside 2..8.
    """
    if kind is not None and kind not in SUPPORTED_KINDS:
        raise ValueError(f"Unsupported network kind: {kind!r}. Supported: {sorted(SUPPORTED_KINDS)}")
    return _build(n, kind)


@lru_cache(maxsize=None)
def _build(n: int, kind: Optional[str]) -> Network:
    edges = generate(n)  # validates n
    if kind == KIND_BOSE_NELSON:
        return Network(n=n, edges=edges, kind=KIND_BOSE_NELSON)
    if kind == KIND_OPTIMAL or has_optimal(n):
        return Network(n=n, edges=optimal_network(n), kind=KIND_OPTIMAL)
    if n <= 1:
        return Network(n=n, edges=(), kind=KIND_TRIVIAL)
    return Network(n=n, edges=edges, kind=KIND_BOSE_NELSON)
