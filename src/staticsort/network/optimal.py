"""
Comparator-count-optimal sorting networks for n = 2..8.

Stages are listed layer by layer (comparators inside a layer touch disjoint
wires). Data from https://bertdobbelaere.github.io/sorting_networks.html.

    n : comparators
    2 : 1
    3 : 3
    4 : 5
    5 : 9
    6 : 12
    7 : 16
    8 : 19
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .swap import Edge

Layers = Tuple[Tuple[Edge, ...], ...]

OPTIMAL_LAYERS: Dict[int, Layers] = {
    2: (
        ((0, 1),),
    ),
    3: (
        ((0, 2),),
        ((0, 1),),
        ((1, 2),),
    ),
    4: (
        ((0, 2), (1, 3)),
        ((0, 1), (2, 3)),
        ((1, 2),),
    ),
    5: (
        ((0, 3), (1, 4)),
        ((0, 2), (1, 3)),
        ((0, 1), (2, 4)),
        ((1, 2), (3, 4)),
        ((2, 3),),
    ),
    6: (
        ((0, 5), (1, 3), (2, 4)),
        ((1, 2), (3, 4)),
        ((0, 3), (2, 5)),
        ((0, 1), (2, 3), (4, 5)),
        ((1, 2), (3, 4)),
    ),
    7: (
        ((0, 6), (2, 3), (4, 5)),
        ((0, 2), (1, 4), (3, 6)),
        ((0, 1), (2, 5), (3, 4)),
        ((1, 2), (4, 6)),
        ((2, 3), (4, 5)),
        ((1, 2), (3, 4), (5, 6)),
    ),
    8: (
        ((0, 2), (1, 3), (4, 6), (5, 7)),
        ((0, 4), (1, 5), (2, 6), (3, 7)),
        ((0, 1), (2, 3), (4, 5), (6, 7)),
        ((2, 4), (3, 5)),
        ((1, 4), (3, 6)),
        ((1, 2), (3, 4), (5, 6)),
    ),
}

OPTIMAL_SIZES: Dict[int, int] = {2: 1, 3: 3, 4: 5, 5: 9, 6: 12, 7: 16, 8: 19}

__all__ = [
    "OPTIMAL_LAYERS",
    "OPTIMAL_SIZES",
    "has_optimal",
    "optimal_layers",
    "optimal_network",
]


def has_optimal(n: int) -> bool:
    return n in OPTIMAL_LAYERS


def optimal_layers(n: int) -> Layers:
    """Return the stages of the optimal network for `n` (2 <= n <= 8)."""
    try:
        return OPTIMAL_LAYERS[n]
    except KeyError:
        raise ValueError(
            f"No optimal network table for n={n!r}. Supported: {sorted(OPTIMAL_LAYERS)}"
        ) from None


def optimal_network(n: int) -> Tuple[Edge, ...]:
    """Return the optimal network for `n` flattened into execution order."""
    flat: List[Edge] = []
    for stage in optimal_layers(n):
        flat.extend(stage)
    return tuple(flat)
