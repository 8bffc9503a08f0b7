"""
Network package public API.

Re-exports:
    - Primitives:   swap_if, swap_if_rows
    - Generators:   generate (Bose-Nelson), optimal_network, optimal_layers
    - Selection:    Network, network_for
"""

from .bose_nelson import comparator_count, generate
from .optimal import OPTIMAL_SIZES, has_optimal, optimal_layers, optimal_network
from .select import (
    KIND_BOSE_NELSON,
    KIND_OPTIMAL,
    KIND_TRIVIAL,
    Network,
    network_for,
)
from .swap import Comparator, Edge, swap_if, swap_if_rows

__all__ = [
    "Comparator",
    "Edge",
    "swap_if",
    "swap_if_rows",
    "generate",
    "comparator_count",
    "OPTIMAL_SIZES",
    "has_optimal",
    "optimal_layers",
    "optimal_network",
    "KIND_BOSE_NELSON",
    "KIND_OPTIMAL",
    "KIND_TRIVIAL",
    "Network",
    "network_for",
]
